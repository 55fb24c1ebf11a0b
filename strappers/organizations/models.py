"""
Organizations that propose projects (universities, companies, non-profits).
"""

import logging

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from strappers.core.models import BaseModel
from strappers.core.models import PasswordHashMixin

logger = logging.getLogger(__name__)


class Organization(PasswordHashMixin, BaseModel):
    """
    An organization owning projects.

    Inherits from BaseModel:
        - id: integer primary key
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    name = models.CharField(_("name"), max_length=200)
    description = models.CharField(_("description"), max_length=1000, blank=True)
    website = models.CharField(_("website"), max_length=200, blank=True)
    contact_email = models.EmailField(_("contact email"), max_length=255, blank=True, db_index=True)
    phone = models.CharField(_("phone"), max_length=20, blank=True)
    address = models.CharField(_("address"), max_length=200, blank=True)
    type = models.CharField(
        _("type"),
        max_length=50,
        blank=True,
        help_text=_("e.g. 'University', 'Company', 'Non-profit'"),
    )
    logo = models.TextField(
        _("logo"),
        blank=True,
        help_text=_("Image URL or base64 data"),
    )
    terms_use = models.TextField(_("terms of use"), blank=True)
    terms_accepted = models.BooleanField(_("terms accepted"), default=False)
    terms_accepted_at = models.DateTimeField(_("terms accepted at"), null=True, blank=True)
    is_active = models.BooleanField(_("active"), default=True)

    class Meta:
        verbose_name = _("organization")
        verbose_name_plural = _("organizations")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    def accept_terms(self, terms_use: str | None = None) -> None:
        """Record acceptance of the terms of use."""
        if terms_use is not None:
            self.terms_use = terms_use
        self.terms_accepted = True
        self.terms_accepted_at = timezone.now()
        self.save(update_fields=["terms_use", "terms_accepted", "terms_accepted_at", "modified"])
        logger.info("Organization %s accepted the terms of use", self.pk)
