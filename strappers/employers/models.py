"""
Models for employers.

Employers publish job ads, observe project boards to follow the teams at
work, and shortlist students as candidates.
"""

import logging

from django.db import models
from django.db import transaction
from django.utils.translation import gettext_lazy as _

from strappers.core.models import BaseModel
from strappers.core.models import PasswordHashMixin

logger = logging.getLogger(__name__)


class Employer(PasswordHashMixin, BaseModel):
    name = models.CharField(_("name"), max_length=200)
    logo = models.TextField(_("logo"), blank=True, help_text=_("Image URL or base64 data"))
    website = models.CharField(_("website"), max_length=200, blank=True)
    contact_email = models.EmailField(_("contact email"), max_length=255, blank=True, db_index=True)
    phone = models.CharField(_("phone"), max_length=20, blank=True)
    address = models.CharField(_("address"), max_length=200, blank=True)
    description = models.TextField(_("description"), blank=True)
    subscription_type = models.ForeignKey(
        "catalog.Subscription",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="employers",
        verbose_name=_("subscription"),
    )

    class Meta:
        verbose_name = _("employer")
        verbose_name_plural = _("employers")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class EmployerAd(BaseModel):
    """A job ad for a role, tagged with comma-separated keywords."""

    employer = models.ForeignKey(
        Employer,
        on_delete=models.CASCADE,
        related_name="ads",
        verbose_name=_("employer"),
    )
    role = models.ForeignKey(
        "catalog.Role",
        on_delete=models.PROTECT,
        related_name="employer_ads",
        verbose_name=_("role"),
    )
    tags = models.TextField(_("tags"), blank=True, help_text=_("Comma-separated keywords"))
    job_description = models.TextField(_("job description"), blank=True)

    class Meta:
        verbose_name = _("employer ad")
        verbose_name_plural = _("employer ads")
        ordering = ["-created"]

    def __str__(self) -> str:
        return f"{self.employer}: {self.role}"

    @property
    def tag_list(self) -> list[str]:
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


class EmployerBoard(BaseModel):
    """An employer's relation to a project board they follow."""

    employer = models.ForeignKey(
        Employer,
        on_delete=models.CASCADE,
        related_name="boards",
        verbose_name=_("employer"),
    )
    board = models.ForeignKey(
        "boards.ProjectBoard",
        on_delete=models.CASCADE,
        related_name="employer_boards",
        verbose_name=_("board"),
    )
    observed = models.BooleanField(_("observed"), default=False)
    approved = models.BooleanField(_("approved"), default=False)
    meet_request = models.DateTimeField(_("meeting request"), null=True, blank=True)
    message = models.TextField(_("message"), blank=True)

    class Meta:
        verbose_name = _("employer board")
        verbose_name_plural = _("employer boards")
        constraints = [
            models.UniqueConstraint(fields=["employer", "board"], name="unique_employer_board"),
        ]

    def __str__(self) -> str:
        return f"{self.employer} -> {self.board_id}"


@transaction.atomic
def observe_board(employer: Employer, board, **fields) -> EmployerBoard:
    """
    Record that ``employer`` observes ``board``.

    The board's ``observed`` counter only grows the first time a given
    employer observes it. Extra ``fields`` (approved, meet_request, message)
    are stored on the relation.
    """
    relation, _created = EmployerBoard.objects.select_for_update().get_or_create(
        employer=employer,
        board=board,
    )
    first_time = not relation.observed
    relation.observed = True
    for field, value in fields.items():
        setattr(relation, field, value)
    relation.save()
    if first_time:
        board.record_observation()
    return relation


class EmployerCandidate(BaseModel):
    """A student shortlisted by an employer."""

    employer = models.ForeignKey(
        Employer,
        on_delete=models.CASCADE,
        related_name="candidates",
        verbose_name=_("employer"),
    )
    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="employer_candidacies",
        verbose_name=_("student"),
    )

    class Meta:
        verbose_name = _("employer candidate")
        verbose_name_plural = _("employer candidates")
        ordering = ["-created"]
        constraints = [
            models.UniqueConstraint(fields=["employer", "student"], name="unique_employer_candidate"),
        ]

    def __str__(self) -> str:
        return f"{self.employer}: {self.student}"
