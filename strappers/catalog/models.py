"""
Lookup tables for strAppers.

Contains:
- Major, Year: academic profile of a student
- ProjectStatus, ProjectCriteria: project board states and project tags
- ModuleType: kind of a project module (Frontend, Backend, ...)
- ProgrammingLanguage: a student's preferred language
- Subscription: plan tier for employers and students
- Role: team roles students are assigned to on a project

Rows are seeded once by the ``0002_seed_lookups`` data migration,
see :mod:`strappers.catalog.seeds`.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from strappers.core.models import BaseModel


class ActiveQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)


class Major(BaseModel):
    name = models.CharField(_("name"), max_length=100, unique=True)
    description = models.CharField(_("description"), max_length=500, blank=True)
    department = models.CharField(_("department"), max_length=50, blank=True)
    is_active = models.BooleanField(_("active"), default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        verbose_name = _("major")
        verbose_name_plural = _("majors")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Year(BaseModel):
    name = models.CharField(_("name"), max_length=50, unique=True)
    description = models.CharField(_("description"), max_length=200, blank=True)
    sort_order = models.PositiveSmallIntegerField(_("sort order"), default=0)
    is_active = models.BooleanField(_("active"), default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        verbose_name = _("year")
        verbose_name_plural = _("years")
        ordering = ["sort_order", "name"]

    def __str__(self) -> str:
        return self.name


class ProjectStatus(BaseModel):
    """Status of a project board (New, Planning, In Progress, ...)."""

    name = models.CharField(_("name"), max_length=50, unique=True)
    description = models.CharField(_("description"), max_length=200, blank=True)
    color = models.CharField(
        _("color"),
        max_length=7,
        blank=True,
        help_text=_("Hex color, e.g. '#10B981'"),
    )
    sort_order = models.PositiveSmallIntegerField(_("sort order"), default=0)
    is_active = models.BooleanField(_("active"), default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        verbose_name = _("project status")
        verbose_name_plural = _("project statuses")
        ordering = ["sort_order", "name"]

    def __str__(self) -> str:
        return self.name


class ProjectCriteria(BaseModel):
    """Tag used to filter projects ("Popular Projects", "UI/UX Designer Needed", ...)."""

    name = models.CharField(_("name"), max_length=100, unique=True)
    active = models.BooleanField(_("active"), default=False)

    class Meta:
        verbose_name = _("project criteria")
        verbose_name_plural = _("project criteria")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class ModuleType(BaseModel):
    name = models.CharField(_("name"), max_length=100, unique=True)

    class Meta:
        verbose_name = _("module type")
        verbose_name_plural = _("module types")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class ProgrammingLanguage(BaseModel):
    name = models.CharField(_("name"), max_length=100, unique=True)
    release_year = models.PositiveSmallIntegerField(_("release year"), null=True, blank=True)
    creator = models.CharField(_("creator"), max_length=200, blank=True)
    description = models.TextField(_("description"), blank=True)
    is_active = models.BooleanField(_("active"), default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        verbose_name = _("programming language")
        verbose_name_plural = _("programming languages")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Subscription(BaseModel):
    """Plan tier. The description doubles as the plan name."""

    description = models.CharField(_("description"), max_length=100, unique=True)
    price = models.DecimalField(_("price"), max_digits=18, decimal_places=2, default=0)

    class Meta:
        verbose_name = _("subscription")
        verbose_name_plural = _("subscriptions")
        ordering = ["price", "description"]

    def __str__(self) -> str:
        return self.description


class RoleType(models.IntegerChoices):
    GENERAL = 0, _("General")
    DEVELOPER = 1, _("Developer")
    JUNIOR_DEVELOPER = 2, _("Junior developer")
    DESIGNER = 3, _("UI/UX designer")
    LEADERSHIP = 4, _("Leadership")


class Role(BaseModel):
    """
    Team role a student can hold on a project.

    ``category`` is a free-form grouping (Leadership, Technical, Academic, ...)
    while ``type`` drives how the team builder treats the role.
    """

    name = models.CharField(_("name"), max_length=100, unique=True)
    description = models.CharField(_("description"), max_length=500, blank=True)
    category = models.CharField(_("category"), max_length=50, default="General")
    type = models.PositiveSmallIntegerField(
        _("type"),
        choices=RoleType.choices,
        default=RoleType.GENERAL,
    )
    is_active = models.BooleanField(_("active"), default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        verbose_name = _("role")
        verbose_name_plural = _("roles")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
