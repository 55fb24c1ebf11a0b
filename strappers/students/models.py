"""
Models for students.

Contains:
- Student: a student profile, its project priorities and its board
- StudentRole: roles a student holds on the platform
"""

import logging

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMIntegerField
from django_fsm import transition

from strappers.core.models import BaseModel
from strappers.core.models import PasswordHashMixin

logger = logging.getLogger(__name__)

MAX_PROJECT_PRIORITIES = 4

PRIORITY_FIELDS = [f"project_priority_{rank}" for rank in range(1, MAX_PROJECT_PRIORITIES + 1)]


class StudentStatus(models.IntegerChoices):
    """Where a student is in the allocation process (FSM states)."""

    NEW = 0, _("New")
    PENDING = 1, _("Pending")
    ON_BOARD = 3, _("On board")


class StudentQuerySet(models.QuerySet):
    def available(self):
        return self.filter(is_available=True)

    def pending(self):
        return self.filter(status=StudentStatus.PENDING)


def _priority_field(rank: int):
    return models.ForeignKey(
        "projects.Project",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name=f"priority_{rank}_students",
        verbose_name=f"project priority {rank}",
    )


class Student(PasswordHashMixin, BaseModel):
    """
    A student on the platform.

    Lifecycle: a NEW student submits up to four project priorities and becomes
    PENDING, then joins a board (ON_BOARD). Leaving the board resets the
    student to NEW.
    """

    Status = StudentStatus

    first_name = models.CharField(_("first name"), max_length=100)
    last_name = models.CharField(_("last name"), max_length=100)
    email = models.EmailField(_("email"), max_length=255, unique=True)
    student_number = models.CharField(_("student number"), max_length=50, blank=True)
    major = models.ForeignKey(
        "catalog.Major",
        on_delete=models.PROTECT,
        related_name="students",
        verbose_name=_("major"),
    )
    year = models.ForeignKey(
        "catalog.Year",
        on_delete=models.PROTECT,
        related_name="students",
        verbose_name=_("year"),
    )
    linkedin_url = models.CharField(_("LinkedIn URL"), max_length=500, blank=True)
    github_user = models.CharField(_("GitHub user"), max_length=100, blank=True)
    photo = models.TextField(_("photo"), blank=True, help_text=_("Image URL or base64 data"))
    cv = models.TextField(_("CV"), blank=True)
    is_admin = models.BooleanField(_("admin"), default=False)
    is_available = models.BooleanField(_("available"), default=True)
    status = FSMIntegerField(
        _("status"),
        default=StudentStatus.NEW,
        choices=StudentStatus.choices,
    )
    start_pending_at = models.DateTimeField(_("pending since"), null=True, blank=True)

    project = models.ForeignKey(
        "projects.Project",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="allocated_students",
        verbose_name=_("allocated project"),
    )
    project_priority_1 = _priority_field(1)
    project_priority_2 = _priority_field(2)
    project_priority_3 = _priority_field(3)
    project_priority_4 = _priority_field(4)
    board = models.ForeignKey(
        "boards.ProjectBoard",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="students",
        verbose_name=_("board"),
    )
    programming_language = models.ForeignKey(
        "catalog.ProgrammingLanguage",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="students",
        verbose_name=_("programming language"),
    )
    subscription_type = models.ForeignKey(
        "catalog.Subscription",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="students",
        verbose_name=_("subscription"),
    )
    minutes_to_work = models.PositiveIntegerField(_("minutes to work"), null=True, blank=True)

    # Work preferences
    hybrid_work = models.BooleanField(_("hybrid work"), default=False)
    home_work = models.BooleanField(_("home work"), default=False)
    full_time_work = models.BooleanField(_("full-time work"), default=False)
    part_time_work = models.BooleanField(_("part-time work"), default=False)
    freelance_work = models.BooleanField(_("freelance work"), default=False)
    travel_work = models.BooleanField(_("work with travel"), default=False)
    night_shift_work = models.BooleanField(_("night shift work"), default=False)
    relocation_work = models.BooleanField(_("work with relocation"), default=False)
    student_work = models.BooleanField(_("student job"), default=False)
    multilingual_work = models.BooleanField(_("multilingual work"), default=False)

    objects = StudentQuerySet.as_manager()

    class Meta:
        verbose_name = _("student")
        verbose_name_plural = _("students")
        ordering = ["last_name", "first_name"]
        constraints = [
            models.UniqueConstraint(
                fields=["student_number"],
                condition=~Q(student_number=""),
                name="unique_student_number",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.full_name} <{self.email}>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def priority_projects(self) -> list:
        """The student's project priorities, first choice first."""
        return [getattr(self, name) for name in PRIORITY_FIELDS if getattr(self, f"{name}_id")]

    # FSM Transitions

    @transition(
        field=status,
        source=[StudentStatus.NEW, StudentStatus.PENDING],
        target=StudentStatus.PENDING,
    )
    def submit_priorities(self, projects: list):
        """
        Store 1 to 4 distinct projects in order of preference.

        The first choice becomes the allocated project and the student waits
        for a board.
        """
        if not 1 <= len(projects) <= MAX_PROJECT_PRIORITIES:
            raise ValidationError(
                _("Choose between 1 and %(max)d projects.") % {"max": MAX_PROJECT_PRIORITIES},
                code="priority_count",
            )
        if len({project.pk for project in projects}) != len(projects):
            raise ValidationError(_("Project priorities must be distinct."), code="priority_duplicate")

        padded = list(projects) + [None] * (MAX_PROJECT_PRIORITIES - len(projects))
        for name, project in zip(PRIORITY_FIELDS, padded):
            setattr(self, name, project)
        self.project = projects[0]
        self.start_pending_at = timezone.now()
        logger.info(
            "Student %s submitted priorities %s",
            self.pk,
            [project.pk for project in projects],
        )

    @transition(field=status, source=StudentStatus.PENDING, target=StudentStatus.ON_BOARD)
    def join_board(self, board):
        self.board = board
        self.project = board.project
        logger.info("Student %s joined board %s", self.pk, board.pk)

    @transition(field=status, source=StudentStatus.ON_BOARD, target=StudentStatus.NEW)
    def leave_board(self):
        logger.info("Student %s left board %s", self.pk, self.board_id)
        self.board = None
        self.project = None
        self.start_pending_at = None

    def assign_role(self, role, end_date=None, notes: str = "") -> "StudentRole":
        """Give the student ``role``, updating the active assignment if there is one."""
        student_role, _created = self.roles.update_or_create(
            role=role,
            is_active=True,
            defaults={"end_date": end_date, "notes": notes},
        )
        return student_role


class StudentRole(BaseModel):
    student = models.ForeignKey(
        Student,
        on_delete=models.CASCADE,
        related_name="roles",
        verbose_name=_("student"),
    )
    role = models.ForeignKey(
        "catalog.Role",
        on_delete=models.CASCADE,
        related_name="student_roles",
        verbose_name=_("role"),
    )
    assigned_at = models.DateTimeField(_("assigned at"), default=timezone.now)
    end_date = models.DateTimeField(_("end date"), null=True, blank=True)
    notes = models.CharField(_("notes"), max_length=200, blank=True)
    is_active = models.BooleanField(_("active"), default=True)

    class Meta:
        verbose_name = _("student role")
        verbose_name_plural = _("student roles")
        ordering = ["student", "-assigned_at"]

    def __str__(self) -> str:
        return f"{self.student} - {self.role}"
