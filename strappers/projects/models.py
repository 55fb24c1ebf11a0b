"""
Models for projects.

Contains:
- Project: a project proposed by an organization, with its design texts
  and IDE generation progress
- DesignVersion: versioned system design documents of a project
- ProjectModule: ordered functional modules of a project
- IDEChunk: one unit of IDE code generation for a project
"""

import logging

from django.apps import apps
from django.db import models
from django.db import transaction
from django.db.models import Count
from django.db.models import F
from django.db.models import IntegerField
from django.db.models import OuterRef
from django.db.models import Q
from django.db.models import Subquery
from django.db.models.functions import Coalesce
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField
from django_fsm import transition

from strappers.core.models import BaseModel

logger = logging.getLogger(__name__)


class ProjectPriority(models.TextChoices):
    LOW = "Low", _("Low")
    MEDIUM = "Medium", _("Medium")
    HIGH = "High", _("High")
    CRITICAL = "Critical", _("Critical")


class GenerationStatus(models.TextChoices):
    """Status of the IDE code generation of a project (FSM states)."""

    NOT_STARTED = "not_started", _("Not started")
    IN_PROGRESS = "in_progress", _("In progress")
    COMPLETED = "completed", _("Completed")
    FAILED = "failed", _("Failed")


class ChunkStatus(models.TextChoices):
    """Status of a single IDE generation chunk (FSM states)."""

    PENDING = "pending", _("Pending")
    IN_PROGRESS = "in_progress", _("In progress")
    COMPLETED = "completed", _("Completed")
    FAILED = "failed", _("Failed")


class ProjectQuerySet(models.QuerySet):
    def available(self):
        return self.filter(is_available=True)

    def with_applicants_count(self):
        """
        Annotate ``applicants_count``: pending students who picked the project,
        either as their allocated project or as one of their priorities.
        """
        Student = apps.get_model("students", "Student")
        pending = Student.objects.filter(status=Student.Status.PENDING).filter(
            Q(project=OuterRef("pk"))
            | Q(project_priority_1=OuterRef("pk"))
            | Q(project_priority_2=OuterRef("pk"))
            | Q(project_priority_3=OuterRef("pk"))
            | Q(project_priority_4=OuterRef("pk"))
        )
        counts = pending.order_by().values("status").annotate(total=Count("pk")).values("total")
        return self.annotate(
            applicants_count=Coalesce(Subquery(counts, output_field=IntegerField()), 0),
        )


class Project(BaseModel):
    """
    A project students apply to and build on a project board.

    Inherits from BaseModel:
        - id: integer primary key
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    title = models.CharField(_("title"), max_length=200)
    description = models.CharField(_("description"), max_length=1000, blank=True)
    extended_description = models.TextField(_("extended description"), blank=True)
    system_design = models.TextField(_("system design"), blank=True)
    system_design_formatted = models.CharField(
        _("formatted system design"),
        max_length=2000,
        blank=True,
    )
    system_design_doc = models.BinaryField(_("system design document"), null=True, blank=True)
    data_schema = models.TextField(_("data schema"), blank=True)
    customer_past_story = models.TextField(_("customer past story"), blank=True)
    priority = models.CharField(
        _("priority"),
        max_length=50,
        choices=ProjectPriority.choices,
        default=ProjectPriority.MEDIUM,
    )
    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="projects",
        verbose_name=_("organization"),
    )
    is_available = models.BooleanField(_("available"), default=True)
    kickoff = models.BooleanField(_("kickoff"), default=False)
    criteria = models.ManyToManyField(
        "catalog.ProjectCriteria",
        blank=True,
        related_name="projects",
        verbose_name=_("criteria"),
    )
    trello_board_json = models.JSONField(_("Trello board"), null=True, blank=True)

    # IDE generation
    deployment_manifest = models.TextField(_("deployment manifest"), blank=True)
    ide_generation_status = FSMField(
        _("IDE generation status"),
        default=GenerationStatus.NOT_STARTED,
        choices=GenerationStatus.choices,
    )
    total_chunks = models.PositiveIntegerField(_("total chunks"), default=0)
    completed_chunks = models.PositiveIntegerField(_("completed chunks"), default=0)
    mock_records_count = models.PositiveIntegerField(_("mock records count"), default=10)

    objects = ProjectQuerySet.as_manager()

    class Meta:
        verbose_name = _("project")
        verbose_name_plural = _("projects")
        ordering = ["-created"]

    def __str__(self) -> str:
        return self.title

    @property
    def generation_progress(self) -> int:
        """Percentage of completed IDE chunks."""
        if not self.total_chunks:
            return 0
        return min(100, self.completed_chunks * 100 // self.total_chunks)

    # FSM Transitions

    @transition(
        field=ide_generation_status,
        source=[GenerationStatus.NOT_STARTED, GenerationStatus.FAILED],
        target=GenerationStatus.IN_PROGRESS,
    )
    def start_generation(self, total_chunks: int):
        """Start (or restart after a failure) generating ``total_chunks`` chunks."""
        self.total_chunks = total_chunks
        self.completed_chunks = 0

    @transition(
        field=ide_generation_status,
        source=GenerationStatus.IN_PROGRESS,
        target=GenerationStatus.COMPLETED,
    )
    def complete_generation(self):
        pass

    @transition(
        field=ide_generation_status,
        source=GenerationStatus.IN_PROGRESS,
        target=GenerationStatus.FAILED,
    )
    def fail_generation(self):
        pass

    def record_chunk_completed(self) -> None:
        """Count one more completed chunk; complete generation on the last one."""
        Project.objects.filter(pk=self.pk).update(completed_chunks=F("completed_chunks") + 1)
        self.refresh_from_db(fields=["completed_chunks", "total_chunks", "ide_generation_status"])
        logger.info(
            "Project %s generation progress: %d/%d",
            self.pk,
            self.completed_chunks,
            self.total_chunks,
        )
        if (
            self.ide_generation_status == GenerationStatus.IN_PROGRESS
            and self.completed_chunks >= self.total_chunks
        ):
            self.complete_generation()
            self.save(update_fields=["ide_generation_status", "modified"])


class DesignVersion(BaseModel):
    """A numbered version of a project's system design document."""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="design_versions",
        verbose_name=_("project"),
    )
    version_number = models.PositiveIntegerField(_("version number"))
    design_document = models.TextField(_("design document"))
    design_document_pdf = models.BinaryField(_("design document (PDF)"), null=True, blank=True)
    created_by = models.CharField(_("created by"), max_length=255, blank=True)
    is_active = models.BooleanField(_("active"), default=True, db_index=True)

    class Meta:
        verbose_name = _("design version")
        verbose_name_plural = _("design versions")
        ordering = ["project", "-version_number"]
        constraints = [
            models.UniqueConstraint(
                fields=["project", "version_number"],
                name="unique_design_version_per_project",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.project} v{self.version_number}"

    @staticmethod
    def next_version_number(project: Project) -> int:
        latest = project.design_versions.aggregate(latest=models.Max("version_number"))["latest"]
        return (latest or 0) + 1

    @classmethod
    @transaction.atomic
    def create_next(cls, project: Project, design_document: str, created_by: str = "") -> "DesignVersion":
        """Store a new version of the design and make it the active one."""
        # Concurrent creates for one project are serialized on the project row.
        project = Project.objects.select_for_update().get(pk=project.pk)
        version = cls.objects.create(
            project=project,
            version_number=cls.next_version_number(project),
            design_document=design_document,
            created_by=created_by,
        )
        version.activate()
        return version

    def activate(self) -> None:
        """Make this the only active version of the project's design."""
        self.project.design_versions.exclude(pk=self.pk).update(is_active=False)
        if not self.is_active:
            self.is_active = True
            self.save(update_fields=["is_active", "modified"])


class ProjectModule(BaseModel):
    """A functional module of a project, ordered by ``sequence``."""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="modules",
        verbose_name=_("project"),
    )
    module_type = models.ForeignKey(
        "catalog.ModuleType",
        on_delete=models.CASCADE,
        related_name="project_modules",
        verbose_name=_("module type"),
    )
    title = models.CharField(_("title"), max_length=100)
    description = models.TextField(_("description"), blank=True)
    sequence = models.PositiveIntegerField(_("sequence"), null=True, blank=True, db_index=True)

    class Meta:
        verbose_name = _("project module")
        verbose_name_plural = _("project modules")
        ordering = ["project", "sequence", "id"]

    def __str__(self) -> str:
        return f"{self.project}: {self.title}"


class IDEChunk(BaseModel):
    """
    One unit of IDE code generation (a group of files) for a project.

    Chunks are generated in ``generation_order``; ``dependencies`` lists the
    ``chunk_id`` values that must be completed first.
    """

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="ide_chunks",
        verbose_name=_("project"),
    )
    chunk_id = models.CharField(_("chunk id"), max_length=100)
    chunk_type = models.CharField(_("chunk type"), max_length=50)
    description = models.TextField(_("description"), blank=True)
    generation_order = models.PositiveIntegerField(_("generation order"), default=0, db_index=True)
    status = FSMField(
        _("status"),
        default=ChunkStatus.PENDING,
        choices=ChunkStatus.choices,
    )
    files = models.JSONField(_("files"), default=list, blank=True)
    files_count = models.PositiveIntegerField(_("files count"), default=0)
    dependencies = models.JSONField(_("dependencies"), default=list, blank=True)
    error_message = models.TextField(_("error message"), blank=True)
    tokens_used = models.PositiveIntegerField(_("tokens used"), null=True, blank=True)
    generation_time_ms = models.PositiveIntegerField(_("generation time (ms)"), null=True, blank=True)
    generated_at = models.DateTimeField(_("generated at"), null=True, blank=True)

    class Meta:
        verbose_name = _("IDE chunk")
        verbose_name_plural = _("IDE chunks")
        ordering = ["project", "generation_order"]
        constraints = [
            models.UniqueConstraint(
                fields=["project", "chunk_id"],
                name="unique_ide_chunk_per_project",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.project} / {self.chunk_id}"

    def dependencies_met(self) -> bool:
        """True when every chunk this one depends on is completed."""
        if not self.dependencies:
            return True
        done = self.project.ide_chunks.filter(
            chunk_id__in=self.dependencies,
            status=ChunkStatus.COMPLETED,
        ).count()
        return done == len(set(self.dependencies))

    # FSM Transitions

    @transition(
        field=status,
        source=[ChunkStatus.PENDING, ChunkStatus.FAILED],
        target=ChunkStatus.IN_PROGRESS,
        conditions=[dependencies_met],
    )
    def start(self):
        self.error_message = ""

    @transition(field=status, source=ChunkStatus.IN_PROGRESS, target=ChunkStatus.COMPLETED)
    def complete(self, files: list, tokens_used: int | None = None, generation_time_ms: int | None = None):
        self.files = files
        self.files_count = len(files)
        self.tokens_used = tokens_used
        self.generation_time_ms = generation_time_ms
        self.generated_at = timezone.now()

    @transition(field=status, source=ChunkStatus.IN_PROGRESS, target=ChunkStatus.FAILED)
    def fail(self, error_message: str):
        self.error_message = error_message

    @transaction.atomic
    def mark_completed(self, files: list, tokens_used: int | None = None, generation_time_ms: int | None = None):
        """Complete the chunk, save it and advance the project's progress."""
        self.complete(files, tokens_used=tokens_used, generation_time_ms=generation_time_ms)
        self.save()
        self.project.record_chunk_completed()
