"""
Models for project boards.

A board is the workspace of a team building a project: the links to its
external tools (GitHub, Figma, Neon, meetings) and the latest state reported
by those tools.
"""

import logging

from django.db import models
from django.db.models import F
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from strappers.core.models import BaseModel

logger = logging.getLogger(__name__)


class ProjectBoard(BaseModel):
    """
    A project's board, identified by the id of its external board.

    Inherits from BaseModel:
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    board_id = models.CharField(_("board id"), max_length=50, primary_key=True)
    project = models.ForeignKey(
        "projects.Project",
        on_delete=models.CASCADE,
        related_name="boards",
        verbose_name=_("project"),
    )
    status = models.ForeignKey(
        "catalog.ProjectStatus",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="boards",
        verbose_name=_("status"),
    )
    admin = models.ForeignKey(
        "students.Student",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="administered_boards",
        verbose_name=_("admin"),
    )
    start_date = models.DateTimeField(_("start date"), null=True, blank=True)
    end_date = models.DateTimeField(_("end date"), null=True, blank=True)
    due_date = models.DateTimeField(_("due date"), null=True, blank=True)
    sprint_plan = models.JSONField(_("sprint plan"), null=True, blank=True)

    # Links
    board_url = models.CharField(_("board URL"), max_length=500, blank=True)
    publish_url = models.CharField(_("publish URL"), max_length=500, blank=True)
    movie_url = models.CharField(_("movie URL"), max_length=500, blank=True)
    presentation_url = models.CharField(_("presentation URL"), max_length=500, blank=True)
    next_meeting_time = models.DateTimeField(_("next meeting time"), null=True, blank=True)
    next_meeting_url = models.CharField(_("next meeting URL"), max_length=500, blank=True)
    github_url = models.CharField(_("GitHub URL"), max_length=500, blank=True)
    github_frontend_url = models.CharField(_("GitHub frontend URL"), max_length=500, blank=True)
    github_backend_url = models.CharField(_("GitHub backend URL"), max_length=500, blank=True)
    web_api_url = models.CharField(_("web API URL"), max_length=500, blank=True)
    group_chat = models.CharField(_("group chat"), max_length=500, blank=True)
    facebook_url = models.CharField(_("Facebook URL"), max_length=500, blank=True)
    instagram_url = models.CharField(_("Instagram URL"), max_length=500, blank=True)
    linkedin_url = models.CharField(_("LinkedIn URL"), max_length=500, blank=True)
    youtube_url = models.CharField(_("YouTube URL"), max_length=500, blank=True)

    has_admin = models.BooleanField(_("has admin"), default=False)
    is_system_board = models.BooleanField(_("system board"), default=False)
    system_board_id = models.CharField(_("system board id"), max_length=50, blank=True)

    # Neon database
    neon_project_id = models.CharField(_("Neon project id"), max_length=100, blank=True)
    neon_branch_id = models.CharField(_("Neon branch id"), max_length=100, blank=True)
    db_password = models.CharField(_("database password"), max_length=256, blank=True)

    observed = models.PositiveIntegerField(
        _("observed"),
        default=0,
        help_text=_("Number of employers who observed this board."),
    )

    class Meta:
        verbose_name = _("project board")
        verbose_name_plural = _("project boards")
        ordering = ["-created"]

    def __str__(self) -> str:
        return f"{self.board_id} ({self.project})"

    def record_observation(self) -> None:
        """Count one more observing employer."""
        ProjectBoard.objects.filter(pk=self.pk).update(observed=F("observed") + 1)
        self.refresh_from_db(fields=["observed"])
        logger.info("Board %s observed by %d employer(s)", self.pk, self.observed)


class BoardMeeting(BaseModel):
    """A meeting scheduled for a student on a board."""

    board = models.ForeignKey(
        ProjectBoard,
        on_delete=models.CASCADE,
        related_name="meetings",
        verbose_name=_("board"),
    )
    meeting_time = models.DateTimeField(_("meeting time"))
    student_email = models.EmailField(_("student email"), max_length=255, db_index=True)
    custom_meeting_url = models.CharField(_("custom meeting URL"), max_length=500, blank=True)
    actual_meeting_url = models.CharField(_("actual meeting URL"), max_length=500, blank=True)
    attended = models.BooleanField(_("attended"), default=False)
    join_time = models.DateTimeField(_("join time"), null=True, blank=True)

    class Meta:
        verbose_name = _("board meeting")
        verbose_name_plural = _("board meetings")
        ordering = ["board", "meeting_time"]

    def __str__(self) -> str:
        return f"{self.board_id} @ {self.meeting_time:%Y-%m-%d %H:%M} ({self.student_email})"

    def mark_attended(self, url: str | None = None) -> None:
        self.attended = True
        self.join_time = timezone.now()
        if url:
            self.actual_meeting_url = url
        self.save(update_fields=["attended", "join_time", "actual_meeting_url", "modified"])


class BoardStateQuerySet(models.QuerySet):
    def record(
        self,
        board: ProjectBoard,
        source: str,
        webhook: bool | None = None,
        github_branch: str = "",
        **fields,
    ) -> "BoardState":
        """Insert or update the state reported by ``source`` for a board branch."""
        state, created = self.update_or_create(
            board=board,
            source=source,
            webhook=webhook,
            github_branch=github_branch,
            defaults=fields,
        )
        logger.debug(
            "%s %s state of board %s (branch %r)",
            "Recorded" if created else "Updated",
            source,
            board.pk,
            github_branch,
        )
        return state


class BoardState(BaseModel):
    """
    Latest state of a board reported by an external tool.

    Railway reports build results, GitHub reports branch activity. There is
    one row per (board, source, webhook, branch).
    """

    board = models.ForeignKey(
        ProjectBoard,
        on_delete=models.CASCADE,
        related_name="states",
        verbose_name=_("board"),
    )
    source = models.CharField(_("source"), max_length=50, help_text=_("e.g. 'railway', 'github'"))
    webhook = models.BooleanField(_("webhook"), null=True, blank=True)
    github_branch = models.CharField(_("GitHub branch"), max_length=200, blank=True)
    dev_role = models.CharField(_("developer role"), max_length=100, blank=True)
    mentor_feedback = models.TextField(_("mentor feedback"), blank=True)

    # Railway
    service_name = models.CharField(_("service name"), max_length=200, blank=True)
    error_message = models.TextField(_("error message"), blank=True)
    file = models.CharField(_("file"), max_length=500, blank=True)
    line = models.IntegerField(_("line"), null=True, blank=True)
    stack_trace = models.TextField(_("stack trace"), blank=True)
    request_url = models.CharField(_("request URL"), max_length=1000, blank=True)
    request_method = models.CharField(_("request method"), max_length=10, blank=True)
    timestamp = models.DateTimeField(_("timestamp"), null=True, blank=True)
    last_build_status = models.CharField(_("last build status"), max_length=50, blank=True)
    last_build_output = models.TextField(_("last build output"), blank=True)
    latest_error_summary = models.TextField(_("latest error summary"), blank=True)

    # GitHub
    sprint_number = models.IntegerField(_("sprint number"), null=True, blank=True)
    branch_name = models.CharField(_("branch name"), max_length=200, blank=True)
    branch_url = models.CharField(_("branch URL"), max_length=500, blank=True)
    latest_commit_id = models.CharField(_("latest commit id"), max_length=100, blank=True)
    latest_commit_description = models.TextField(_("latest commit description"), blank=True)
    latest_commit_date = models.DateTimeField(_("latest commit date"), null=True, blank=True)
    last_merge_date = models.DateTimeField(_("last merge date"), null=True, blank=True)
    latest_event = models.CharField(_("latest event"), max_length=100, blank=True)
    pr_status = models.CharField(_("pull request status"), max_length=50, blank=True)
    branch_status = models.CharField(_("branch status"), max_length=50, blank=True)

    objects = BoardStateQuerySet.as_manager()

    class Meta:
        verbose_name = _("board state")
        verbose_name_plural = _("board states")
        ordering = ["board", "source", "github_branch"]
        constraints = [
            models.UniqueConstraint(
                fields=["board", "source", "webhook", "github_branch"],
                name="unique_board_state",
            ),
        ]

    def __str__(self) -> str:
        branch = f" [{self.github_branch}]" if self.github_branch else ""
        return f"{self.board_id} {self.source}{branch}"


class FigmaConnection(BaseModel):
    """OAuth connection between a board and a Figma design file."""

    board = models.ForeignKey(
        ProjectBoard,
        on_delete=models.CASCADE,
        related_name="figma_connections",
        verbose_name=_("board"),
    )
    access_token = models.TextField(_("access token"))
    refresh_token = models.TextField(_("refresh token"), blank=True)
    token_expiry = models.DateTimeField(_("token expiry"), null=True, blank=True)
    figma_user_id = models.CharField(_("Figma user id"), max_length=100, blank=True)
    file_url = models.CharField(_("file URL"), max_length=500, blank=True)
    file_key = models.CharField(_("file key"), max_length=100, blank=True)
    last_sync = models.DateTimeField(_("last sync"), null=True, blank=True)

    class Meta:
        verbose_name = _("Figma connection")
        verbose_name_plural = _("Figma connections")
        constraints = [
            models.UniqueConstraint(
                fields=["file_key"],
                condition=~Q(file_key=""),
                name="unique_figma_file_key",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.board_id} -> {self.file_key or 'no file'}"

    @property
    def is_token_expired(self) -> bool:
        return self.token_expiry is not None and self.token_expiry <= timezone.now()
