"""
Project boards API controller.
"""

import logging

from django.http import HttpRequest
from django.shortcuts import get_object_or_404
from django.utils import timezone
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_patch
from ninja_extra import http_post
from ninja_extra import http_put

from strappers.boards.models import BoardMeeting
from strappers.boards.models import BoardState
from strappers.boards.models import FigmaConnection
from strappers.boards.models import ProjectBoard
from strappers.boards.schemas import AttendMeetingSchema
from strappers.boards.schemas import BoardLinksSchema
from strappers.boards.schemas import BoardMeetingCreateSchema
from strappers.boards.schemas import BoardMeetingSchema
from strappers.boards.schemas import BoardStateRecordSchema
from strappers.boards.schemas import BoardStateSchema
from strappers.boards.schemas import FigmaConnectionSchema
from strappers.boards.schemas import FigmaConnectionUpdateSchema
from strappers.boards.schemas import ProjectBoardCreateSchema
from strappers.boards.schemas import ProjectBoardSchema
from strappers.catalog.models import ProjectStatus
from strappers.core.api import BaseAPI
from strappers.core.api import IsAuthenticated
from strappers.core.api import IsStaff
from strappers.core.exceptions import AlreadyExistsError
from strappers.core.exceptions import BadRequestError
from strappers.core.exceptions import ErrorSchema
from strappers.core.exceptions import NotFoundError
from strappers.core.schemas import patch_fields
from strappers.projects.models import Project

logger = logging.getLogger(__name__)


@api_controller("/boards", tags=["Boards"], permissions=[IsAuthenticated])
class BoardController(BaseAPI):
    """Project boards and the records attached to them."""

    @http_get(
        "/{board_id}",
        response={200: ProjectBoardSchema, 404: ErrorSchema},
        url_name="boards_detail",
    )
    def get_board(self, request: HttpRequest, board_id: str):
        return 200, get_object_or_404(ProjectBoard, board_id=board_id)

    @http_post(
        "/",
        response={201: ProjectBoardSchema, 400: ErrorSchema, 409: ErrorSchema},
        permissions=[IsStaff],
        url_name="boards_create",
    )
    def create_board(self, request: HttpRequest, data: ProjectBoardCreateSchema):
        if ProjectBoard.objects.filter(board_id=data.board_id).exists():
            return AlreadyExistsError("A board with this id already exists.").to_response()
        if not Project.objects.filter(id=data.project_id).exists():
            return BadRequestError("Unknown project.").to_response()
        if data.status_id is not None and not ProjectStatus.objects.filter(id=data.status_id).exists():
            return BadRequestError("Unknown project status.").to_response()

        board = ProjectBoard.objects.create(**data.dict(exclude_none=True))
        logger.info("Created board %s for project %s", board.pk, board.project_id)
        return 201, board

    @http_patch(
        "/{board_id}/links",
        response={200: ProjectBoardSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="boards_update_links",
    )
    def update_links(self, request: HttpRequest, board_id: str, data: BoardLinksSchema):
        """Update the given links; omitted links are left unchanged."""
        board = get_object_or_404(ProjectBoard, board_id=board_id)
        changes = patch_fields(data, nullable=frozenset({"next_meeting_time"}))
        for field, value in changes.items():
            setattr(board, field, value)
        board.save(update_fields=[*changes, "modified"])
        return 200, board

    # Meetings

    @http_get(
        "/{board_id}/meetings",
        response={200: list[BoardMeetingSchema], 404: ErrorSchema},
        url_name="boards_meetings",
    )
    def list_meetings(self, request: HttpRequest, board_id: str, upcoming: bool = False):
        board = get_object_or_404(ProjectBoard, board_id=board_id)
        meetings = board.meetings.all()
        if upcoming:
            meetings = meetings.filter(meeting_time__gte=timezone.now())
        return 200, list(meetings)

    @http_post(
        "/{board_id}/meetings",
        response={201: BoardMeetingSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="boards_meetings_create",
    )
    def create_meeting(self, request: HttpRequest, board_id: str, data: BoardMeetingCreateSchema):
        board = get_object_or_404(ProjectBoard, board_id=board_id)
        meeting = BoardMeeting.objects.create(board=board, **data.dict())
        return 201, meeting

    @http_post(
        "/{board_id}/meetings/{int:meeting_id}/attend",
        response={200: BoardMeetingSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="boards_meetings_attend",
    )
    def attend_meeting(self, request: HttpRequest, board_id: str, meeting_id: int, data: AttendMeetingSchema):
        meeting = get_object_or_404(BoardMeeting, id=meeting_id, board_id=board_id)
        meeting.mark_attended(data.url)
        return 200, meeting

    # States

    @http_get(
        "/{board_id}/states",
        response={200: list[BoardStateSchema], 404: ErrorSchema},
        url_name="boards_states",
    )
    def list_states(self, request: HttpRequest, board_id: str, source: str | None = None):
        board = get_object_or_404(ProjectBoard, board_id=board_id)
        states = board.states.all()
        if source:
            states = states.filter(source=source)
        return 200, list(states)

    @http_put(
        "/{board_id}/states",
        response={200: BoardStateSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="boards_states_record",
    )
    def record_state(self, request: HttpRequest, board_id: str, data: BoardStateRecordSchema):
        """Insert or update the state reported by a tool for a board branch."""
        board = get_object_or_404(ProjectBoard, board_id=board_id)
        fields = data.dict(exclude={"source", "webhook", "github_branch"}, exclude_unset=True, exclude_none=True)
        state = BoardState.objects.record(
            board,
            data.source,
            webhook=data.webhook,
            github_branch=data.github_branch,
            **fields,
        )
        return 200, state

    # Figma

    @http_get(
        "/{board_id}/figma",
        response={200: FigmaConnectionSchema, 404: ErrorSchema},
        url_name="boards_figma",
    )
    def get_figma_connection(self, request: HttpRequest, board_id: str):
        board = get_object_or_404(ProjectBoard, board_id=board_id)
        connection = board.figma_connections.order_by("-modified").first()
        if connection is None:
            return NotFoundError("This board has no Figma connection.").to_response()
        return 200, connection

    @http_put(
        "/{board_id}/figma",
        response={200: FigmaConnectionSchema, 404: ErrorSchema, 409: ErrorSchema},
        permissions=[IsStaff],
        url_name="boards_figma_update",
    )
    def update_figma_connection(self, request: HttpRequest, board_id: str, data: FigmaConnectionUpdateSchema):
        """Store the board's Figma connection, replacing the current one."""
        board = get_object_or_404(ProjectBoard, board_id=board_id)
        connection = board.figma_connections.order_by("-modified").first() or FigmaConnection(board=board)

        if (
            data.file_key
            and FigmaConnection.objects.filter(file_key=data.file_key).exclude(pk=connection.pk).exists()
        ):
            return AlreadyExistsError("This Figma file is already connected to a board.").to_response()

        for field, value in data.dict().items():
            setattr(connection, field, value)
        connection.last_sync = timezone.now()
        connection.save()
        return 200, connection
