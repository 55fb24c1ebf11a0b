"""
Board schemas for API requests and responses.
"""

from datetime import datetime

from ninja import Field
from ninja import Schema


class BoardLinksSchema(Schema):
    """Links to the tools a board's team works with. All optional."""

    board_url: str | None = Field(None, max_length=500)
    publish_url: str | None = Field(None, max_length=500)
    movie_url: str | None = Field(None, max_length=500)
    presentation_url: str | None = Field(None, max_length=500)
    next_meeting_time: datetime | None = None
    next_meeting_url: str | None = Field(None, max_length=500)
    github_url: str | None = Field(None, max_length=500)
    github_frontend_url: str | None = Field(None, max_length=500)
    github_backend_url: str | None = Field(None, max_length=500)
    web_api_url: str | None = Field(None, max_length=500)
    group_chat: str | None = Field(None, max_length=500)
    facebook_url: str | None = Field(None, max_length=500)
    instagram_url: str | None = Field(None, max_length=500)
    linkedin_url: str | None = Field(None, max_length=500)
    youtube_url: str | None = Field(None, max_length=500)


class ProjectBoardSchema(Schema):
    board_id: str
    project_id: int
    status_id: int | None = None
    admin_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    due_date: datetime | None = None
    sprint_plan: dict | list | None = None
    board_url: str
    publish_url: str
    movie_url: str
    presentation_url: str
    next_meeting_time: datetime | None = None
    next_meeting_url: str
    github_url: str
    github_frontend_url: str
    github_backend_url: str
    web_api_url: str
    group_chat: str
    facebook_url: str
    instagram_url: str
    linkedin_url: str
    youtube_url: str
    has_admin: bool
    is_system_board: bool
    system_board_id: str
    observed: int
    created: datetime


class ProjectBoardCreateSchema(BoardLinksSchema):
    board_id: str = Field(..., max_length=50)
    project_id: int
    status_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    due_date: datetime | None = None
    sprint_plan: dict | list | None = None
    is_system_board: bool = False
    system_board_id: str = Field("", max_length=50)


class BoardMeetingSchema(Schema):
    id: int
    meeting_time: datetime
    student_email: str
    custom_meeting_url: str
    actual_meeting_url: str
    attended: bool
    join_time: datetime | None = None


class BoardMeetingCreateSchema(Schema):
    meeting_time: datetime
    student_email: str = Field(..., max_length=255)
    custom_meeting_url: str = Field("", max_length=500)


class AttendMeetingSchema(Schema):
    url: str | None = Field(None, max_length=500)


class BoardStateSchema(Schema):
    id: int
    source: str
    webhook: bool | None = None
    github_branch: str
    dev_role: str
    mentor_feedback: str
    service_name: str
    error_message: str
    file: str
    line: int | None = None
    stack_trace: str
    request_url: str
    request_method: str
    timestamp: datetime | None = None
    last_build_status: str
    last_build_output: str
    latest_error_summary: str
    sprint_number: int | None = None
    branch_name: str
    branch_url: str
    latest_commit_id: str
    latest_commit_description: str
    latest_commit_date: datetime | None = None
    last_merge_date: datetime | None = None
    latest_event: str
    pr_status: str
    branch_status: str
    modified: datetime


class BoardStateRecordSchema(Schema):
    """
    A state report. ``source``, ``webhook`` and ``github_branch`` identify the
    row; the other fields given overwrite the stored ones.
    """

    source: str = Field(..., max_length=50)
    webhook: bool | None = None
    github_branch: str = Field("", max_length=200)
    dev_role: str | None = Field(None, max_length=100)
    mentor_feedback: str | None = None
    service_name: str | None = Field(None, max_length=200)
    error_message: str | None = None
    file: str | None = Field(None, max_length=500)
    line: int | None = None
    stack_trace: str | None = None
    request_url: str | None = Field(None, max_length=1000)
    request_method: str | None = Field(None, max_length=10)
    timestamp: datetime | None = None
    last_build_status: str | None = Field(None, max_length=50)
    last_build_output: str | None = None
    latest_error_summary: str | None = None
    sprint_number: int | None = None
    branch_name: str | None = Field(None, max_length=200)
    branch_url: str | None = Field(None, max_length=500)
    latest_commit_id: str | None = Field(None, max_length=100)
    latest_commit_description: str | None = None
    latest_commit_date: datetime | None = None
    last_merge_date: datetime | None = None
    latest_event: str | None = Field(None, max_length=100)
    pr_status: str | None = Field(None, max_length=50)
    branch_status: str | None = Field(None, max_length=50)


class FigmaConnectionSchema(Schema):
    id: int
    board_id: str
    figma_user_id: str
    file_url: str
    file_key: str
    token_expiry: datetime | None = None
    last_sync: datetime | None = None
    is_token_expired: bool


class FigmaConnectionUpdateSchema(Schema):
    access_token: str
    refresh_token: str = ""
    token_expiry: datetime | None = None
    figma_user_id: str = Field("", max_length=100)
    file_url: str = Field("", max_length=500)
    file_key: str = Field("", max_length=100)
