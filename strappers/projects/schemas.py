"""
Project schemas for API requests and responses.
"""

from datetime import datetime

from ninja import Field
from ninja import Schema

from strappers.core.schemas import BaseSchema
from strappers.projects.models import ProjectPriority


class ProjectSchema(BaseSchema):
    title: str
    description: str
    extended_description: str
    system_design: str
    data_schema: str
    customer_past_story: str
    priority: str
    organization_id: int | None = None
    is_available: bool
    kickoff: bool
    criteria: list[int]
    trello_board_json: dict | list | None = None
    ide_generation_status: str
    total_chunks: int
    completed_chunks: int
    generation_progress: int
    mock_records_count: int
    applicants_count: int = 0

    @staticmethod
    def resolve_criteria(obj) -> list[int]:
        return [criteria.id for criteria in obj.criteria.all()]


class ProjectCreateSchema(Schema):
    title: str = Field(..., max_length=200)
    description: str = Field("", max_length=1000)
    extended_description: str = ""
    system_design: str = ""
    data_schema: str = ""
    customer_past_story: str = ""
    priority: ProjectPriority = ProjectPriority.MEDIUM
    organization_id: int | None = None
    is_available: bool = True
    criteria: list[int] = []


class ProjectUpdateSchema(Schema):
    """
    Partial update; omitted fields are left unchanged.

    ``organization_id`` and ``trello_board_json`` may be sent as ``null`` to
    clear them.
    """

    title: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=1000)
    extended_description: str | None = None
    system_design: str | None = None
    data_schema: str | None = None
    customer_past_story: str | None = None
    priority: ProjectPriority | None = None
    organization_id: int | None = None
    is_available: bool | None = None
    kickoff: bool | None = None
    criteria: list[int] | None = None
    trello_board_json: dict | list | None = None


class ProjectModuleSchema(Schema):
    id: int
    module_type_id: int
    title: str
    description: str
    sequence: int | None = None


class ProjectModuleCreateSchema(Schema):
    module_type_id: int
    title: str = Field(..., max_length=100)
    description: str = ""
    sequence: int | None = None


class DesignVersionSchema(Schema):
    id: int
    version_number: int
    design_document: str
    created_by: str
    is_active: bool
    created: datetime


class DesignVersionCreateSchema(Schema):
    design_document: str
    created_by: str = Field("", max_length=255)
