"""
Student schemas for API requests and responses.
"""

from datetime import datetime

from ninja import Field
from ninja import Schema

from strappers.core.schemas import BaseSchema


class WorkPreferencesSchema(Schema):
    hybrid_work: bool = False
    home_work: bool = False
    full_time_work: bool = False
    part_time_work: bool = False
    freelance_work: bool = False
    travel_work: bool = False
    night_shift_work: bool = False
    relocation_work: bool = False
    student_work: bool = False
    multilingual_work: bool = False


class StudentSchema(BaseSchema, WorkPreferencesSchema):
    first_name: str
    last_name: str
    email: str
    student_number: str
    major_id: int
    year_id: int
    linkedin_url: str
    github_user: str
    photo: str
    is_admin: bool
    is_available: bool
    status: int
    start_pending_at: datetime | None = None
    project_id: int | None = None
    priorities: list[int]
    board_id: str | None = None
    programming_language_id: int | None = None
    subscription_type_id: int | None = None
    minutes_to_work: int | None = None

    @staticmethod
    def resolve_priorities(obj) -> list[int]:
        return [project.id for project in obj.priority_projects]


class StudentCreateSchema(WorkPreferencesSchema):
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=255)
    student_number: str = Field("", max_length=50)
    major_id: int
    year_id: int
    linkedin_url: str = Field("", max_length=500)
    github_user: str = Field("", max_length=100)
    photo: str = ""
    cv: str = ""
    programming_language_id: int | None = None
    subscription_type_id: int | None = None
    minutes_to_work: int | None = None
    password: str | None = None


class StudentUpdateSchema(Schema):
    """
    Partial update; omitted fields are left unchanged.

    ``programming_language_id``, ``subscription_type_id`` and
    ``minutes_to_work`` may be sent as ``null`` to clear them.
    """

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    student_number: str | None = Field(None, max_length=50)
    major_id: int | None = None
    year_id: int | None = None
    linkedin_url: str | None = Field(None, max_length=500)
    github_user: str | None = Field(None, max_length=100)
    photo: str | None = None
    cv: str | None = None
    is_admin: bool | None = None
    is_available: bool | None = None
    programming_language_id: int | None = None
    subscription_type_id: int | None = None
    minutes_to_work: int | None = None
    hybrid_work: bool | None = None
    home_work: bool | None = None
    full_time_work: bool | None = None
    part_time_work: bool | None = None
    freelance_work: bool | None = None
    travel_work: bool | None = None
    night_shift_work: bool | None = None
    relocation_work: bool | None = None
    student_work: bool | None = None
    multilingual_work: bool | None = None


class SubmitPrioritiesSchema(Schema):
    projects: list[int] = Field(..., min_length=1, max_length=4)


class JoinBoardSchema(Schema):
    board_id: str


class StudentRoleSchema(Schema):
    id: int
    role_id: int
    role_name: str = Field(..., alias="role.name")
    assigned_at: datetime
    end_date: datetime | None = None
    notes: str
    is_active: bool


class AssignRoleSchema(Schema):
    role_id: int
    end_date: datetime | None = None
    notes: str = Field("", max_length=200)
