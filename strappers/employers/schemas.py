"""
Employer schemas for API requests and responses.
"""

from datetime import datetime

from ninja import Field
from ninja import Schema

from strappers.core.schemas import BaseSchema


class EmployerSchema(BaseSchema):
    name: str
    logo: str
    website: str
    contact_email: str
    phone: str
    address: str
    description: str
    subscription_type_id: int | None = None


class EmployerCreateSchema(Schema):
    name: str = Field(..., max_length=200)
    logo: str = ""
    website: str = Field("", max_length=200)
    contact_email: str = Field("", max_length=255)
    phone: str = Field("", max_length=20)
    address: str = Field("", max_length=200)
    description: str = ""
    subscription_type_id: int | None = None
    password: str | None = None


class EmployerAdSchema(Schema):
    id: int
    employer_id: int
    role_id: int
    tags: list[str]
    job_description: str
    created: datetime

    @staticmethod
    def resolve_tags(obj) -> list[str]:
        return obj.tag_list


class EmployerAdCreateSchema(Schema):
    role_id: int
    tags: list[str] = []
    job_description: str = ""


class ObserveBoardSchema(Schema):
    board_id: str
    approved: bool | None = None
    meet_request: datetime | None = None
    message: str | None = None


class EmployerBoardSchema(Schema):
    id: int
    employer_id: int
    board_id: str
    observed: bool
    approved: bool
    meet_request: datetime | None = None
    message: str
    board_observed: int

    @staticmethod
    def resolve_board_observed(obj) -> int:
        return obj.board.observed


class CandidateSchema(Schema):
    id: int
    student_id: int
    first_name: str
    last_name: str
    email: str
    created: datetime

    @staticmethod
    def resolve_first_name(obj) -> str:
        return obj.student.first_name

    @staticmethod
    def resolve_last_name(obj) -> str:
        return obj.student.last_name

    @staticmethod
    def resolve_email(obj) -> str:
        return obj.student.email


class AddCandidateSchema(Schema):
    student_id: int
