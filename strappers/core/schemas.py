"""
Base schemas for the API.
"""

from datetime import datetime

from ninja import Schema


class BaseSchema(Schema):
    """
    Base schema with common fields.

    Provides standard fields for models inheriting from BaseModel.
    """

    id: int
    created: datetime
    modified: datetime


class MessageSchema(Schema):
    """Schema for simple message responses."""

    message: str


class SuccessSchema(Schema):
    """Schema for success responses."""

    success: bool
    message: str | None = None


class LoginSchema(Schema):
    """Email/password pair for student, organization and employer logins."""

    email: str
    password: str


def patch_fields(data: Schema, nullable: frozenset[str] = frozenset()) -> dict:
    """
    Return the fields a partial-update payload sets.

    An explicit ``null`` clears a field listed in ``nullable`` and is ignored
    for every other field.
    """
    return {
        field: value
        for field, value in data.dict(exclude_unset=True).items()
        if value is not None or field in nullable
    }
