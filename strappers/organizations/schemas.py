"""
Organization schemas for API requests and responses.
"""

from datetime import datetime

from ninja import Field
from ninja import Schema


class OrganizationSchema(Schema):
    id: int
    name: str
    description: str
    website: str
    contact_email: str
    phone: str
    address: str
    type: str
    logo: str
    terms_accepted: bool
    terms_accepted_at: datetime | None = None
    is_active: bool
    created: datetime


class OrganizationCreateSchema(Schema):
    name: str = Field(..., max_length=200)
    description: str = Field("", max_length=1000)
    website: str = Field("", max_length=200)
    contact_email: str | None = Field(None, max_length=255)
    phone: str = Field("", max_length=20)
    address: str = Field("", max_length=200)
    type: str = Field("", max_length=50)
    logo: str = ""
    password: str | None = None


class OrganizationUpdateSchema(Schema):
    """Partial update; omitted fields are left unchanged."""

    name: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=1000)
    website: str | None = Field(None, max_length=200)
    contact_email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    address: str | None = Field(None, max_length=200)
    type: str | None = Field(None, max_length=50)
    logo: str | None = None
    is_active: bool | None = None


class AcceptTermsSchema(Schema):
    terms_use: str | None = None
