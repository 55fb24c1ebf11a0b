"""
Schemas for the lookup tables.
"""

from decimal import Decimal

from ninja import Schema


class LookupSchema(Schema):
    """Minimal id/name pair, used for module types and nested references."""

    id: int
    name: str


class MajorSchema(LookupSchema):
    description: str
    department: str


class YearSchema(LookupSchema):
    description: str
    sort_order: int


class ProjectStatusSchema(LookupSchema):
    description: str
    color: str
    sort_order: int


class ProjectCriteriaSchema(LookupSchema):
    active: bool


class ProgrammingLanguageSchema(LookupSchema):
    release_year: int | None = None
    creator: str
    description: str


class SubscriptionSchema(Schema):
    id: int
    description: str
    price: Decimal


class RoleSchema(LookupSchema):
    description: str
    category: str
    type: int
