"""
Lookup table schemas.
"""

from strappers.catalog.schemas.lookups import LookupSchema
from strappers.catalog.schemas.lookups import MajorSchema
from strappers.catalog.schemas.lookups import ProgrammingLanguageSchema
from strappers.catalog.schemas.lookups import ProjectCriteriaSchema
from strappers.catalog.schemas.lookups import ProjectStatusSchema
from strappers.catalog.schemas.lookups import RoleSchema
from strappers.catalog.schemas.lookups import SubscriptionSchema
from strappers.catalog.schemas.lookups import YearSchema

__all__ = [
    "LookupSchema",
    "MajorSchema",
    "YearSchema",
    "ProjectStatusSchema",
    "ProjectCriteriaSchema",
    "ProgrammingLanguageSchema",
    "SubscriptionSchema",
    "RoleSchema",
]
