"""
Read-only API for the lookup tables.

These back the dropdowns of the signup and project forms, so they are public.
Tables with an active flag only return active rows.
"""

from ninja_extra import api_controller
from ninja_extra import http_get

from strappers.catalog.models import Major
from strappers.catalog.models import ModuleType
from strappers.catalog.models import ProgrammingLanguage
from strappers.catalog.models import ProjectCriteria
from strappers.catalog.models import ProjectStatus
from strappers.catalog.models import Role
from strappers.catalog.models import Subscription
from strappers.catalog.models import Year
from strappers.catalog.schemas import LookupSchema
from strappers.catalog.schemas import MajorSchema
from strappers.catalog.schemas import ProgrammingLanguageSchema
from strappers.catalog.schemas import ProjectCriteriaSchema
from strappers.catalog.schemas import ProjectStatusSchema
from strappers.catalog.schemas import RoleSchema
from strappers.catalog.schemas import SubscriptionSchema
from strappers.catalog.schemas import YearSchema
from strappers.core.api import AllowAny
from strappers.core.api import BaseAPI


@api_controller("/lookups", tags=["Lookups"], permissions=[AllowAny])
class LookupController(BaseAPI):
    """Lookup tables used across the platform."""

    @http_get("/majors", response=list[MajorSchema], url_name="lookups_majors")
    def list_majors(self):
        return list(Major.objects.active())

    @http_get("/years", response=list[YearSchema], url_name="lookups_years")
    def list_years(self):
        return list(Year.objects.active())

    @http_get(
        "/project-statuses",
        response=list[ProjectStatusSchema],
        url_name="lookups_project_statuses",
    )
    def list_project_statuses(self):
        return list(ProjectStatus.objects.active())

    @http_get(
        "/project-criteria",
        response=list[ProjectCriteriaSchema],
        url_name="lookups_project_criteria",
    )
    def list_project_criteria(self, include_inactive: bool = False):
        """List project criteria. Inactive criteria are hidden unless requested."""
        criteria = ProjectCriteria.objects.all()
        if not include_inactive:
            criteria = criteria.filter(active=True)
        return list(criteria)

    @http_get("/module-types", response=list[LookupSchema], url_name="lookups_module_types")
    def list_module_types(self):
        return list(ModuleType.objects.all())

    @http_get(
        "/programming-languages",
        response=list[ProgrammingLanguageSchema],
        url_name="lookups_programming_languages",
    )
    def list_programming_languages(self):
        return list(ProgrammingLanguage.objects.active())

    @http_get(
        "/subscriptions",
        response=list[SubscriptionSchema],
        url_name="lookups_subscriptions",
    )
    def list_subscriptions(self):
        return list(Subscription.objects.all())

    @http_get("/roles", response=list[RoleSchema], url_name="lookups_roles")
    def list_roles(self):
        return list(Role.objects.active())
