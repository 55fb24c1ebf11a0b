"""
Projects API controller.
"""

import logging

from django.http import HttpRequest
from django.shortcuts import get_object_or_404
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_patch
from ninja_extra import http_post

from strappers.catalog.models import ModuleType
from strappers.catalog.models import ProjectCriteria
from strappers.core.api import BaseAPI
from strappers.core.api import IsAuthenticated
from strappers.core.api import IsStaff
from strappers.core.exceptions import BadRequestError
from strappers.core.exceptions import ErrorSchema
from strappers.core.schemas import patch_fields
from strappers.organizations.models import Organization
from strappers.projects.models import DesignVersion
from strappers.projects.models import Project
from strappers.projects.models import ProjectModule
from strappers.projects.schemas import DesignVersionCreateSchema
from strappers.projects.schemas import DesignVersionSchema
from strappers.projects.schemas import ProjectCreateSchema
from strappers.projects.schemas import ProjectModuleCreateSchema
from strappers.projects.schemas import ProjectModuleSchema
from strappers.projects.schemas import ProjectSchema
from strappers.projects.schemas import ProjectUpdateSchema

logger = logging.getLogger(__name__)

PROJECT_NULLABLE_FIELDS = frozenset({"organization_id", "trello_board_json"})


def _get_project(project_id: int) -> Project:
    queryset = Project.objects.with_applicants_count().prefetch_related("criteria")
    return get_object_or_404(queryset, id=project_id)


def _check_references(organization_id: int | None, criteria: list[int] | None) -> BadRequestError | None:
    if organization_id is not None and not Organization.objects.filter(id=organization_id).exists():
        return BadRequestError("Unknown organization.", details={"organization_id": organization_id})
    if criteria:
        known = set(ProjectCriteria.objects.filter(id__in=criteria).values_list("id", flat=True))
        missing = sorted(set(criteria) - known)
        if missing:
            return BadRequestError("Unknown project criteria.", details={"criteria": missing})
    return None


@api_controller("/projects", tags=["Projects"], permissions=[IsAuthenticated])
class ProjectController(BaseAPI):
    """Projects, their modules and their design versions."""

    @http_get("/", response=list[ProjectSchema], url_name="projects_list")
    def list_projects(
        self,
        request: HttpRequest,
        organization: int | None = None,
        available: bool | None = None,
        criteria: int | None = None,
    ):
        """List projects with their number of pending applicants."""
        projects = Project.objects.with_applicants_count().prefetch_related("criteria")
        if organization is not None:
            projects = projects.filter(organization_id=organization)
        if available is not None:
            projects = projects.filter(is_available=available)
        if criteria is not None:
            projects = projects.filter(criteria__id=criteria)
        return list(projects)

    @http_get(
        "/{int:project_id}",
        response={200: ProjectSchema, 404: ErrorSchema},
        url_name="projects_detail",
    )
    def get_project(self, request: HttpRequest, project_id: int):
        return 200, _get_project(project_id)

    @http_post(
        "/",
        response={201: ProjectSchema, 400: ErrorSchema},
        permissions=[IsStaff],
        url_name="projects_create",
    )
    def create_project(self, request: HttpRequest, data: ProjectCreateSchema):
        error = _check_references(data.organization_id, data.criteria)
        if error:
            return error.to_response()

        project = Project.objects.create(**data.dict(exclude={"criteria"}))
        project.criteria.set(data.criteria)
        logger.info("Created project %s (%s)", project.pk, project.title)
        return 201, _get_project(project.pk)

    @http_patch(
        "/{int:project_id}",
        response={200: ProjectSchema, 400: ErrorSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="projects_update",
    )
    def update_project(self, request: HttpRequest, project_id: int, data: ProjectUpdateSchema):
        project = get_object_or_404(Project, id=project_id)
        payload = patch_fields(data, nullable=PROJECT_NULLABLE_FIELDS)
        criteria = payload.pop("criteria", None)

        error = _check_references(payload.get("organization_id"), criteria)
        if error:
            return error.to_response()

        for field, value in payload.items():
            setattr(project, field, value)
        project.save()
        if criteria is not None:
            project.criteria.set(criteria)
        return 200, _get_project(project.pk)

    # Modules

    @http_get(
        "/{int:project_id}/modules",
        response={200: list[ProjectModuleSchema], 404: ErrorSchema},
        url_name="projects_modules",
    )
    def list_modules(self, request: HttpRequest, project_id: int):
        project = get_object_or_404(Project, id=project_id)
        return 200, list(project.modules.all())

    @http_post(
        "/{int:project_id}/modules",
        response={201: ProjectModuleSchema, 400: ErrorSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="projects_modules_create",
    )
    def create_module(self, request: HttpRequest, project_id: int, data: ProjectModuleCreateSchema):
        project = get_object_or_404(Project, id=project_id)
        if not ModuleType.objects.filter(id=data.module_type_id).exists():
            return BadRequestError("Unknown module type.").to_response()
        module = ProjectModule.objects.create(project=project, **data.dict())
        return 201, module

    # Design versions

    @http_get(
        "/{int:project_id}/design-versions",
        response={200: list[DesignVersionSchema], 404: ErrorSchema},
        url_name="projects_design_versions",
    )
    def list_design_versions(self, request: HttpRequest, project_id: int):
        project = get_object_or_404(Project, id=project_id)
        return 200, list(project.design_versions.all())

    @http_post(
        "/{int:project_id}/design-versions",
        response={201: DesignVersionSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="projects_design_versions_create",
    )
    def create_design_version(self, request: HttpRequest, project_id: int, data: DesignVersionCreateSchema):
        """Store a new design version; it becomes the active one."""
        project = get_object_or_404(Project, id=project_id)
        version = DesignVersion.create_next(
            project,
            data.design_document,
            created_by=data.created_by or request.user.get_username(),
        )
        logger.info("Project %s design version %d created", project.pk, version.version_number)
        return 201, version

    @http_post(
        "/{int:project_id}/design-versions/{int:version_number}/activate",
        response={200: DesignVersionSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="projects_design_versions_activate",
    )
    def activate_design_version(self, request: HttpRequest, project_id: int, version_number: int):
        version = get_object_or_404(DesignVersion, project_id=project_id, version_number=version_number)
        version.activate()
        return 200, version
