"""
Organizations API controller.
"""

import logging

from django.http import HttpRequest
from django.shortcuts import get_object_or_404
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_patch
from ninja_extra import http_post

from strappers.core.api import AllowAny
from strappers.core.api import BaseAPI
from strappers.core.api import IsAuthenticated
from strappers.core.api import IsStaff
from strappers.core.exceptions import AlreadyExistsError
from strappers.core.exceptions import ErrorSchema
from strappers.core.exceptions import InvalidCredentialsError
from strappers.core.schemas import LoginSchema
from strappers.core.schemas import patch_fields
from strappers.organizations.models import Organization
from strappers.organizations.schemas import AcceptTermsSchema
from strappers.organizations.schemas import OrganizationCreateSchema
from strappers.organizations.schemas import OrganizationSchema
from strappers.organizations.schemas import OrganizationUpdateSchema

logger = logging.getLogger(__name__)


@api_controller("/organizations", tags=["Organizations"], permissions=[IsAuthenticated])
class OrganizationController(BaseAPI):
    """CRUD operations for organizations."""

    @http_get("/", response=list[OrganizationSchema], url_name="organizations_list")
    def list_organizations(self, request: HttpRequest, include_inactive: bool = False):
        organizations = Organization.objects.all()
        if not include_inactive:
            organizations = organizations.filter(is_active=True)
        return list(organizations)

    @http_get(
        "/{int:organization_id}",
        response={200: OrganizationSchema, 404: ErrorSchema},
        url_name="organizations_detail",
    )
    def get_organization(self, request: HttpRequest, organization_id: int):
        return 200, get_object_or_404(Organization, id=organization_id)

    @http_post(
        "/",
        response={201: OrganizationSchema, 409: ErrorSchema},
        permissions=[IsStaff],
        url_name="organizations_create",
    )
    def create_organization(self, request: HttpRequest, data: OrganizationCreateSchema):
        """Create an organization. The password, if given, is stored hashed."""
        payload = data.dict(exclude={"password"})
        if payload["contact_email"] is None:
            payload["contact_email"] = ""
        elif Organization.objects.filter(contact_email__iexact=payload["contact_email"]).exists():
            return AlreadyExistsError("An organization with this contact email already exists.").to_response()

        organization = Organization(**payload)
        organization.set_password(data.password)
        organization.save()
        logger.info("Created organization %s (%s)", organization.pk, organization.name)
        return 201, organization

    @http_patch(
        "/{int:organization_id}",
        response={200: OrganizationSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="organizations_update",
    )
    def update_organization(self, request: HttpRequest, organization_id: int, data: OrganizationUpdateSchema):
        organization = get_object_or_404(Organization, id=organization_id)
        for field, value in patch_fields(data).items():
            setattr(organization, field, value)
        organization.save()
        return 200, organization

    @http_post(
        "/{int:organization_id}/accept-terms",
        response={200: OrganizationSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="organizations_accept_terms",
    )
    def accept_terms(self, request: HttpRequest, organization_id: int, data: AcceptTermsSchema):
        organization = get_object_or_404(Organization, id=organization_id)
        organization.accept_terms(data.terms_use)
        return 200, organization

    @http_post(
        "/login",
        response={200: OrganizationSchema, 401: ErrorSchema},
        permissions=[AllowAny],
        url_name="organizations_login",
    )
    def login(self, request: HttpRequest, data: LoginSchema):
        """Check an organization's credentials and return its profile."""
        organization = Organization.objects.filter(
            contact_email__iexact=data.email,
            is_active=True,
        ).first()
        if organization is None or not organization.check_password(data.password):
            logger.info("Rejected organization login for %s", data.email)
            return InvalidCredentialsError().to_response()
        return 200, organization
