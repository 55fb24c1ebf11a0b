"""
Employers API controller.
"""

import logging

from django.http import HttpRequest
from django.shortcuts import get_object_or_404
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post

from strappers.boards.models import ProjectBoard
from strappers.catalog.models import Role
from strappers.catalog.models import Subscription
from strappers.core.api import AllowAny
from strappers.core.api import BaseAPI
from strappers.core.api import IsAuthenticated
from strappers.core.api import IsStaff
from strappers.core.exceptions import AlreadyExistsError
from strappers.core.exceptions import BadRequestError
from strappers.core.exceptions import ErrorSchema
from strappers.core.exceptions import InvalidCredentialsError
from strappers.core.schemas import LoginSchema
from strappers.core.schemas import SuccessSchema
from strappers.employers.models import Employer
from strappers.employers.models import EmployerAd
from strappers.employers.models import EmployerCandidate
from strappers.employers.models import observe_board
from strappers.employers.schemas import AddCandidateSchema
from strappers.employers.schemas import CandidateSchema
from strappers.employers.schemas import EmployerAdCreateSchema
from strappers.employers.schemas import EmployerAdSchema
from strappers.employers.schemas import EmployerBoardSchema
from strappers.employers.schemas import EmployerCreateSchema
from strappers.employers.schemas import EmployerSchema
from strappers.employers.schemas import ObserveBoardSchema
from strappers.students.models import Student

logger = logging.getLogger(__name__)


@api_controller("/employers", tags=["Employers"], permissions=[IsAuthenticated])
class EmployerController(BaseAPI):
    """Employers, their job ads, observed boards and candidates."""

    @http_get("/", response=list[EmployerSchema], url_name="employers_list")
    def list_employers(self, request: HttpRequest):
        return list(Employer.objects.all())

    @http_get(
        "/{int:employer_id}",
        response={200: EmployerSchema, 404: ErrorSchema},
        url_name="employers_detail",
    )
    def get_employer(self, request: HttpRequest, employer_id: int):
        return 200, get_object_or_404(Employer, id=employer_id)

    @http_post(
        "/",
        response={201: EmployerSchema, 400: ErrorSchema, 409: ErrorSchema},
        permissions=[IsStaff],
        url_name="employers_create",
    )
    def create_employer(self, request: HttpRequest, data: EmployerCreateSchema):
        """Create an employer. The password, if given, is stored hashed."""
        if data.contact_email and Employer.objects.filter(contact_email__iexact=data.contact_email).exists():
            return AlreadyExistsError("An employer with this contact email already exists.").to_response()
        if (
            data.subscription_type_id is not None
            and not Subscription.objects.filter(id=data.subscription_type_id).exists()
        ):
            return BadRequestError("Unknown subscription.").to_response()

        employer = Employer(**data.dict(exclude={"password"}))
        employer.set_password(data.password)
        employer.save()
        logger.info("Created employer %s (%s)", employer.pk, employer.name)
        return 201, employer

    # Ads

    @http_get(
        "/{int:employer_id}/ads",
        response={200: list[EmployerAdSchema], 404: ErrorSchema},
        url_name="employers_ads",
    )
    def list_ads(self, request: HttpRequest, employer_id: int):
        employer = get_object_or_404(Employer, id=employer_id)
        return 200, list(employer.ads.all())

    @http_post(
        "/{int:employer_id}/ads",
        response={201: EmployerAdSchema, 400: ErrorSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="employers_ads_create",
    )
    def create_ad(self, request: HttpRequest, employer_id: int, data: EmployerAdCreateSchema):
        employer = get_object_or_404(Employer, id=employer_id)
        if not Role.objects.filter(id=data.role_id).exists():
            return BadRequestError("Unknown role.").to_response()
        ad = EmployerAd.objects.create(
            employer=employer,
            role_id=data.role_id,
            tags=",".join(tag.strip() for tag in data.tags if tag.strip()),
            job_description=data.job_description,
        )
        return 201, ad

    # Boards

    @http_post(
        "/{int:employer_id}/observe",
        response={200: EmployerBoardSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="employers_observe_board",
    )
    def observe(self, request: HttpRequest, employer_id: int, data: ObserveBoardSchema):
        """Mark a board as observed by the employer."""
        employer = get_object_or_404(Employer, id=employer_id)
        board = get_object_or_404(ProjectBoard, board_id=data.board_id)
        fields = data.dict(exclude={"board_id"}, exclude_none=True)
        relation = observe_board(employer, board, **fields)
        return 200, relation

    # Candidates

    @http_get(
        "/{int:employer_id}/candidates",
        response={200: list[CandidateSchema], 404: ErrorSchema},
        url_name="employers_candidates",
    )
    def list_candidates(self, request: HttpRequest, employer_id: int):
        employer = get_object_or_404(Employer, id=employer_id)
        return 200, list(employer.candidates.select_related("student"))

    @http_post(
        "/{int:employer_id}/candidates",
        response={201: CandidateSchema, 404: ErrorSchema, 409: ErrorSchema},
        permissions=[IsStaff],
        url_name="employers_candidates_add",
    )
    def add_candidate(self, request: HttpRequest, employer_id: int, data: AddCandidateSchema):
        employer = get_object_or_404(Employer, id=employer_id)
        student = get_object_or_404(Student, id=data.student_id)
        candidate, created = EmployerCandidate.objects.get_or_create(employer=employer, student=student)
        if not created:
            return AlreadyExistsError("This student is already a candidate.").to_response()
        return 201, candidate

    @http_delete(
        "/{int:employer_id}/candidates/{int:student_id}",
        response={200: SuccessSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="employers_candidates_remove",
    )
    def remove_candidate(self, request: HttpRequest, employer_id: int, student_id: int):
        candidate = get_object_or_404(EmployerCandidate, employer_id=employer_id, student_id=student_id)
        candidate.delete()
        return 200, SuccessSchema(success=True, message="Candidate removed.")

    @http_post(
        "/login",
        response={200: EmployerSchema, 401: ErrorSchema},
        permissions=[AllowAny],
        url_name="employers_login",
    )
    def login(self, request: HttpRequest, data: LoginSchema):
        """Check an employer's credentials and return its profile."""
        employer = Employer.objects.filter(contact_email__iexact=data.email).first()
        if employer is None or not employer.check_password(data.password):
            logger.info("Rejected employer login for %s", data.email)
            return InvalidCredentialsError().to_response()
        return 200, employer
