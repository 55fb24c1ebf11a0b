"""
Students API controller.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import HttpRequest
from django.shortcuts import get_object_or_404
from django_fsm import TransitionNotAllowed
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_patch
from ninja_extra import http_post

from strappers.boards.models import ProjectBoard
from strappers.catalog.models import Major
from strappers.catalog.models import ProgrammingLanguage
from strappers.catalog.models import Role
from strappers.catalog.models import Subscription
from strappers.catalog.models import Year
from strappers.core.api import AllowAny
from strappers.core.api import BaseAPI
from strappers.core.api import IsAuthenticated
from strappers.core.api import IsStaff
from strappers.core.exceptions import AlreadyExistsError
from strappers.core.exceptions import BadRequestError
from strappers.core.exceptions import ErrorSchema
from strappers.core.exceptions import InvalidCredentialsError
from strappers.core.exceptions import ValidationError
from strappers.core.schemas import LoginSchema
from strappers.core.schemas import patch_fields
from strappers.projects.models import Project
from strappers.students.models import Student
from strappers.students.schemas import AssignRoleSchema
from strappers.students.schemas import JoinBoardSchema
from strappers.students.schemas import StudentCreateSchema
from strappers.students.schemas import StudentRoleSchema
from strappers.students.schemas import StudentSchema
from strappers.students.schemas import StudentUpdateSchema
from strappers.students.schemas import SubmitPrioritiesSchema

logger = logging.getLogger(__name__)

STUDENT_REFERENCES = {
    "major_id": Major,
    "year_id": Year,
    "programming_language_id": ProgrammingLanguage,
    "subscription_type_id": Subscription,
}

STUDENT_NULLABLE_FIELDS = frozenset({"programming_language_id", "subscription_type_id", "minutes_to_work"})


def _student_queryset():
    return Student.objects.select_related(
        "project_priority_1",
        "project_priority_2",
        "project_priority_3",
        "project_priority_4",
    )


def _check_references(fields: dict) -> BadRequestError | None:
    unknown = {
        field: fields[field]
        for field, model in STUDENT_REFERENCES.items()
        if fields.get(field) is not None and not model.objects.filter(id=fields[field]).exists()
    }
    if unknown:
        return BadRequestError("Unknown related records.", details=unknown)
    return None


@api_controller("/students", tags=["Students"], permissions=[IsAuthenticated])
class StudentController(BaseAPI):
    """Student profiles, priorities, boards and roles."""

    @http_get("/", response=list[StudentSchema], url_name="students_list")
    def list_students(
        self,
        request: HttpRequest,
        major: int | None = None,
        year: int | None = None,
        status: int | None = None,
        available: bool | None = None,
    ):
        students = _student_queryset()
        if major is not None:
            students = students.filter(major_id=major)
        if year is not None:
            students = students.filter(year_id=year)
        if status is not None:
            students = students.filter(status=status)
        if available is not None:
            students = students.filter(is_available=available)
        return list(students)

    @http_get(
        "/{int:student_id}",
        response={200: StudentSchema, 404: ErrorSchema},
        url_name="students_detail",
    )
    def get_student(self, request: HttpRequest, student_id: int):
        return 200, get_object_or_404(_student_queryset(), id=student_id)

    @http_post(
        "/",
        response={201: StudentSchema, 400: ErrorSchema, 409: ErrorSchema},
        permissions=[IsStaff],
        url_name="students_create",
    )
    def create_student(self, request: HttpRequest, data: StudentCreateSchema):
        """Create a student. The password, if given, is stored hashed."""
        if Student.objects.filter(email__iexact=data.email).exists():
            return AlreadyExistsError("A student with this email already exists.").to_response()
        if data.student_number and Student.objects.filter(student_number=data.student_number).exists():
            return AlreadyExistsError("A student with this student number already exists.").to_response()
        fields = data.dict(exclude={"password"})
        error = _check_references(fields)
        if error:
            return error.to_response()

        student = Student(**fields)
        student.set_password(data.password)
        student.save()
        logger.info("Created student %s (%s)", student.pk, student.email)
        return 201, student

    @http_patch(
        "/{int:student_id}",
        response={200: StudentSchema, 400: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        permissions=[IsStaff],
        url_name="students_update",
    )
    def update_student(self, request: HttpRequest, student_id: int, data: StudentUpdateSchema):
        student = get_object_or_404(Student, id=student_id)
        changes = patch_fields(data, nullable=STUDENT_NULLABLE_FIELDS)
        number = changes.get("student_number")
        if number and Student.objects.filter(student_number=number).exclude(pk=student.pk).exists():
            return AlreadyExistsError("A student with this student number already exists.").to_response()
        error = _check_references(changes)
        if error:
            return error.to_response()

        for field, value in changes.items():
            setattr(student, field, value)
        student.save()
        return 200, student

    @http_post(
        "/{int:student_id}/priorities",
        response={200: StudentSchema, 400: ErrorSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="students_submit_priorities",
    )
    def submit_priorities(self, request: HttpRequest, student_id: int, data: SubmitPrioritiesSchema):
        """Submit the student's project choices, first choice first."""
        student = get_object_or_404(Student, id=student_id)
        projects_by_id = Project.objects.in_bulk(data.projects)
        missing = [project_id for project_id in data.projects if project_id not in projects_by_id]
        if missing:
            return BadRequestError("Unknown projects.", details={"projects": missing}).to_response()

        try:
            student.submit_priorities([projects_by_id[project_id] for project_id in data.projects])
        except DjangoValidationError as exc:
            return ValidationError.from_django(exc).to_response()
        except TransitionNotAllowed:
            return BadRequestError("A student on a board cannot change priorities.").to_response()
        student.save()
        return 200, student

    @http_post(
        "/{int:student_id}/join-board",
        response={200: StudentSchema, 400: ErrorSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="students_join_board",
    )
    def join_board(self, request: HttpRequest, student_id: int, data: JoinBoardSchema):
        student = get_object_or_404(Student, id=student_id)
        board = get_object_or_404(ProjectBoard, board_id=data.board_id)
        try:
            student.join_board(board)
        except TransitionNotAllowed:
            return BadRequestError("Only pending students can join a board.").to_response()
        student.save()
        return 200, student

    @http_post(
        "/{int:student_id}/leave-board",
        response={200: StudentSchema, 400: ErrorSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="students_leave_board",
    )
    def leave_board(self, request: HttpRequest, student_id: int):
        student = get_object_or_404(Student, id=student_id)
        try:
            student.leave_board()
        except TransitionNotAllowed:
            return BadRequestError("The student is not on a board.").to_response()
        student.save()
        return 200, student

    # Roles

    @http_get(
        "/{int:student_id}/roles",
        response={200: list[StudentRoleSchema], 404: ErrorSchema},
        url_name="students_roles",
    )
    def list_roles(self, request: HttpRequest, student_id: int, include_inactive: bool = False):
        student = get_object_or_404(Student, id=student_id)
        roles = student.roles.select_related("role")
        if not include_inactive:
            roles = roles.filter(is_active=True)
        return 200, list(roles)

    @http_post(
        "/{int:student_id}/roles",
        response={201: StudentRoleSchema, 404: ErrorSchema},
        permissions=[IsStaff],
        url_name="students_assign_role",
    )
    def assign_role(self, request: HttpRequest, student_id: int, data: AssignRoleSchema):
        student = get_object_or_404(Student, id=student_id)
        role = get_object_or_404(Role, id=data.role_id)
        student_role = student.assign_role(role, end_date=data.end_date, notes=data.notes)
        return 201, student_role

    @http_post(
        "/login",
        response={200: StudentSchema, 401: ErrorSchema},
        permissions=[AllowAny],
        url_name="students_login",
    )
    def login(self, request: HttpRequest, data: LoginSchema):
        """Check a student's credentials and return their profile."""
        student = _student_queryset().filter(email__iexact=data.email).first()
        if student is None or not student.check_password(data.password):
            logger.info("Rejected student login for %s", data.email)
            return InvalidCredentialsError().to_response()
        return 200, student
