"""
Tests for the student models.
"""

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.db.models import ProtectedError
from django_fsm import TransitionNotAllowed

from strappers.boards.tests.factories import ProjectBoardFactory
from strappers.catalog.tests.factories import RoleFactory
from strappers.projects.tests.factories import ProjectFactory
from strappers.students.models import StudentRole
from strappers.students.models import StudentStatus
from strappers.students.tests.factories import StudentFactory


@pytest.mark.django_db
class TestSubmitPriorities:
    """Tests for Student.submit_priorities()."""

    def test_submit(self):
        """Test priorities are stored in order and the student waits."""
        student = StudentFactory()
        first, second, third = ProjectFactory(), ProjectFactory(), ProjectFactory()

        student.submit_priorities([first, second, third])
        student.save()

        student.refresh_from_db()
        assert student.status == StudentStatus.PENDING
        assert student.project == first
        assert student.priority_projects == [first, second, third]
        assert student.project_priority_4 is None
        assert student.start_pending_at is not None

    def test_resubmit_while_pending(self):
        """Test a pending student can change their choices."""
        student = StudentFactory()
        first, second = ProjectFactory(), ProjectFactory()
        student.submit_priorities([first, second])

        student.submit_priorities([second])

        assert student.priority_projects == [second]
        assert student.project_priority_2 is None

    @pytest.mark.parametrize("count", [0, 5])
    def test_count_out_of_range(self, count):
        student = StudentFactory()
        projects = [ProjectFactory() for _ in range(count)]

        with pytest.raises(ValidationError):
            student.submit_priorities(projects)
        assert student.status == StudentStatus.NEW

    def test_duplicates_rejected(self):
        student = StudentFactory()
        project = ProjectFactory()

        with pytest.raises(ValidationError):
            student.submit_priorities([project, project])
        assert student.status == StudentStatus.NEW

    def test_not_allowed_on_board(self):
        student = StudentFactory(status=StudentStatus.ON_BOARD)

        with pytest.raises(TransitionNotAllowed):
            student.submit_priorities([ProjectFactory()])


@pytest.mark.django_db
class TestBoardMembership:
    """Tests for joining and leaving boards."""

    def test_join_and_leave(self):
        board = ProjectBoardFactory()
        student = StudentFactory()
        student.submit_priorities([ProjectFactory()])

        student.join_board(board)
        student.save()
        assert student.status == StudentStatus.ON_BOARD
        assert student.board == board
        assert student.project == board.project

        student.leave_board()
        student.save()
        student.refresh_from_db()
        assert student.status == StudentStatus.NEW
        assert student.board is None
        assert student.project is None

    def test_new_student_cannot_join(self):
        with pytest.raises(TransitionNotAllowed):
            StudentFactory().join_board(ProjectBoardFactory())

    def test_deleting_board_keeps_student(self):
        board = ProjectBoardFactory()
        student = StudentFactory(status=StudentStatus.ON_BOARD, board=board)

        board.delete()

        student.refresh_from_db()
        assert student.board is None

    def test_deleting_project_clears_priorities(self):
        project = ProjectFactory()
        student = StudentFactory()
        student.submit_priorities([ProjectFactory(), project])
        student.save()

        project.delete()

        student.refresh_from_db()
        assert student.project_priority_2 is None
        assert len(student.priority_projects) == 1


@pytest.mark.django_db
class TestStudentConstraints:
    """Tests for uniqueness and protected references."""

    def test_email_unique(self):
        StudentFactory(email="ann@example.com")

        with pytest.raises(IntegrityError):
            StudentFactory(email="ann@example.com")

    def test_student_number_unique_when_set(self):
        StudentFactory(student_number="")
        StudentFactory(student_number="")
        StudentFactory(student_number="S-1")

        with pytest.raises(IntegrityError):
            StudentFactory(student_number="S-1")

    def test_major_is_protected(self):
        student = StudentFactory()

        with pytest.raises(ProtectedError):
            student.major.delete()

    def test_work_preferences_default_off(self):
        student = StudentFactory()

        assert not any(
            getattr(student, f"{name}_work")
            for name in ("hybrid", "home", "full_time", "part_time", "freelance", "travel", "night_shift")
        )


@pytest.mark.django_db
class TestAssignRole:
    """Tests for Student.assign_role()."""

    def test_assign(self):
        student = StudentFactory()
        role = RoleFactory()

        student_role = student.assign_role(role, notes="Sprint 1 lead")

        assert student_role.is_active is True
        assert student_role.notes == "Sprint 1 lead"
        assert student_role.assigned_at is not None

    def test_reassign_updates_active_row(self):
        student = StudentFactory()
        role = RoleFactory()
        student.assign_role(role, notes="first")

        student.assign_role(role, notes="second")

        assert student.roles.count() == 1
        assert student.roles.get().notes == "second"

    def test_deleting_student_deletes_roles(self):
        student = StudentFactory()
        student.assign_role(RoleFactory())

        student.delete()

        assert not StudentRole.objects.exists()
