"""
Tests for the employer models.
"""

import pytest
from django.db import IntegrityError
from django.db.models import ProtectedError

from strappers.boards.tests.factories import ProjectBoardFactory
from strappers.catalog.tests.factories import SubscriptionFactory
from strappers.employers.models import EmployerBoard
from strappers.employers.models import EmployerCandidate
from strappers.employers.models import observe_board
from strappers.employers.tests.factories import EmployerAdFactory
from strappers.employers.tests.factories import EmployerFactory
from strappers.students.tests.factories import StudentFactory


@pytest.mark.django_db
class TestObserveBoard:
    """Tests for observe_board()."""

    def test_first_observation_counts(self):
        employer = EmployerFactory()
        board = ProjectBoardFactory()

        relation = observe_board(employer, board)

        assert relation.observed is True
        board.refresh_from_db()
        assert board.observed == 1

    def test_repeat_observation_does_not_count(self):
        """Test an employer observing again leaves the counter alone."""
        employer = EmployerFactory()
        board = ProjectBoardFactory()

        observe_board(employer, board)
        observe_board(employer, board, message="Still interested")

        board.refresh_from_db()
        assert board.observed == 1
        assert EmployerBoard.objects.get(employer=employer, board=board).message == "Still interested"

    def test_counter_matches_observing_employers(self):
        board = ProjectBoardFactory()
        employers = [EmployerFactory() for _ in range(3)]

        for employer in employers + employers[:1]:
            observe_board(employer, board)

        board.refresh_from_db()
        assert board.observed == 3
        assert board.observed == EmployerBoard.objects.filter(board=board, observed=True).count()

    def test_existing_unobserved_row(self):
        """Test a relation created without observing counts on first observe."""
        employer = EmployerFactory()
        board = ProjectBoardFactory()
        EmployerBoard.objects.create(employer=employer, board=board, approved=True)

        observe_board(employer, board)

        board.refresh_from_db()
        assert board.observed == 1

    def test_pair_unique(self):
        employer = EmployerFactory()
        board = ProjectBoardFactory()
        EmployerBoard.objects.create(employer=employer, board=board)

        with pytest.raises(IntegrityError):
            EmployerBoard.objects.create(employer=employer, board=board)


@pytest.mark.django_db
class TestEmployer:
    """Tests for Employer, its ads and candidates."""

    def test_tag_list(self):
        ad = EmployerAdFactory(tags=" python, django ,,react ")

        assert ad.tag_list == ["python", "django", "react"]

    def test_role_is_protected(self):
        ad = EmployerAdFactory()

        with pytest.raises(ProtectedError):
            ad.role.delete()

    def test_subscription_is_protected(self):
        employer = EmployerFactory(subscription_type=SubscriptionFactory())

        with pytest.raises(ProtectedError):
            employer.subscription_type.delete()

    def test_candidate_pair_unique(self):
        employer = EmployerFactory()
        student = StudentFactory()
        EmployerCandidate.objects.create(employer=employer, student=student)

        with pytest.raises(IntegrityError):
            EmployerCandidate.objects.create(employer=employer, student=student)

    def test_deleting_employer_cascades(self):
        employer = EmployerFactory()
        EmployerAdFactory(employer=employer)
        EmployerCandidate.objects.create(employer=employer, student=StudentFactory())
        observe_board(employer, ProjectBoardFactory())

        employer.delete()

        assert not EmployerCandidate.objects.exists()
        assert not EmployerBoard.objects.exists()
