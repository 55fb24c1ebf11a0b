from django.utils import timezone
from factory import LazyFunction
from factory import Sequence
from factory import SubFactory
from factory.django import DjangoModelFactory

from strappers.boards.models import BoardMeeting
from strappers.boards.models import FigmaConnection
from strappers.boards.models import ProjectBoard
from strappers.projects.tests.factories import ProjectFactory


class ProjectBoardFactory(DjangoModelFactory):
    board_id = Sequence(lambda n: f"board{n:05d}")
    project = SubFactory(ProjectFactory)

    class Meta:
        model = ProjectBoard


class BoardMeetingFactory(DjangoModelFactory):
    board = SubFactory(ProjectBoardFactory)
    meeting_time = LazyFunction(timezone.now)
    student_email = Sequence(lambda n: f"student{n}@example.com")

    class Meta:
        model = BoardMeeting


class FigmaConnectionFactory(DjangoModelFactory):
    board = SubFactory(ProjectBoardFactory)
    access_token = Sequence(lambda n: f"access-{n}")
    file_key = Sequence(lambda n: f"file{n}")

    class Meta:
        model = FigmaConnection
