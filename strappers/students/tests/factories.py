from factory import Faker
from factory import Sequence
from factory import SubFactory
from factory.django import DjangoModelFactory

from strappers.catalog.tests.factories import MajorFactory
from strappers.catalog.tests.factories import YearFactory
from strappers.students.models import Student


class StudentFactory(DjangoModelFactory):
    first_name = Faker("first_name")
    last_name = Faker("last_name")
    email = Sequence(lambda n: f"student{n}@university.example.com")
    major = SubFactory(MajorFactory)
    year = SubFactory(YearFactory)

    class Meta:
        model = Student
