from factory import Faker
from factory import Sequence
from factory.django import DjangoModelFactory

from strappers.organizations.models import Organization


class OrganizationFactory(DjangoModelFactory):
    name = Faker("company")
    contact_email = Sequence(lambda n: f"contact{n}@org.example.com")
    type = "Company"

    class Meta:
        model = Organization
