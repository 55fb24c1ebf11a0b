from decimal import Decimal

from factory import Sequence
from factory.django import DjangoModelFactory

from strappers.catalog.models import Major
from strappers.catalog.models import ModuleType
from strappers.catalog.models import ProgrammingLanguage
from strappers.catalog.models import ProjectCriteria
from strappers.catalog.models import ProjectStatus
from strappers.catalog.models import Role
from strappers.catalog.models import RoleType
from strappers.catalog.models import Subscription
from strappers.catalog.models import Year


class MajorFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Major {n}")
    department = "Engineering"

    class Meta:
        model = Major


class YearFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Year {n}")
    sort_order = Sequence(lambda n: n)

    class Meta:
        model = Year


class ProjectStatusFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Status {n}")
    color = "#3498db"

    class Meta:
        model = ProjectStatus


class ProjectCriteriaFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Criteria {n}")
    active = True

    class Meta:
        model = ProjectCriteria


class ModuleTypeFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Module type {n}")

    class Meta:
        model = ModuleType


class ProgrammingLanguageFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Language {n}")

    class Meta:
        model = ProgrammingLanguage


class SubscriptionFactory(DjangoModelFactory):
    description = Sequence(lambda n: f"Plan {n}")
    price = Decimal("0.00")

    class Meta:
        model = Subscription


class RoleFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Role {n}")
    type = RoleType.DEVELOPER

    class Meta:
        model = Role
