import pytest
from django.test import Client

from strappers.core.tests.factories import UserFactory


@pytest.fixture
def user(db):
    """Create a regular API user."""
    return UserFactory()


@pytest.fixture
def staff_user(db):
    """Create a staff API user."""
    return UserFactory(is_staff=True)


@pytest.fixture
def authenticated_client(user):
    """Return a client logged in as a regular user."""
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def staff_client(staff_user):
    """Return a client logged in as staff."""
    client = Client()
    client.force_login(staff_user)
    return client
