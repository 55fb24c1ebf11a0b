"""
Tests for the permission classes.
"""

import pytest
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory

from strappers.core.api.permissions import AllowAny
from strappers.core.api.permissions import IsAuthenticated
from strappers.core.api.permissions import IsStaff
from strappers.core.tests.factories import UserFactory


@pytest.fixture
def request_factory():
    """Return a Django RequestFactory."""
    return RequestFactory()


def make_request(request_factory, user=None):
    """Create a request with the given user."""
    request = request_factory.get("/")
    request.user = user if user else AnonymousUser()
    return request


@pytest.mark.django_db
class TestIsAuthenticated:
    """Tests for IsAuthenticated permission."""

    def test_anonymous_user_denied(self, request_factory):
        """Test anonymous user is denied."""
        request = make_request(request_factory)
        assert IsAuthenticated().has_permission(request, None) is False

    def test_authenticated_user_allowed(self, request_factory):
        """Test authenticated user is allowed."""
        request = make_request(request_factory, UserFactory())
        assert IsAuthenticated().has_permission(request, None) is True


@pytest.mark.django_db
class TestIsStaff:
    """Tests for IsStaff permission."""

    def test_anonymous_user_denied(self, request_factory):
        request = make_request(request_factory)
        assert IsStaff().has_permission(request, None) is False

    def test_regular_user_denied(self, request_factory):
        request = make_request(request_factory, UserFactory())
        assert IsStaff().has_permission(request, None) is False

    def test_staff_user_allowed(self, request_factory):
        request = make_request(request_factory, UserFactory(is_staff=True))
        assert IsStaff().has_permission(request, None) is True


class TestAllowAny:
    """Tests for AllowAny permission."""

    def test_anonymous_user_allowed(self, request_factory):
        request = make_request(request_factory)
        assert AllowAny().has_permission(request, None) is True
