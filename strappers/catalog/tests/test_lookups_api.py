"""
Tests for the lookups API endpoints.
"""

import pytest
from django.test import Client

from strappers.catalog.tests.factories import MajorFactory
from strappers.catalog.tests.factories import ProjectCriteriaFactory
from strappers.catalog.tests.factories import RoleFactory
from strappers.catalog.tests.factories import SubscriptionFactory
from strappers.catalog.tests.factories import YearFactory


@pytest.mark.django_db
class TestLookupEndpoints:
    """Tests for GET /api/lookups/*."""

    def test_public_access(self):
        """Test lookups are readable without logging in."""
        major = MajorFactory()

        response = Client().get("/api/lookups/majors")

        assert response.status_code == 200
        assert major.name in [row["name"] for row in response.json()]

    def test_inactive_rows_hidden(self):
        """Test inactive majors are not listed."""
        hidden = MajorFactory(is_active=False)

        response = Client().get("/api/lookups/majors")

        assert hidden.name not in [row["name"] for row in response.json()]

    def test_years_ordered_by_sort_order(self):
        """Test years come back in sort order."""
        late = YearFactory(sort_order=900)
        early = YearFactory(sort_order=800)

        names = [row["name"] for row in Client().get("/api/lookups/years").json()]

        assert names.index(early.name) < names.index(late.name)

    def test_project_criteria_include_inactive(self):
        """Test inactive criteria are only listed on request."""
        inactive = ProjectCriteriaFactory(active=False)
        client = Client()

        default = [row["name"] for row in client.get("/api/lookups/project-criteria").json()]
        everything = [
            row["name"]
            for row in client.get("/api/lookups/project-criteria", {"include_inactive": "true"}).json()
        ]

        assert inactive.name not in default
        assert inactive.name in everything

    def test_subscriptions(self):
        """Test subscriptions expose their price."""
        subscription = SubscriptionFactory(price="19.99")

        rows = Client().get("/api/lookups/subscriptions").json()

        row = next(row for row in rows if row["description"] == subscription.description)
        assert float(row["price"]) == pytest.approx(19.99)

    def test_roles(self):
        """Test roles expose their type."""
        role = RoleFactory(type=3)

        rows = Client().get("/api/lookups/roles").json()

        row = next(row for row in rows if row["name"] == role.name)
        assert row["type"] == 3
