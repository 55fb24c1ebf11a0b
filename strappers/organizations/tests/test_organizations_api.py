"""
Tests for the organizations API endpoints.
"""

import pytest
from django.test import Client

from strappers.organizations.models import Organization
from strappers.organizations.tests.factories import OrganizationFactory


@pytest.mark.django_db
class TestListOrganizations:
    """Tests for GET /api/organizations/."""

    def test_unauthenticated_denied(self):
        """Test unauthenticated request is denied."""
        response = Client().get("/api/organizations/")
        assert response.status_code == 403

    def test_inactive_hidden_by_default(self, authenticated_client):
        """Test inactive organizations are only listed on request."""
        active = OrganizationFactory()
        inactive = OrganizationFactory(is_active=False)

        default = {row["id"] for row in authenticated_client.get("/api/organizations/").json()}
        everything = {
            row["id"]
            for row in authenticated_client.get("/api/organizations/", {"include_inactive": "true"}).json()
        }

        assert default == {active.id}
        assert everything == {active.id, inactive.id}


@pytest.mark.django_db
class TestCreateOrganization:
    """Tests for POST /api/organizations/."""

    def test_requires_staff(self, authenticated_client):
        """Test regular users cannot create organizations."""
        response = authenticated_client.post(
            "/api/organizations/",
            data={"name": "Acme"},
            content_type="application/json",
        )
        assert response.status_code == 403

    def test_create_hashes_password(self, staff_client):
        """Test the password is stored hashed and never returned."""
        response = staff_client.post(
            "/api/organizations/",
            data={"name": "Acme", "contact_email": "hello@acme.test", "password": "s3cret"},
            content_type="application/json",
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Acme"
        assert "password" not in data
        assert "password_hash" not in data

        organization = Organization.objects.get(id=data["id"])
        assert organization.check_password("s3cret")

    def test_duplicate_contact_email(self, staff_client):
        """Test a contact email can only be used once."""
        OrganizationFactory(contact_email="hello@acme.test")

        response = staff_client.post(
            "/api/organizations/",
            data={"name": "Acme bis", "contact_email": "HELLO@acme.test"},
            content_type="application/json",
        )
        assert response.status_code == 409
        assert response.json()["code"] == "ALREADY_EXISTS"


@pytest.mark.django_db
class TestUpdateOrganization:
    """Tests for PATCH /api/organizations/{id}."""

    def test_partial_update(self, staff_client):
        """Test only the given fields change."""
        organization = OrganizationFactory(name="Old", phone="123")

        response = staff_client.patch(
            f"/api/organizations/{organization.id}",
            data={"name": "New"},
            content_type="application/json",
        )
        assert response.status_code == 200

        organization.refresh_from_db()
        assert organization.name == "New"
        assert organization.phone == "123"

    def test_phone_too_long(self, staff_client):
        """Test a value longer than its column is rejected."""
        organization = OrganizationFactory(phone="123")

        response = staff_client.patch(
            f"/api/organizations/{organization.id}",
            data={"phone": "1" * 21},
            content_type="application/json",
        )
        assert response.status_code == 422

        organization.refresh_from_db()
        assert organization.phone == "123"

    def test_not_found(self, staff_client):
        """Test updating a missing organization returns 404."""
        response = staff_client.patch(
            "/api/organizations/999999",
            data={"name": "New"},
            content_type="application/json",
        )
        assert response.status_code == 404


@pytest.mark.django_db
class TestAcceptTerms:
    """Tests for POST /api/organizations/{id}/accept-terms."""

    def test_accept_terms(self, staff_client):
        organization = OrganizationFactory()

        response = staff_client.post(
            f"/api/organizations/{organization.id}/accept-terms",
            data={},
            content_type="application/json",
        )
        assert response.status_code == 200
        assert response.json()["terms_accepted"] is True
        assert response.json()["terms_accepted_at"] is not None

    def test_requires_staff(self, authenticated_client):
        organization = OrganizationFactory()

        response = authenticated_client.post(
            f"/api/organizations/{organization.id}/accept-terms",
            data={},
            content_type="application/json",
        )

        organization.refresh_from_db()
        assert response.status_code == 403
        assert organization.terms_accepted is False


@pytest.mark.django_db
class TestOrganizationLogin:
    """Tests for POST /api/organizations/login."""

    def test_login_success(self):
        """Test valid credentials return the profile."""
        organization = OrganizationFactory(contact_email="hello@acme.test")
        organization.set_password("s3cret")
        organization.save()

        response = Client().post(
            "/api/organizations/login",
            data={"email": "hello@acme.test", "password": "s3cret"},
            content_type="application/json",
        )
        assert response.status_code == 200
        assert response.json()["id"] == organization.id

    def test_login_wrong_password(self):
        """Test invalid credentials are rejected."""
        organization = OrganizationFactory(contact_email="hello@acme.test")
        organization.set_password("s3cret")
        organization.save()

        response = Client().post(
            "/api/organizations/login",
            data={"email": "hello@acme.test", "password": "nope"},
            content_type="application/json",
        )
        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"
