"""
Tests for the Organization model.
"""

import pytest

from strappers.organizations.tests.factories import OrganizationFactory
from strappers.projects.tests.factories import ProjectFactory


@pytest.mark.django_db
class TestOrganization:
    """Tests for Organization."""

    def test_accept_terms(self):
        """Test accepting the terms stamps the acceptance time."""
        organization = OrganizationFactory()
        assert organization.terms_accepted is False

        organization.accept_terms("v2 terms")

        organization.refresh_from_db()
        assert organization.terms_accepted is True
        assert organization.terms_accepted_at is not None
        assert organization.terms_use == "v2 terms"

    def test_password_is_hashed(self):
        """Test the stored password is a hash that verifies."""
        organization = OrganizationFactory()
        organization.set_password("s3cret")
        organization.save()

        assert organization.password_hash != "s3cret"
        assert organization.check_password("s3cret") is True
        assert organization.check_password("wrong") is False

    def test_no_password_never_matches(self):
        """Test an organization without a password cannot log in."""
        organization = OrganizationFactory()

        assert organization.has_password is False
        assert organization.check_password("") is False

    def test_delete_keeps_projects(self):
        """Test deleting an organization detaches its projects."""
        project = ProjectFactory()

        project.organization.delete()

        project.refresh_from_db()
        assert project.organization is None
