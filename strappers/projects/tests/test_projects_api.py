"""
Tests for the projects API endpoints.
"""

import pytest
from django.test import Client

from strappers.catalog.tests.factories import ModuleTypeFactory
from strappers.catalog.tests.factories import ProjectCriteriaFactory
from strappers.organizations.tests.factories import OrganizationFactory
from strappers.projects.models import DesignVersion
from strappers.projects.models import Project
from strappers.projects.tests.factories import ProjectFactory
from strappers.projects.tests.factories import ProjectModuleFactory
from strappers.students.models import StudentStatus
from strappers.students.tests.factories import StudentFactory


@pytest.mark.django_db
class TestListProjects:
    """Tests for GET /api/projects/."""

    def test_unauthenticated_denied(self):
        response = Client().get("/api/projects/")
        assert response.status_code == 403

    def test_includes_applicants_count(self, authenticated_client):
        project = ProjectFactory()
        StudentFactory(status=StudentStatus.PENDING, project_priority_2=project)

        response = authenticated_client.get("/api/projects/")

        assert response.status_code == 200
        row = next(row for row in response.json() if row["id"] == project.id)
        assert row["applicants_count"] == 1

    def test_filters(self, authenticated_client):
        """Test filtering by organization, availability and criteria."""
        criteria = ProjectCriteriaFactory()
        organization = OrganizationFactory()
        matching = ProjectFactory(organization=organization)
        matching.criteria.add(criteria)
        ProjectFactory(organization=organization, is_available=False).criteria.add(criteria)
        ProjectFactory()

        response = authenticated_client.get(
            "/api/projects/",
            {"organization": organization.id, "available": "true", "criteria": criteria.id},
        )

        assert [row["id"] for row in response.json()] == [matching.id]
        assert response.json()[0]["criteria"] == [criteria.id]


@pytest.mark.django_db
class TestCreateProject:
    """Tests for POST /api/projects/."""

    def test_requires_staff(self, authenticated_client):
        response = authenticated_client.post(
            "/api/projects/",
            data={"title": "Marketplace"},
            content_type="application/json",
        )
        assert response.status_code == 403

    def test_create(self, staff_client):
        organization = OrganizationFactory()
        criteria = ProjectCriteriaFactory()

        response = staff_client.post(
            "/api/projects/",
            data={
                "title": "Marketplace",
                "priority": "High",
                "organization_id": organization.id,
                "criteria": [criteria.id],
            },
            content_type="application/json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["priority"] == "High"
        assert data["criteria"] == [criteria.id]
        assert data["applicants_count"] == 0
        assert data["ide_generation_status"] == "not_started"
        assert Project.objects.get(id=data["id"]).organization == organization

    def test_invalid_priority(self, staff_client):
        response = staff_client.post(
            "/api/projects/",
            data={"title": "Marketplace", "priority": "Urgent"},
            content_type="application/json",
        )
        assert response.status_code == 422

    def test_unknown_criteria(self, staff_client):
        response = staff_client.post(
            "/api/projects/",
            data={"title": "Marketplace", "criteria": [999999]},
            content_type="application/json",
        )
        assert response.status_code == 400
        assert response.json()["details"] == {"criteria": [999999]}


@pytest.mark.django_db
class TestUpdateProject:
    """Tests for PATCH /api/projects/{id}."""

    def test_partial_update(self, staff_client):
        project = ProjectFactory(title="Old", description="Keep me")
        criteria = ProjectCriteriaFactory()

        response = staff_client.patch(
            f"/api/projects/{project.id}",
            data={"title": "New", "kickoff": True, "criteria": [criteria.id]},
            content_type="application/json",
        )

        assert response.status_code == 200
        project.refresh_from_db()
        assert project.title == "New"
        assert project.description == "Keep me"
        assert project.kickoff is True
        assert list(project.criteria.all()) == [criteria]

    def test_clear_organization(self, staff_client):
        project = ProjectFactory(organization=OrganizationFactory(), title="Keep")

        response = staff_client.patch(
            f"/api/projects/{project.id}",
            data={"organization_id": None, "title": None},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["organization_id"] is None
        project.refresh_from_db()
        assert project.organization_id is None
        assert project.title == "Keep"

    def test_title_too_long(self, staff_client):
        project = ProjectFactory(title="Keep")

        response = staff_client.patch(
            f"/api/projects/{project.id}",
            data={"title": "x" * 201},
            content_type="application/json",
        )

        assert response.status_code == 422
        project.refresh_from_db()
        assert project.title == "Keep"


@pytest.mark.django_db
class TestProjectModules:
    """Tests for /api/projects/{id}/modules."""

    def test_list_in_sequence(self, authenticated_client):
        project = ProjectFactory()
        second = ProjectModuleFactory(project=project, sequence=2)
        first = ProjectModuleFactory(project=project, sequence=1)

        response = authenticated_client.get(f"/api/projects/{project.id}/modules")

        assert [row["id"] for row in response.json()] == [first.id, second.id]

    def test_create(self, staff_client):
        project = ProjectFactory()
        module_type = ModuleTypeFactory()

        response = staff_client.post(
            f"/api/projects/{project.id}/modules",
            data={"module_type_id": module_type.id, "title": "Auth", "sequence": 1},
            content_type="application/json",
        )

        assert response.status_code == 201
        assert project.modules.get().title == "Auth"


@pytest.mark.django_db
class TestDesignVersions:
    """Tests for /api/projects/{id}/design-versions."""

    def test_create_and_list(self, staff_client):
        project = ProjectFactory()

        for document in ("first draft", "second draft"):
            response = staff_client.post(
                f"/api/projects/{project.id}/design-versions",
                data={"design_document": document},
                content_type="application/json",
            )
            assert response.status_code == 201

        rows = staff_client.get(f"/api/projects/{project.id}/design-versions").json()

        assert [(row["version_number"], row["is_active"]) for row in rows] == [(2, True), (1, False)]
        assert rows[0]["created_by"]

    def test_activate(self, staff_client):
        project = ProjectFactory()
        DesignVersion.create_next(project, "v1")
        DesignVersion.create_next(project, "v2")

        response = staff_client.post(f"/api/projects/{project.id}/design-versions/1/activate")

        assert response.status_code == 200
        assert response.json()["is_active"] is True
        assert project.design_versions.get(is_active=True).version_number == 1
