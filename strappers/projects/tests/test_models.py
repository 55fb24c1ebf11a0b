"""
Tests for the project models.
"""

from unittest import mock

import pytest
from django.db import IntegrityError
from django.db.models import QuerySet
from django_fsm import TransitionNotAllowed

from strappers.projects.models import ChunkStatus
from strappers.projects.models import DesignVersion
from strappers.projects.models import GenerationStatus
from strappers.projects.models import Project
from strappers.projects.models import ProjectPriority
from strappers.projects.tests.factories import DesignVersionFactory
from strappers.projects.tests.factories import IDEChunkFactory
from strappers.projects.tests.factories import ProjectFactory
from strappers.projects.tests.factories import ProjectModuleFactory
from strappers.students.models import StudentStatus
from strappers.students.tests.factories import StudentFactory


@pytest.mark.django_db
class TestProject:
    """Tests for Project."""

    def test_defaults(self):
        project = ProjectFactory()

        assert project.priority == ProjectPriority.MEDIUM
        assert project.is_available is True
        assert project.kickoff is False
        assert project.mock_records_count == 10
        assert project.ide_generation_status == GenerationStatus.NOT_STARTED
        assert project.generation_progress == 0

    def test_applicants_count(self):
        """Test pending students count once whichever slot they used."""
        project = ProjectFactory()
        other = ProjectFactory()
        StudentFactory(status=StudentStatus.PENDING, project=project)
        StudentFactory(status=StudentStatus.PENDING, project=other, project_priority_3=project)
        StudentFactory(status=StudentStatus.PENDING, project=project, project_priority_1=project)
        StudentFactory(status=StudentStatus.NEW, project_priority_1=project)
        StudentFactory(status=StudentStatus.ON_BOARD, project=project)

        counts = dict(Project.objects.with_applicants_count().values_list("id", "applicants_count"))

        assert counts[project.id] == 3
        assert counts[other.id] == 1

    def test_applicants_count_zero(self):
        project = ProjectFactory()

        assert Project.objects.with_applicants_count().get(id=project.id).applicants_count == 0

    def test_delete_cascades_to_modules(self):
        """Test a project's modules go with it."""
        module = ProjectModuleFactory()

        module.project.delete()

        assert not type(module).objects.filter(id=module.id).exists()


@pytest.mark.django_db
class TestIDEGeneration:
    """Tests for the IDE generation state machines."""

    def test_start_generation(self):
        project = ProjectFactory()

        project.start_generation(3)
        project.save()

        assert project.ide_generation_status == GenerationStatus.IN_PROGRESS
        assert project.total_chunks == 3
        assert project.completed_chunks == 0

    def test_cannot_complete_before_start(self):
        project = ProjectFactory()

        with pytest.raises(TransitionNotAllowed):
            project.complete_generation()

    def test_restart_after_failure(self):
        """Test a failed generation can be started again."""
        project = ProjectFactory()
        project.start_generation(2)
        project.fail_generation()

        project.start_generation(2)

        assert project.ide_generation_status == GenerationStatus.IN_PROGRESS

    def test_completing_all_chunks_completes_project(self):
        """Test the project completes when its last chunk does."""
        project = ProjectFactory()
        first = IDEChunkFactory(project=project, chunk_id="models")
        second = IDEChunkFactory(project=project, chunk_id="api", dependencies=["models"])
        project.start_generation(2)
        project.save()

        first.start()
        first.mark_completed([{"path": "models.py"}, {"path": "admin.py"}], tokens_used=120)
        project.refresh_from_db()
        assert project.completed_chunks == 1
        assert project.generation_progress == 50
        assert project.ide_generation_status == GenerationStatus.IN_PROGRESS

        second.start()
        second.mark_completed([{"path": "api.py"}])
        project.refresh_from_db()
        assert project.completed_chunks == 2
        assert project.generation_progress == 100
        assert project.ide_generation_status == GenerationStatus.COMPLETED

        first.refresh_from_db()
        assert first.status == ChunkStatus.COMPLETED
        assert first.files_count == 2
        assert first.generated_at is not None

    def test_chunk_waits_for_dependencies(self):
        """Test a chunk cannot start before the chunks it depends on."""
        project = ProjectFactory()
        IDEChunkFactory(project=project, chunk_id="models")
        api = IDEChunkFactory(project=project, chunk_id="api", dependencies=["models"])

        with pytest.raises(TransitionNotAllowed):
            api.start()

    def test_failed_chunk_can_retry(self):
        chunk = IDEChunkFactory()
        chunk.start()
        chunk.fail("timeout")
        assert chunk.status == ChunkStatus.FAILED
        assert chunk.error_message == "timeout"

        chunk.start()

        assert chunk.status == ChunkStatus.IN_PROGRESS
        assert chunk.error_message == ""

    def test_chunk_id_unique_per_project(self):
        chunk = IDEChunkFactory()

        IDEChunkFactory(chunk_id=chunk.chunk_id)
        with pytest.raises(IntegrityError):
            IDEChunkFactory(project=chunk.project, chunk_id=chunk.chunk_id)


@pytest.mark.django_db
class TestDesignVersion:
    """Tests for DesignVersion."""

    def test_create_next_numbers_versions(self):
        project = ProjectFactory()

        first = DesignVersion.create_next(project, "v1")
        second = DesignVersion.create_next(project, "v2")

        assert first.version_number == 1
        assert second.version_number == 2
        assert DesignVersion.next_version_number(project) == 3

    def test_create_next_locks_project_row(self):
        """Test the project row is locked before the next number is read."""
        project = ProjectFactory()
        select_for_update = QuerySet.select_for_update

        with mock.patch.object(QuerySet, "select_for_update", autospec=True, side_effect=select_for_update) as lock:
            version = DesignVersion.create_next(project, "v1")

        assert lock.call_count == 1
        assert lock.call_args.args[0].model is Project
        assert version.version_number == 1

    def test_only_one_active_version(self):
        """Test activating a version deactivates the project's others."""
        project = ProjectFactory()
        first = DesignVersion.create_next(project, "v1")
        second = DesignVersion.create_next(project, "v2")
        first.refresh_from_db()
        assert first.is_active is False
        assert second.is_active is True

        first.activate()

        second.refresh_from_db()
        assert second.is_active is False
        assert list(project.design_versions.filter(is_active=True)) == [first]

    def test_other_projects_untouched(self):
        other = DesignVersionFactory()

        DesignVersion.create_next(ProjectFactory(), "v1")

        other.refresh_from_db()
        assert other.is_active is True

    def test_version_number_unique_per_project(self):
        version = DesignVersionFactory()

        with pytest.raises(IntegrityError):
            DesignVersionFactory(project=version.project, version_number=version.version_number)
