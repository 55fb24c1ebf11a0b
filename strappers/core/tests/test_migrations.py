"""
Tests rolling the app migrations back and forward.

These run in transactional tests because migrating changes the schema.
"""

import pytest
from django.core.management import call_command
from django.db import connection

from strappers.catalog.models import Major
from strappers.catalog.models import Role
from strappers.catalog.seeds import MAJORS
from strappers.catalog.seeds import ROLES


def table_names():
    return set(connection.introspection.table_names())


def column_names(table):
    with connection.cursor() as cursor:
        return {column.name for column in connection.introspection.get_table_description(cursor, table)}


@pytest.fixture
def migrated():
    """Leave the database fully migrated whatever the test did."""
    yield
    call_command("migrate", verbosity=0)


@pytest.mark.django_db(transaction=True)
@pytest.mark.usefixtures("migrated")
class TestMigrationRoundTrip:
    """Each app's migrations can be unapplied and reapplied."""

    def test_employers_zero_and_back(self):
        columns = column_names("employers_employerboard")

        call_command("migrate", "employers", "zero", verbosity=0)
        assert "employers_employer" not in table_names()
        assert "employers_employerboard" not in table_names()

        call_command("migrate", "employers", verbosity=0)
        assert column_names("employers_employerboard") == columns

    def test_board_admin_added_after_students(self):
        """Test the board admin column comes with the second boards migration."""
        assert "admin_id" in column_names("boards_projectboard")

        call_command("migrate", "boards", "0001", verbosity=0)
        assert "admin_id" not in column_names("boards_projectboard")
        assert "students_student" in table_names()

        call_command("migrate", verbosity=0)
        assert "admin_id" in column_names("boards_projectboard")

    def test_whole_schema_zero_and_back(self):
        columns = {table: column_names(table) for table in ("projects_project", "students_student")}

        call_command("migrate", "catalog", "zero", verbosity=0)
        assert not {name for name in table_names() if name.startswith(("catalog_", "projects_", "students_"))}

        call_command("migrate", verbosity=0)
        assert {table: column_names(table) for table in columns} == columns

    def test_seed_migration_round_trip(self):
        """Test unapplying the seed migration removes exactly the seeded rows."""
        Major.objects.create(name="Custom Major")

        call_command("migrate", "catalog", "0001", verbosity=0)
        assert list(Major.objects.values_list("name", flat=True)) == ["Custom Major"]
        assert not Role.objects.exists()

        call_command("migrate", "catalog", verbosity=0)
        assert Major.objects.count() == len(MAJORS) + 1
        assert Role.objects.count() == len(ROLES)
