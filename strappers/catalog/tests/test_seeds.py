"""
Tests for the lookup seed data.
"""

from io import StringIO

import pytest
from django.core.management import call_command

from strappers.catalog.models import Major
from strappers.catalog.models import ProjectCriteria
from strappers.catalog.models import Role
from strappers.catalog.models import Subscription
from strappers.catalog.seeds import MAJORS
from strappers.catalog.seeds import ROLES
from strappers.catalog.seeds import SEED_TABLES
from strappers.catalog.seeds import seed_lookups
from strappers.catalog.seeds import unseed_lookups


@pytest.mark.django_db
class TestSeedLookups:
    """Tests for seed_lookups()."""

    def test_seeds_every_table(self):
        """Test every seeded row exists after seeding."""
        seed_lookups()

        assert Major.objects.filter(name__in=[row["name"] for row in MAJORS]).count() == len(MAJORS)
        assert Role.objects.filter(name__in=[row["name"] for row in ROLES]).count() == len(ROLES)
        assert Subscription.objects.filter(description="Junior").exists()

    def test_rerun_creates_no_duplicates(self):
        """Test seeding twice leaves a single row per natural key."""
        seed_lookups()
        majors = Major.objects.count()

        results = seed_lookups()

        assert Major.objects.count() == majors
        for model_name, _key, rows in SEED_TABLES:
            assert results[model_name].created == 0
            assert results[model_name].updated == 0
            assert results[model_name].unchanged == len(rows)

    def test_rerun_restores_edited_rows(self):
        """Test a seeded row changed by hand is put back in place."""
        seed_lookups()
        major = Major.objects.get(name="Data Science")
        major.department = "Mathematics"
        major.save()

        results = seed_lookups()

        major.refresh_from_db()
        assert major.department == "Computer Science"
        assert results["Major"].updated == 1

    def test_inactive_roles(self):
        """Test the seeded roles keep their active flag."""
        seed_lookups()

        assert Role.objects.get(name="Quality Assurance").is_active is False
        assert Role.objects.get(name="Product Manager").is_active is True
        assert not Role.objects.active().filter(name="Documentation Specialist").exists()

    def test_unseed_keeps_other_rows(self):
        """Test unseeding only removes seeded rows."""
        seed_lookups()
        custom = ProjectCriteria.objects.create(name="Remote Friendly")

        unseed_lookups()

        assert list(ProjectCriteria.objects.all()) == [custom]
        assert not Major.objects.filter(name="Computer Science").exists()


@pytest.mark.django_db
class TestSeedLookupsCommand:
    """Tests for the seed_lookups management command."""

    def test_reports_counts(self):
        """Test the command reports per-table counts."""
        out = StringIO()
        call_command("seed_lookups", stdout=out)

        output = out.getvalue()
        assert "Major:" in output
        assert "Lookup tables are up to date." in output
        assert Major.objects.filter(name="Computer Science").count() == 1
