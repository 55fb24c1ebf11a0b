"""
Data migration loading the lookup tables.

Seeding is idempotent (rows are matched by name and refreshed in place),
see strappers.catalog.seeds.
"""

from django.db import migrations

from strappers.catalog.seeds import seed_lookups
from strappers.catalog.seeds import unseed_lookups


def forwards(apps, schema_editor):
    seed_lookups(apps)


def backwards(apps, schema_editor):
    unseed_lookups(apps)


class Migration(migrations.Migration):
    """Seed majors, years, statuses, criteria, module types, subscriptions and roles."""

    dependencies = [
        ("catalog", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(forwards, backwards),
    ]
