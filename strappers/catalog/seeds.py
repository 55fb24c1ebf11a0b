"""
Seed data for the lookup tables.

The rows are matched on their natural key (``name``, or ``description`` for
subscriptions) and updated in place, so seeding can be re-run on every deploy
without creating duplicates. No timestamps are carried here: ``created`` and
``modified`` are set when rows are written.

Used by the ``0002_seed_lookups`` data migration (with the historical app
registry) and by the ``seed_lookups`` management command (with the live one).
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from django.apps import apps as global_apps
from django.db import transaction

logger = logging.getLogger(__name__)

MAJORS = [
    {"name": "Computer Science", "description": "Study of computational systems and design", "department": "Computer Science"},
    {"name": "Software Engineering", "description": "Engineering approach to software development", "department": "Computer Science"},
    {"name": "Data Science", "description": "Extracting insights from data", "department": "Computer Science"},
    {"name": "Cybersecurity", "description": "Protecting digital systems and data", "department": "Computer Science"},
    {"name": "Information Technology", "description": "Management and use of technology", "department": "Information Systems"},
    {"name": "Business Administration", "description": "General business management", "department": "Business"},
]

YEARS = [
    {"name": "Freshman", "description": "First year of study", "sort_order": 1},
    {"name": "Sophomore", "description": "Second year of study", "sort_order": 2},
    {"name": "Junior", "description": "Third year of study", "sort_order": 3},
    {"name": "Senior", "description": "Fourth year of study", "sort_order": 4},
    {"name": "Graduate", "description": "Graduate level study", "sort_order": 5},
]

PROJECT_STATUSES = [
    {"name": "New", "description": "Newly created project", "color": "#10B981", "sort_order": 1},
    {"name": "Planning", "description": "Project in planning phase", "color": "#3B82F6", "sort_order": 2},
    {"name": "In Progress", "description": "Project currently being worked on", "color": "#F59E0B", "sort_order": 3},
    {"name": "On Hold", "description": "Project temporarily paused", "color": "#EF4444", "sort_order": 4},
    {"name": "Completed", "description": "Project successfully completed", "color": "#059669", "sort_order": 5},
    {"name": "Cancelled", "description": "Project cancelled or abandoned", "color": "#6B7280", "sort_order": 6},
]

PROJECT_CRITERIA = [
    {"name": "Popular Projects", "active": True},
    {"name": "UI/UX Designer Needed", "active": True},
    {"name": "Backend Developer Needed", "active": True},
    {"name": "Frontend Developer Needed", "active": True},
    {"name": "Product manager Needed", "active": True},
    {"name": "Marketing Needed", "active": True},
    {"name": "New Projects", "active": True},
]

MODULE_TYPES = [
    {"name": name}
    for name in ("Frontend", "Backend", "Database", "Authentication", "API", "Mobile", "DevOps", "Testing")
]

SUBSCRIPTIONS = [
    {"description": "Junior", "price": Decimal("0.00")},
    {"description": "Product", "price": Decimal("0.00")},
    {"description": "Enterprise A", "price": Decimal("0.00")},
    {"description": "Enterprise B", "price": Decimal("0.00")},
]

# type values: see strappers.catalog.models.RoleType
ROLES = [
    {"name": "Product Manager", "description": "Leads product planning and execution", "category": "Leadership", "type": 0, "is_active": True},
    {"name": "Frontend Developer", "description": "Develops user interface and user experience", "category": "Technical", "type": 2, "is_active": True},
    {"name": "Backend Developer", "description": "Develops server-side logic and database integration", "category": "Technical", "type": 2, "is_active": True},
    {"name": "UI/UX Designer", "description": "Designs user interface and user experience", "category": "Technical", "type": 3, "is_active": True},
    {"name": "Quality Assurance", "description": "Tests software and ensures quality standards", "category": "Technical", "type": 0, "is_active": False},
    {"name": "Full Stack Developer", "description": "Develop backend + UI", "category": "Leadership", "type": 1, "is_active": True},
    {"name": "Marketing", "description": "Conducts research and Market analysis. Responsible for Media", "category": "Academic", "type": 0, "is_active": True},
    {"name": "Documentation Specialist", "description": "Creates and maintains project documentation", "category": "Administrative", "type": 0, "is_active": False},
]

# (model name, natural key field, rows)
SEED_TABLES = [
    ("Major", "name", MAJORS),
    ("Year", "name", YEARS),
    ("ProjectStatus", "name", PROJECT_STATUSES),
    ("ProjectCriteria", "name", PROJECT_CRITERIA),
    ("ModuleType", "name", MODULE_TYPES),
    ("Subscription", "description", SUBSCRIPTIONS),
    ("Role", "name", ROLES),
]


@dataclass
class SeedResult:
    created: int = 0
    updated: int = 0
    unchanged: int = 0


def seed_lookups(apps=None) -> dict[str, SeedResult]:
    """
    Insert or refresh every seeded lookup row.

    ``apps`` is an app registry exposing ``get_model``; the data migration
    passes its historical registry. Rows already matching the seed are left
    untouched so their ``modified`` timestamp does not churn.
    """
    apps = apps or global_apps
    results: dict[str, SeedResult] = {}

    with transaction.atomic():
        for model_name, key_field, rows in SEED_TABLES:
            model = apps.get_model("catalog", model_name)
            result = SeedResult()
            for row in rows:
                values = dict(row)
                key = values.pop(key_field)
                obj = model.objects.filter(**{key_field: key}).first()
                if obj is None:
                    model.objects.create(**{key_field: key}, **values)
                    result.created += 1
                    continue
                changed = [field for field, value in values.items() if getattr(obj, field) != value]
                if not changed:
                    result.unchanged += 1
                    continue
                for field in changed:
                    setattr(obj, field, values[field])
                obj.save(update_fields=[*changed, "modified"])
                result.updated += 1
            results[model_name] = result
            logger.info(
                "Seeded %s: %d created, %d updated, %d unchanged",
                model_name,
                result.created,
                result.updated,
                result.unchanged,
            )

    return results


def unseed_lookups(apps=None) -> None:
    """Delete the seeded rows (matched by natural key), leaving any others."""
    apps = apps or global_apps
    with transaction.atomic():
        for model_name, key_field, rows in reversed(SEED_TABLES):
            model = apps.get_model("catalog", model_name)
            keys = [row[key_field] for row in rows]
            deleted, _ = model.objects.filter(**{f"{key_field}__in": keys}).delete()
            logger.info("Removed %d seeded %s rows", deleted, model_name)
