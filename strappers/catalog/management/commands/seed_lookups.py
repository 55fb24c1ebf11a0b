"""
Load or refresh the lookup tables.

Usage:
    python manage.py seed_lookups
"""

from django.core.management.base import BaseCommand

from strappers.catalog.seeds import seed_lookups


class Command(BaseCommand):
    help = "Insert missing lookup rows and refresh existing ones (safe to re-run)"

    def handle(self, *args, **options):
        self.stdout.write("Seeding lookup tables...")

        results = seed_lookups()

        for model_name, result in results.items():
            self.stdout.write(
                f"  {model_name}: {result.created} created, "
                f"{result.updated} updated, {result.unchanged} unchanged"
            )

        self.stdout.write(self.style.SUCCESS("Lookup tables are up to date."))
