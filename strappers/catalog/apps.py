from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """Lookup tables shared by students, projects and employers."""

    name = "strappers.catalog"
    verbose_name = "Catalog"
