from django.apps import AppConfig


class OrganizationsConfig(AppConfig):
    name = "strappers.organizations"
    verbose_name = "Organizations"
