from django.apps import AppConfig


class EmployersConfig(AppConfig):
    name = "strappers.employers"
    verbose_name = "Employers"
