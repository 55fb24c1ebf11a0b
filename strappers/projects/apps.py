from django.apps import AppConfig


class ProjectsConfig(AppConfig):
    name = "strappers.projects"
    verbose_name = "Projects"
