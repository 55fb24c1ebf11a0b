from django.apps import AppConfig


class BoardsConfig(AppConfig):
    name = "strappers.boards"
    verbose_name = "Project boards"
