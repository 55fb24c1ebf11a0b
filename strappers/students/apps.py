from django.apps import AppConfig


class StudentsConfig(AppConfig):
    name = "strappers.students"
    verbose_name = "Students"
