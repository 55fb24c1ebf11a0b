from django.contrib import admin

from .models import Major
from .models import ModuleType
from .models import ProgrammingLanguage
from .models import ProjectCriteria
from .models import ProjectStatus
from .models import Role
from .models import Subscription
from .models import Year


@admin.register(Major)
class MajorAdmin(admin.ModelAdmin):
    list_display = ["name", "department", "is_active"]
    list_filter = ["is_active", "department"]
    search_fields = ["name"]


@admin.register(Year)
class YearAdmin(admin.ModelAdmin):
    list_display = ["name", "sort_order", "is_active"]
    ordering = ["sort_order"]


@admin.register(ProjectStatus)
class ProjectStatusAdmin(admin.ModelAdmin):
    list_display = ["name", "color", "sort_order", "is_active"]
    ordering = ["sort_order"]


@admin.register(ProjectCriteria)
class ProjectCriteriaAdmin(admin.ModelAdmin):
    list_display = ["name", "active"]
    list_filter = ["active"]


@admin.register(ModuleType)
class ModuleTypeAdmin(admin.ModelAdmin):
    list_display = ["name"]


@admin.register(ProgrammingLanguage)
class ProgrammingLanguageAdmin(admin.ModelAdmin):
    list_display = ["name", "release_year", "creator", "is_active"]
    list_filter = ["is_active"]
    search_fields = ["name", "creator"]


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ["description", "price"]


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "type", "is_active"]
    list_filter = ["category", "type", "is_active"]
    search_fields = ["name"]
