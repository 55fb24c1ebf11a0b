from django.contrib import admin
from django_fsm import TransitionNotAllowed

from .models import DesignVersion
from .models import IDEChunk
from .models import Project
from .models import ProjectModule


class ProjectModuleInline(admin.TabularInline):
    model = ProjectModule
    extra = 0
    fields = ["sequence", "title", "module_type"]


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = [
        "title",
        "organization",
        "priority",
        "is_available",
        "kickoff",
        "ide_generation_status",
        "created",
    ]
    list_filter = ["priority", "is_available", "kickoff", "ide_generation_status"]
    search_fields = ["title", "description"]
    filter_horizontal = ["criteria"]
    readonly_fields = ["ide_generation_status", "total_chunks", "completed_chunks"]
    inlines = [ProjectModuleInline]
    actions = ["restart_generation"]

    @admin.action(description="Restart IDE generation of failed projects")
    def restart_generation(self, request, queryset):
        restarted = 0
        for project in queryset:
            try:
                project.start_generation(project.total_chunks)
            except TransitionNotAllowed:
                continue
            project.save()
            restarted += 1
        self.message_user(request, f"{restarted} project(s) restarted.")


@admin.register(DesignVersion)
class DesignVersionAdmin(admin.ModelAdmin):
    list_display = ["project", "version_number", "created_by", "is_active", "created"]
    list_filter = ["is_active"]
    search_fields = ["project__title", "created_by"]


@admin.register(IDEChunk)
class IDEChunkAdmin(admin.ModelAdmin):
    list_display = ["chunk_id", "project", "chunk_type", "generation_order", "status", "files_count"]
    list_filter = ["status", "chunk_type"]
    search_fields = ["chunk_id", "project__title"]
    readonly_fields = ["status"]
