from django.contrib import admin

from .models import Student
from .models import StudentRole


class StudentRoleInline(admin.TabularInline):
    model = StudentRole
    extra = 0
    fields = ["role", "assigned_at", "end_date", "notes", "is_active"]


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ["email", "first_name", "last_name", "major", "year", "status", "is_available", "board"]
    list_filter = ["status", "major", "year", "is_available", "is_admin"]
    search_fields = ["email", "first_name", "last_name", "student_number", "github_user"]
    readonly_fields = ["status", "start_pending_at"]
    raw_id_fields = [
        "project",
        "project_priority_1",
        "project_priority_2",
        "project_priority_3",
        "project_priority_4",
        "board",
    ]
    exclude = ["password_hash"]
    inlines = [StudentRoleInline]
