from django.contrib import admin

from .models import BoardMeeting
from .models import BoardState
from .models import FigmaConnection
from .models import ProjectBoard


class BoardMeetingInline(admin.TabularInline):
    model = BoardMeeting
    extra = 0
    fields = ["meeting_time", "student_email", "attended", "join_time"]
    readonly_fields = ["join_time"]


@admin.register(ProjectBoard)
class ProjectBoardAdmin(admin.ModelAdmin):
    list_display = ["board_id", "project", "status", "admin", "observed", "is_system_board", "created"]
    list_filter = ["status", "is_system_board", "has_admin"]
    search_fields = ["board_id", "project__title"]
    readonly_fields = ["observed"]
    exclude = ["db_password"]
    raw_id_fields = ["admin"]
    inlines = [BoardMeetingInline]


@admin.register(BoardState)
class BoardStateAdmin(admin.ModelAdmin):
    list_display = ["board", "source", "webhook", "github_branch", "last_build_status", "modified"]
    list_filter = ["source", "webhook", "last_build_status"]
    search_fields = ["board__board_id", "github_branch"]


@admin.register(FigmaConnection)
class FigmaConnectionAdmin(admin.ModelAdmin):
    list_display = ["board", "file_key", "figma_user_id", "last_sync"]
    search_fields = ["board__board_id", "file_key"]
    exclude = ["access_token", "refresh_token"]
