from django.contrib import admin

from .models import Employer
from .models import EmployerAd
from .models import EmployerBoard
from .models import EmployerCandidate


class EmployerAdInline(admin.StackedInline):
    model = EmployerAd
    extra = 0


@admin.register(Employer)
class EmployerAdmin(admin.ModelAdmin):
    list_display = ["name", "contact_email", "subscription_type", "created"]
    list_filter = ["subscription_type"]
    search_fields = ["name", "contact_email"]
    exclude = ["password_hash"]
    inlines = [EmployerAdInline]


@admin.register(EmployerBoard)
class EmployerBoardAdmin(admin.ModelAdmin):
    list_display = ["employer", "board", "observed", "approved", "meet_request"]
    list_filter = ["observed", "approved"]
    search_fields = ["employer__name", "board__board_id"]


@admin.register(EmployerCandidate)
class EmployerCandidateAdmin(admin.ModelAdmin):
    list_display = ["employer", "student", "created"]
    search_fields = ["employer__name", "student__email"]
    raw_id_fields = ["student"]
