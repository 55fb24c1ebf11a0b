from django.contrib import admin

from .models import Organization


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = ["name", "type", "contact_email", "terms_accepted", "is_active", "created"]
    list_filter = ["type", "terms_accepted", "is_active"]
    search_fields = ["name", "contact_email"]
    exclude = ["password_hash"]
    ordering = ["name"]
