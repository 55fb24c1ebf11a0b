"""
Permissions for strAppers controllers.

Reads are open to any signed-in user; writes are staff-only. The account
logins and the lookup tables are public.
"""

from typing import Any

from django.http import HttpRequest
from ninja_extra import permissions


class IsAuthenticated(permissions.BasePermission):
    message = "Sign in to use the strAppers API."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        return bool(request.user and request.user.is_authenticated)


class IsStaff(permissions.BasePermission):
    """Signed-in staff users, the only ones allowed to change records."""

    message = "Only staff can change strAppers records."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        return bool(request.user and request.user.is_authenticated and request.user.is_staff)


class AllowAny(permissions.BasePermission):
    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        return True
