from strappers.core.api.base import BaseAPI
from strappers.core.api.permissions import AllowAny
from strappers.core.api.permissions import IsAuthenticated
from strappers.core.api.permissions import IsStaff

__all__ = ["BaseAPI", "IsAuthenticated", "IsStaff", "AllowAny"]
