"""Role-based DRF permissions."""

from __future__ import annotations

from rest_framework.permissions import BasePermission

from modules.accounts.models import Role


class IsAdminRole(BasePermission):
    """Authenticated user whose ``role`` is ``admin``."""

    message = "User role is not authorized to access this route."

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "role", None) == Role.ADMIN
        )
