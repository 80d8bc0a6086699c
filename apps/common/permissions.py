"""
Permission classes shared across apps.
"""
from rest_framework.permissions import BasePermission

from .authentication import MemberPrincipal


class IsMember(BasePermission):
    """Allow requests authenticated with a member token"""

    def has_permission(self, request, view):
        return isinstance(request.user, MemberPrincipal)


class IsMemberOrStaff(BasePermission):
    """Allow members and staff users"""

    def has_permission(self, request, view):
        user = request.user
        if isinstance(user, MemberPrincipal):
            return True
        return bool(user and user.is_authenticated and user.is_staff)
