from rest_framework.permissions import BasePermission

from .models import User


def is_admin(user):
    return bool(user and user.is_authenticated and getattr(user, 'role', None) == User.Role.ADMIN)


class RolePermission(BasePermission):
    """
    Grant access if the authenticated user's token role is one of ``roles``,
    or of view.required_roles when the class itself names none.

    Usage on a view:
        required_roles = [User.Role.ADMIN]
        permission_classes = [IsAuthenticated, RolePermission]
    """
    message = 'Access denied'
    roles = ()

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = self.roles or getattr(view, 'required_roles', [])
        if not required:
            # No roles specified → allow any authenticated user
            return True

        return getattr(user, 'role', None) in required


class IsAdmin(RolePermission):
    message = 'Admin access only'
    roles = (User.Role.ADMIN,)


class IsMember(BasePermission):
    """Authenticated and not an admin."""
    message = 'Admin cannot register'

    def has_permission(self, request, view):
        return request.user.is_authenticated and not is_admin(request.user)


class IsSelfOrAdmin(BasePermission):
    """
    The URL's user_id must be the caller's own id, unless the caller is admin.
    """
    message = 'Access denied'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if is_admin(user):
            return True
        return str(view.kwargs.get('user_id')) == str(user.id)
