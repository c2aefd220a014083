"""Role-Based Access Control (RBAC) system.

Permissions are granular ``resource:action`` strings; roles are named sets
of permissions.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class Permission(StrEnum):
    """Application permissions."""

    RECIPE_READ = "recipe:read"
    RECIPE_CREATE = "recipe:create"
    RECIPE_UPDATE = "recipe:update"
    RECIPE_DELETE = "recipe:delete"

    INGREDIENT_READ = "ingredient:read"
    INGREDIENT_CREATE = "ingredient:create"
    INGREDIENT_DELETE = "ingredient:delete"


class Role(StrEnum):
    """Application roles."""

    # Read-only access
    VIEWER = "viewer"

    # Manage recipes, read and add ingredients
    USER = "user"

    # Full access
    ADMIN = "admin"


ROLE_PERMISSIONS = MappingProxyType(
    {
        Role.VIEWER: frozenset(
            {
                Permission.RECIPE_READ,
                Permission.INGREDIENT_READ,
            }
        ),
        Role.USER: frozenset(
            {
                Permission.RECIPE_READ,
                Permission.RECIPE_CREATE,
                Permission.RECIPE_UPDATE,
                Permission.RECIPE_DELETE,
                Permission.INGREDIENT_READ,
                Permission.INGREDIENT_CREATE,
            }
        ),
        Role.ADMIN: frozenset(Permission),
    }
)


def get_permissions_for_roles(roles: list[str]) -> set[Permission]:
    """Combined permissions of ``roles``; unknown role names grant nothing."""
    permissions: set[Permission] = set()
    for role in roles:
        try:
            permissions |= ROLE_PERMISSIONS[Role(role)]
        except ValueError:
            continue
    return permissions


def has_permission(
    user_roles: list[str],
    user_permissions: list[str],
    required_permission: Permission | str,
) -> bool:
    """Check a permission granted directly or through a role."""
    required = str(required_permission)
    if required in user_permissions:
        return True
    return required in {str(p) for p in get_permissions_for_roles(user_roles)}


def has_all_permissions(
    user_roles: list[str],
    user_permissions: list[str],
    required_permissions: list[Permission | str],
) -> bool:
    return all(
        has_permission(user_roles, user_permissions, perm)
        for perm in required_permissions
    )
