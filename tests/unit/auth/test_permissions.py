"""Unit tests for the RBAC system."""

from __future__ import annotations

import pytest

from app.auth.dependencies import CurrentUser
from app.auth.permissions import (
    ROLE_PERMISSIONS,
    Permission,
    Role,
    get_permissions_for_roles,
    has_all_permissions,
    has_permission,
)


pytestmark = pytest.mark.unit


class TestRolePermissions:
    """Tests for the role to permission mapping."""

    def test_admin_has_everything(self):
        assert ROLE_PERMISSIONS[Role.ADMIN] == frozenset(Permission)

    def test_viewer_is_read_only(self):
        assert get_permissions_for_roles(["viewer"]) == {
            Permission.RECIPE_READ,
            Permission.INGREDIENT_READ,
        }

    def test_user_cannot_delete_ingredients(self):
        assert not has_permission(["user"], [], Permission.INGREDIENT_DELETE)
        assert has_permission(["user"], [], Permission.RECIPE_DELETE)

    def test_unknown_role_grants_nothing(self):
        assert get_permissions_for_roles(["chef"]) == set()

    def test_roles_combine(self):
        combined = get_permissions_for_roles(["viewer", "user"])
        assert Permission.RECIPE_CREATE in combined


class TestHasPermission:
    """Tests for permission checks."""

    def test_direct_permission(self):
        assert has_permission([], ["ingredient:delete"], Permission.INGREDIENT_DELETE)

    def test_all_required(self):
        required = [Permission.RECIPE_READ, Permission.INGREDIENT_DELETE]
        assert not has_all_permissions(["user"], [], required)
        assert has_all_permissions(["user"], ["ingredient:delete"], required)

    def test_current_user_helpers(self):
        user = CurrentUser(id="tester", roles=["viewer"])
        assert user.has_role(Role.VIEWER)
        assert user.has_permission("recipe:read")
        assert not user.has_permission(Permission.RECIPE_CREATE)
