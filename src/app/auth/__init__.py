"""Authentication and authorization module.

This module provides:
- JWT access token creation and validation
- The OAuth2 password grant credential check
- Role-based access control (RBAC)
- FastAPI security dependencies
"""

from app.auth.credentials import authenticate_user
from app.auth.dependencies import CurrentUser, get_current_user, require_permissions
from app.auth.jwt import create_access_token, decode_token
from app.auth.permissions import Permission, Role


__all__ = [
    "CurrentUser",
    "Permission",
    "Role",
    "authenticate_user",
    "create_access_token",
    "decode_token",
    "get_current_user",
    "require_permissions",
]
