"""FastAPI security dependencies.

Bearer tokens are validated against the locally issued JWTs. When
``auth.mode`` is ``disabled`` every request runs as an anonymous admin.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel

from app.auth.jwt import TokenExpiredError, TokenInvalidError, decode_token
from app.auth.permissions import Permission, Role, has_all_permissions, has_permission
from app.core.config import AuthMode, Settings, get_settings


ANONYMOUS_USER_ID = "anonymous"

# auto_error is off so disabled mode can run without an Authorization header
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/token",
    scheme_name="JWT",
    description="JWT Bearer token authentication",
    auto_error=False,
)


class CurrentUser(BaseModel):
    """The authenticated caller, built from the token payload."""

    id: str
    roles: list[str] = []
    permissions: list[str] = []

    @classmethod
    def from_token_payload(cls, payload: dict[str, Any]) -> CurrentUser:
        return cls(
            id=payload.get("sub", ""),
            roles=payload.get("roles", []),
            permissions=payload.get("permissions", []),
        )

    def has_permission(self, permission: Permission | str) -> bool:
        return has_permission(self.roles, self.permissions, permission)

    def has_role(self, role: Role | str) -> bool:
        return str(role) in self.roles


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_request_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


async def get_current_user(
    settings: Annotated[Settings, Depends(get_request_settings)],
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> CurrentUser:
    """Validate the bearer token and return the caller.

    Raises:
        HTTPException: 401 if the token is missing, expired or invalid.
    """
    if settings.auth_mode_enum == AuthMode.DISABLED:
        return CurrentUser(id=ANONYMOUS_USER_ID, roles=[Role.ADMIN])

    if not token:
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_token(token, settings=settings)
    except TokenExpiredError:
        raise _unauthorized("Token has expired") from None
    except TokenInvalidError:
        raise _unauthorized("Invalid token") from None

    return CurrentUser.from_token_payload(payload.model_dump())


class RequirePermissions:
    """Dependency class for requiring permissions.

    Usage:
        @router.get("/recipe/{recipe_id}")
        def get_recipe(
            user: Annotated[
                CurrentUser, Depends(RequirePermissions(Permission.RECIPE_READ))
            ],
        ):
            ...
    """

    def __init__(self, *permissions: Permission | str) -> None:
        self.permissions = list(permissions)

    async def __call__(
        self,
        user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        """Raise 403 unless the user holds every required permission."""
        if not has_all_permissions(user.roles, user.permissions, self.permissions):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user


def require_permissions(*permissions: Permission | str) -> RequirePermissions:
    """Create a permission requirement dependency."""
    return RequirePermissions(*permissions)
