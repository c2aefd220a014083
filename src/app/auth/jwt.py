"""JWT token handling.

Access tokens are signed locally with the shared ``JWT_SECRET_KEY`` using
python-jose (HS256 by default).
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from pydantic import BaseModel

from app.core.config import get_settings
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from app.core.config import Settings

logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"


class TokenPayload(BaseModel):
    """JWT token payload model."""

    sub: str  # Subject (username)
    exp: datetime
    iat: datetime
    type: str = ACCESS_TOKEN_TYPE
    roles: list[str] = []
    permissions: list[str] = []


class TokenError(Exception):
    """Base exception for token-related errors."""


class TokenExpiredError(TokenError):
    """Raised when a token has expired."""


class TokenInvalidError(TokenError):
    """Raised when a token is invalid."""


def create_access_token(
    subject: str,
    *,
    roles: list[str] | None = None,
    permissions: list[str] | None = None,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> str:
    """Create a new JWT access token.

    Args:
        subject: The subject of the token (the username).
        roles: User roles for RBAC.
        permissions: Direct permissions granted to the user.
        expires_delta: Custom lifetime. Defaults to
            ``auth.jwt.access_token_expire_minutes``.
        extra_claims: Additional claims to include in the token.
        settings: Settings override; defaults to ``get_settings()``.

    Returns:
        Encoded JWT token string.
    """
    settings = settings or get_settings()
    jwt_settings = settings.auth.jwt

    if expires_delta is None:
        expires_delta = timedelta(minutes=jwt_settings.access_token_expire_minutes)

    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": subject,
        "exp": now + expires_delta,
        "iat": now,
        "type": ACCESS_TOKEN_TYPE,
        "roles": roles or [],
        "permissions": permissions or [],
    }
    if jwt_settings.issuer:
        payload["iss"] = jwt_settings.issuer
    if extra_claims:
        payload.update(extra_claims)

    return jwt.encode(
        payload,
        settings.JWT_SECRET_KEY,
        algorithm=jwt_settings.algorithm,
    )


def decode_token(
    token: str,
    *,
    verify_type: str | None = ACCESS_TOKEN_TYPE,
    settings: Settings | None = None,
) -> TokenPayload:
    """Decode and validate a JWT token.

    Raises:
        TokenExpiredError: If the token has expired.
        TokenInvalidError: If the signature, issuer, claims or type are wrong.
    """
    settings = settings or get_settings()
    jwt_settings = settings.auth.jwt

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[jwt_settings.algorithm],
            issuer=jwt_settings.issuer,
        )
    except ExpiredSignatureError as e:
        logger.debug("Token expired")
        msg = "Token has expired"
        raise TokenExpiredError(msg) from e
    except JWTError as e:
        logger.warning("Invalid token", error=str(e))
        msg = "Invalid token"
        raise TokenInvalidError(msg) from e

    if verify_type and payload.get("type") != verify_type:
        msg = f"Invalid token type. Expected {verify_type}, got {payload.get('type')}"
        raise TokenInvalidError(msg)

    try:
        return TokenPayload(**payload)
    except ValueError as e:
        msg = "Invalid token claims"
        raise TokenInvalidError(msg) from e
