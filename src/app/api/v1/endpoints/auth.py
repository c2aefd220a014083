"""Authentication endpoints.

OAuth2 password grant issuing locally signed access tokens.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Final

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.api.dependencies import AppSettings
from app.auth.credentials import authenticate_user
from app.auth.jwt import create_access_token
from app.observability.logging import get_logger
from app.schemas.auth import TokenResponse


# OAuth2 bearer token type (standard value per RFC 6749)
BEARER: Final[str] = "bearer"

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/token",
    response_model=TokenResponse,
    summary="Login for access token",
    description="OAuth2 compatible token login, get an access token for future requests.",
)
def issue_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    settings: AppSettings,
) -> TokenResponse:
    roles = authenticate_user(form_data.username, form_data.password, settings)
    if roles is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    expire_minutes = settings.auth.jwt.access_token_expire_minutes
    token = create_access_token(
        form_data.username,
        roles=roles,
        expires_delta=timedelta(minutes=expire_minutes),
        settings=settings,
    )
    logger.info("Access token issued", username=form_data.username)
    return TokenResponse(
        access_token=token,
        token_type=BEARER,
        expires_in=expire_minutes * 60,
    )
