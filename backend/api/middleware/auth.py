"""
Authentication gate.

Two strategies protect write endpoints, selected by AUTH_STRATEGY:
- "token": bearer access token issued by /auth/login, yields a user identity
- "api_key": static shared secret in a request header, authorizes only

Routes depend on ``require_writer`` and never on a strategy directly.
"""

import secrets
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import (
    ApiKeyNotConfiguredError,
    InvalidApiKeyError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.auth.interfaces import IAuthService
from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a valid bearer token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = credentials.credentials if credentials else None
    return await auth.validate_token(token)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that extracts the user if a valid token is present.

    Use this for endpoints that work with or without authentication.
    """
    if credentials is None:
        return None

    try:
        return await auth.validate_token(credentials.credentials)
    except (InvalidTokenError, MissingTokenError):
        return None


async def require_api_key(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Dependency that requires the static API key header.

    Raises:
        ApiKeyNotConfiguredError: If the server has no API_KEY (500)
        InvalidApiKeyError: If the header is missing or does not match (401)
    """
    if not settings.api_key:
        raise ApiKeyNotConfiguredError()

    provided = request.headers.get(settings.api_key_header, "")
    if not secrets.compare_digest(provided.encode("utf-8"), settings.api_key.encode("utf-8")):
        raise InvalidApiKeyError()


async def require_writer(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    auth: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Gate for endpoints that create data.

    Returns the authenticated user in token mode, None in api_key mode.
    """
    if settings.auth_strategy == "api_key":
        await require_api_key(request, settings)
        return None
    return await get_current_user(credentials, auth)
