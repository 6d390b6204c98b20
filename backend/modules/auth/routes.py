"""
Auth API endpoints.

Signup and login for the token strategy, plus the current user's profile.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .exceptions import InvalidTokenError
from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    UserPublic,
)

router = APIRouter()


@router.post("/signup", response_model=SignupResponse)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SignupResponse:
    """
    Create an account.

    Returns the public user fields; the password hash is never returned.
    """
    return await service.signup(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange email and password for a 7-day bearer token."""
    return await service.login(request)


@router.get("/me", response_model=UserPublic)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserPublic:
    """Get the current user's profile. Requires a bearer token."""
    profile = await service.get_user_by_id(user.id)
    if profile is None:
        # token outlived its account
        raise InvalidTokenError()
    return profile
