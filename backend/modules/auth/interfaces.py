"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    UserPublic,
)


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def signup(self, request: SignupRequest) -> SignupResponse:
        """
        Create an account with a hashed password.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Verify credentials and issue a signed access token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the
                password does not match (same error for both)
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate an access token and return the authenticated user.

        Raises:
            AuthenticationError: If the token is missing, malformed,
                forged or expired
            TokenSecretNotConfiguredError: If no signing secret is set
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserPublic]:
        """
        Get a user's public profile by ID.

        Returns:
            UserPublic if found, None otherwise
        """
        ...
