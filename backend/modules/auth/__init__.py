"""
Authentication module.

Handles signup, login, access token issue/validation and password hashing.

Public API:
- IAuthService: Interface for auth operations
- UserPublic: User fields safe to expose
- Auth exceptions: InvalidTokenError, InvalidCredentialsError, etc.
"""

from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    TokenPayload,
    UserPublic,
    UserRecord,
)
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
    InvalidApiKeyError,
    TokenSecretNotConfiguredError,
    ApiKeyNotConfiguredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "LoginRequest",
    "LoginResponse",
    "SignupRequest",
    "SignupResponse",
    "TokenPayload",
    "UserPublic",
    "UserRecord",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
    "InvalidApiKeyError",
    "TokenSecretNotConfiguredError",
    "ApiKeyNotConfiguredError",
]
