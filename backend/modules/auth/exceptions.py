"""
Authentication module exceptions.

These exceptions are raised by the auth module and the auth gate,
and are turned into HTTP responses by the API error handlers.

All token failures share one message.
"""

from shared.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
)

TOKEN_ERROR_MESSAGE = "Invalid or missing authentication token"


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, forged or expired."""

    challenge = "Bearer"

    def __init__(self, message: str = TOKEN_ERROR_MESSAGE):
        super().__init__(message, code="UNAUTHENTICATED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    challenge = "Bearer"

    def __init__(self, message: str = TOKEN_ERROR_MESSAGE):
        super().__init__(message, code="UNAUTHENTICATED")


class InvalidCredentialsError(AuthenticationError):
    """Raised when login fails, whether the email or the password was wrong."""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email already in use",
            code="EMAIL_EXISTS",
            details={"email": email},
        )


class InvalidApiKeyError(AuthenticationError):
    """Raised when the static API key header is missing or wrong."""

    def __init__(self):
        super().__init__("Invalid or missing API key", code="UNAUTHENTICATED")


class TokenSecretNotConfiguredError(ConfigurationError):
    """Raised when token auth is used but JWT_SECRET is unset."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="SERVER_MISCONFIGURED",
            details={"setting": "JWT_SECRET"},
        )


class ApiKeyNotConfiguredError(ConfigurationError):
    """Raised when API key auth is used but API_KEY is unset."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="SERVER_MISCONFIGURED",
            details={"setting": "API_KEY"},
        )
