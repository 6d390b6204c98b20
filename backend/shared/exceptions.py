"""
Base exception classes for the FoodShare backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status code.
"""

from typing import Optional, Any


class FoodShareError(Exception):
    """
    Base exception for all FoodShare errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(FoodShareError):
    """Resource not found."""

    pass


class ValidationError(FoodShareError):
    """Input validation failed."""

    pass


class ConflictError(FoodShareError):
    """Request conflicts with the current state of a resource."""

    pass


class AuthenticationError(FoodShareError):
    """Authentication failed (invalid or missing credentials)."""

    # WWW-Authenticate challenge sent with the 401, if any
    challenge: Optional[str] = None


class AuthorizationError(FoodShareError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConfigurationError(FoodShareError):
    """A required server-side setting is missing or invalid."""

    pass


class ExternalServiceError(FoodShareError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
