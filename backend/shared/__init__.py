"""
Shared infrastructure for the FoodShare backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory and index setup
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_mongo_client, ensure_indexes, get_database, ping
from .exceptions import (
    FoodShareError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
)
from .models import APIModel, AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "create_mongo_client",
    "ensure_indexes",
    "get_database",
    "ping",
    "FoodShareError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ExternalServiceError",
    "APIModel",
    "AuthenticatedUser",
]
