"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock
import jwt  # PyJWT

from shared.config import Settings, get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_API_KEY = "test-api-key"


def create_test_token(
    user_id: str = "64b7f0c2a1b2c3d4e5f60718",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test access token.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_settings(**overrides) -> Settings:
    """Build settings that ignore the environment and any .env file."""
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "api_key": TEST_API_KEY,
        "bcrypt_rounds": 4,
        "page_size": 50,
        "default_radius_km": 5.0,
        "mongo_connect_retries": 3,
        "mongo_retry_backoff_seconds": 0.5,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Token-mode settings with a known secret."""
    return make_settings()


@pytest.fixture
def api_key_settings() -> Settings:
    """API-key-mode settings."""
    return make_settings(auth_strategy="api_key")


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "64b7f0c2a1b2c3d4e5f60718"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def mock_db() -> MagicMock:
    """A pymongo Database stand-in; db["name"] returns the same mock per name."""
    db = MagicMock()
    collections: dict[str, MagicMock] = {}

    def get_collection(name: str) -> MagicMock:
        if name not in collections:
            collections[name] = MagicMock(name=f"collection:{name}")
        return collections[name]

    db.__getitem__.side_effect = get_collection
    return db


@pytest.fixture
def token_factory():
    """Expose create_test_token to test modules."""
    return create_test_token


@pytest.fixture
def settings_factory():
    """Expose make_settings to test modules."""
    return make_settings
