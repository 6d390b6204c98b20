"""
Fixtures for API tests.

Routes run against mocked services; the auth gate runs for real against
an AuthService whose repository is a MagicMock.
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from api.app import create_app
from api.dependencies import get_auth_service, get_claim_service, get_post_service
from modules.auth.service import AuthService
from modules.claims.models import Claim, ClaimResult, ClaimStatus
from modules.posts.models import GeoPoint, Post, PostStatus
from shared.config import get_settings

POST_ID = "64b7f0c2a1b2c3d4e5f60001"
CLAIM_ID = "64b7f0c2a1b2c3d4e5f60002"


@pytest.fixture
def mock_post() -> Post:
    """The post from the 'Rice' scenario."""
    now = datetime.now(timezone.utc)
    return Post(
        id=POST_ID,
        title="Rice",
        servings=5,
        location=GeoPoint.from_lat_lng(12.9, 77.6),
        status=PostStatus.OPEN,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mock_claim_result(mock_post: Post) -> ClaimResult:
    now = datetime.now(timezone.utc)
    claim = Claim(
        id=CLAIM_ID,
        post_id=POST_ID,
        claimer_name="Ravi",
        claimer_phone="+91 99999 00000",
        status=ClaimStatus.ACCEPTED,
        created_at=now,
        updated_at=now,
    )
    return ClaimResult(
        claim=claim,
        post=mock_post.model_copy(update={"status": PostStatus.CLAIMED}),
    )


@pytest.fixture
def user_repository() -> MagicMock:
    return MagicMock()


@pytest.fixture
def post_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def claim_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def make_app(user_repository, post_service, claim_service):
    """
    Build an app wired to the given settings and the mocked services.

    Usage:
        app = make_app(settings)
    """
    apps = []

    def factory(settings):
        app = create_app()
        auth_service = AuthService(user_repository, settings)
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_auth_service] = lambda: auth_service
        app.dependency_overrides[get_post_service] = lambda: post_service
        app.dependency_overrides[get_claim_service] = lambda: claim_service
        apps.append(app)
        return app

    yield factory

    for app in apps:
        app.dependency_overrides.clear()
