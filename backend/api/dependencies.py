"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The app lifespan builds one container around the
process-wide MongoDB handle and stores it on ``app.state``; route
dependencies read it from the request, so no handler touches a global
database handle.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request
from pymongo.database import Database

from shared.config import Settings, get_settings
from shared.exceptions import ExternalServiceError

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.claims.interfaces import IClaimService
    from modules.claims.repository import ClaimRepository
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached
    for the lifetime of the container.
    """

    def __init__(self, db: Database, settings: Optional[Settings] = None) -> None:
        self.db = db
        self.settings = settings or get_settings()
        self._user_repository: "UserRepository | None" = None
        self._post_repository: "PostRepository | None" = None
        self._claim_repository: "ClaimRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._post_service: "IPostService | None" = None
        self._claim_service: "IClaimService | None" = None

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def post_repository(self) -> "PostRepository":
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            self._post_repository = PostRepository(self.db)
        return self._post_repository

    @property
    def claim_repository(self) -> "ClaimRepository":
        if self._claim_repository is None:
            from modules.claims.repository import ClaimRepository
            self._claim_repository = ClaimRepository(self.db)
        return self._claim_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.user_repository, self.settings)
        return self._auth_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(self.post_repository, self.settings)
        return self._post_service

    @property
    def claims(self) -> "IClaimService":
        """Get the claim service instance."""
        if self._claim_service is None:
            from modules.claims.service import ClaimService
            self._claim_service = ClaimService(
                repository=self.claim_repository,
                posts=self.post_repository,
            )
        return self._claim_service


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the container built at startup."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise ExternalServiceError(
            "Database not initialized",
            service="mongodb",
            code="DATABASE_UNAVAILABLE",
        )
    return container


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_post_service(container: ServiceContainer = Depends(get_container)) -> "IPostService":
    """FastAPI dependency for post service."""
    return container.posts


def get_claim_service(container: ServiceContainer = Depends(get_container)) -> "IClaimService":
    """FastAPI dependency for claim service."""
    return container.claims
