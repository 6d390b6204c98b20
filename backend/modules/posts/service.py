"""
Posts service implementation.

Creates posts and answers the recent and nearby listings.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from shared.config import Settings, get_settings
from shared.exceptions import ValidationError

from .interfaces import IPostService
from .models import CreatePostRequest, GeoPoint, Post, PostStatus
from .exceptions import PostNotFoundError
from .repository import PostRepository

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """Post service backed by PostRepository."""

    def __init__(
        self,
        repository: PostRepository,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._settings = settings or get_settings()

    async def create_post(
        self,
        request: CreatePostRequest,
        created_by: Optional[str] = None,
    ) -> Post:
        data = request.model_dump(exclude={"lat", "lng"})
        # GeoJSON order is longitude first
        data["location"] = {"type": "Point", "coordinates": [request.lng, request.lat]}
        data["created_by"] = created_by

        post = self._repository.create_post(data)
        logger.info("Post created: %s at %s", post.id, post.location.coordinates)
        return post

    async def list_recent(self, status: Optional[PostStatus] = None) -> list[Post]:
        return self._repository.list_recent(self._settings.page_size, status)

    async def find_nearby(
        self,
        lat: float,
        lng: float,
        km: Optional[float] = None,
    ) -> list[Post]:
        radius_km = self._settings.default_radius_km if km is None else km
        if radius_km < 0:
            raise ValidationError(
                "Radius must not be negative",
                code="INVALID_INPUT",
                details={"km": radius_km},
            )

        return self._repository.find_nearby(
            GeoPoint.from_lat_lng(lat, lng),
            max_distance_m=radius_km * 1000,
            limit=self._settings.page_size,
            now=datetime.now(timezone.utc),
        )

    async def get_post(self, post_id: str) -> Post:
        post = self._repository.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
