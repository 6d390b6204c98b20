"""
Posts module interface.

The API layer and the claims module depend on IPostService.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreatePostRequest, Post, PostStatus


@runtime_checkable
class IPostService(Protocol):
    """Interface for post operations."""

    async def create_post(
        self,
        request: CreatePostRequest,
        created_by: Optional[str] = None,
    ) -> Post:
        """
        Create a new open post.

        Args:
            request: Validated post fields
            created_by: ID of the authenticated user, if the gate
                established one

        Returns:
            The created post with location [lng, lat]
        """
        ...

    async def list_recent(self, status: Optional[PostStatus] = None) -> list[Post]:
        """
        List the most recent posts, newest first.

        Capped at the configured page size; there is no cursor.
        """
        ...

    async def find_nearby(
        self,
        lat: float,
        lng: float,
        km: Optional[float] = None,
    ) -> list[Post]:
        """
        Find open posts within ``km`` kilometres of (lat, lng), nearest first.

        Args:
            lat: Centre latitude
            lng: Centre longitude
            km: Radius; defaults to the configured radius

        Raises:
            ValidationError: If the radius is negative
        """
        ...

    async def get_post(self, post_id: str) -> Post:
        """
        Get a post by ID.

        Raises:
            PostNotFoundError: If no post has this ID
        """
        ...
