"""
Posts module.

Handles food post creation, recent and nearby listings, and the
open -> claimed transition used by the claims module.

Public API:
- IPostService: Interface for post operations
- Post, CreatePostRequest, GeoPoint, PostStatus: data models
- PostNotFoundError, PostNotOpenError: exceptions
"""

from .interfaces import IPostService
from .models import CreatePostRequest, GeoPoint, Post, PostStatus
from .exceptions import PostNotFoundError, PostNotOpenError

__all__ = [
    # Interface
    "IPostService",
    # Models
    "CreatePostRequest",
    "GeoPoint",
    "Post",
    "PostStatus",
    # Exceptions
    "PostNotFoundError",
    "PostNotOpenError",
]
