"""
Posts module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class PostNotFoundError(NotFoundError):
    """Raised when a post is not found."""

    def __init__(self, post_id: str):
        super().__init__(
            f"Post not found: {post_id}",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class PostNotOpenError(ConflictError):
    """Raised when claiming a post that is no longer open."""

    def __init__(self, post_id: str, status: str):
        super().__init__(
            f"Post is not open for claims: {post_id}",
            code="POST_NOT_OPEN",
            details={"post_id": post_id, "status": status},
        )
