"""
Claims service implementation.

A claim reserves an open post. The open -> claimed flip is a single
conditional update on the post, so concurrent claims on one post
cannot both succeed; the claim document is written afterwards.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from pymongo.errors import PyMongoError

from modules.posts.exceptions import PostNotFoundError, PostNotOpenError
from modules.posts.repository import PostRepository

from .interfaces import IClaimService
from .models import Claim, ClaimResult, CreateClaimRequest
from .exceptions import ClaimNotFoundError
from .repository import ClaimRepository

logger = logging.getLogger(__name__)


class ClaimService(IClaimService):
    """Claim service backed by the claim and post repositories."""

    def __init__(
        self,
        repository: ClaimRepository,
        posts: PostRepository,
    ):
        self._repository = repository
        self._posts = posts

    async def create_claim(
        self,
        request: CreateClaimRequest,
        claimed_by: Optional[str] = None,
    ) -> ClaimResult:
        post_id = request.post_id
        post = self._posts.claim_if_open(post_id, datetime.now(timezone.utc))

        if post is None:
            existing = self._posts.get_by_id(post_id)
            if existing is None:
                raise PostNotFoundError(post_id)
            logger.info("Claim rejected, post %s is %s", post_id, existing.status.value)
            raise PostNotOpenError(post_id, existing.status.value)

        data = request.model_dump()
        data["claimed_by"] = claimed_by
        try:
            claim = self._repository.create_claim(data)
        except PyMongoError:
            logger.error("Failed to record claim for post %s, reopening", post_id)
            self._posts.reopen(post_id)
            raise

        logger.info("Post %s claimed (claim %s)", post_id, claim.id)
        return ClaimResult(claim=claim, post=post)

    async def get_claim(self, claim_id: str) -> Claim:
        claim = self._repository.get_by_id(claim_id)
        if claim is None:
            raise ClaimNotFoundError(claim_id)
        return claim
