"""
Claims module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Claim, ClaimResult, CreateClaimRequest


@runtime_checkable
class IClaimService(Protocol):
    """Interface for claim operations."""

    async def create_claim(
        self,
        request: CreateClaimRequest,
        claimed_by: Optional[str] = None,
    ) -> ClaimResult:
        """
        Claim an open post.

        Args:
            request: Post ID and claimer contact details
            claimed_by: ID of the authenticated user, if any

        Returns:
            The accepted claim and the post, now in claimed status

        Raises:
            PostNotFoundError: If the post does not exist
            PostNotOpenError: If the post is already claimed, completed
                or expired
        """
        ...

    async def get_claim(self, claim_id: str) -> Claim:
        """
        Get a claim by ID.

        Raises:
            ClaimNotFoundError: If no claim has this ID
        """
        ...
