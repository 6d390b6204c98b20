"""
Claims module exceptions.

Claiming a missing or closed post raises the posts module's
PostNotFoundError / PostNotOpenError.
"""

from shared.exceptions import NotFoundError


class ClaimNotFoundError(NotFoundError):
    """Raised when a claim is not found."""

    def __init__(self, claim_id: str):
        super().__init__(
            f"Claim not found: {claim_id}",
            code="CLAIM_NOT_FOUND",
            details={"claim_id": claim_id},
        )
