"""
Claims module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import AliasChoices, Field, field_validator

from shared.models import APIModel
from modules.posts.models import Post


class ClaimStatus(str, Enum):
    """Claim lifecycle status."""

    ACCEPTED = "accepted"    # Post reserved for the claimer
    PICKED = "picked"        # Food collected
    CANCELLED = "cancelled"  # Claimer backed out


class CreateClaimRequest(APIModel):
    """Request to claim an open post."""

    post_id: str = Field(
        ...,
        min_length=1,
        strict=True,
        validation_alias=AliasChoices("postId", "post_id"),
    )
    claimer_name: Optional[str] = Field(
        None,
        max_length=200,
        validation_alias=AliasChoices("claimerName", "claimer_name"),
    )
    claimer_phone: Optional[str] = Field(
        None,
        max_length=50,
        validation_alias=AliasChoices("claimerPhone", "claimer_phone"),
    )
    note: Optional[str] = Field(None, max_length=1000)

    @field_validator("post_id")
    @classmethod
    def strip_post_id(cls, value: str) -> str:
        return value.strip()

    @field_validator("claimer_name", "claimer_phone", "note")
    @classmethod
    def strip_optional(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class Claim(APIModel):
    """A claim as returned by the API."""

    id: str
    post_id: str
    claimer_name: Optional[str] = None
    claimer_phone: Optional[str] = None
    note: Optional[str] = None
    status: ClaimStatus = ClaimStatus.ACCEPTED
    claimed_by: Optional[str] = Field(None, description="ID of the claiming user, if any")
    created_at: datetime
    updated_at: datetime


class ClaimResult(APIModel):
    """A new claim together with the post it moved to claimed."""

    claim: Claim
    post: Post
