"""
Posts module data models.

A post is a batch of surplus food at a geographic point. Its location
is stored as a GeoJSON Point so MongoDB's 2dsphere index can answer
proximity queries.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional
from pydantic import AliasChoices, Field, field_validator

from shared.models import APIModel


class PostStatus(str, Enum):
    """Post lifecycle status."""

    OPEN = "open"            # Available to claim
    CLAIMED = "claimed"      # A claim was accepted
    COMPLETED = "completed"  # Picked up
    EXPIRED = "expired"      # Past ready_until without a claim


class GeoPoint(APIModel):
    """GeoJSON point. Coordinates are ordered [longitude, latitude]."""

    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float] = Field(..., description="[longitude, latitude]")

    @classmethod
    def from_lat_lng(cls, lat: float, lng: float) -> "GeoPoint":
        return cls(coordinates=(lng, lat))

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


class CreatePostRequest(APIModel):
    """
    Request to create a post.

    Accepts both the current field names (servings, lat, lng) and the
    older ones (quantity, latitude, longitude). Numbers must be JSON
    numbers; 0 is a valid coordinate.
    """

    title: str = Field(..., min_length=1, max_length=200, strict=True)
    servings: float = Field(
        ...,
        gt=0,
        strict=True,
        allow_inf_nan=False,
        validation_alias=AliasChoices("servings", "quantity"),
    )
    lat: float = Field(
        ...,
        ge=-90,
        le=90,
        strict=True,
        allow_inf_nan=False,
        validation_alias=AliasChoices("lat", "latitude"),
    )
    lng: float = Field(
        ...,
        ge=-180,
        le=180,
        strict=True,
        allow_inf_nan=False,
        validation_alias=AliasChoices("lng", "longitude"),
    )
    description: Optional[str] = Field(None, max_length=2000)
    address: Optional[str] = Field(None, max_length=500)
    contact_name: Optional[str] = Field(
        None,
        max_length=200,
        validation_alias=AliasChoices("contactName", "contact_name"),
    )
    contact_phone: Optional[str] = Field(
        None,
        max_length=50,
        validation_alias=AliasChoices("contactPhone", "contact_phone"),
    )
    ready_until: Optional[datetime] = Field(
        None,
        description="Time after which the food should no longer be claimed",
        validation_alias=AliasChoices("readyUntil", "ready_until"),
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title must not be blank")
        return value

    @field_validator("description", "address", "contact_name", "contact_phone")
    @classmethod
    def strip_optional(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("ready_until")
    @classmethod
    def ready_until_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # naive timestamps are taken as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Post(APIModel):
    """A food post as returned by the API."""

    id: str
    title: str
    servings: float
    description: Optional[str] = None
    address: Optional[str] = None
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    ready_until: Optional[datetime] = None
    status: PostStatus = PostStatus.OPEN
    location: GeoPoint
    created_by: Optional[str] = Field(None, description="ID of the creating user, if any")
    created_at: datetime
    updated_at: datetime
