"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import APIModel

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class TokenPayload(BaseModel):
    """Decoded access token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class UserRecord(BaseModel):
    """
    A user as stored in the database.

    Carries the password hash, so it must never be returned from a route.
    """

    id: str
    name: Optional[str] = None
    email: str
    password_hash: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserPublic(APIModel):
    """User fields that are safe to expose."""

    id: str = Field(..., description="User ID")
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="Email address")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserPublic":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            created_at=record.created_at,
        )


class SignupRequest(APIModel):
    """Request to create an account."""

    name: Optional[str] = Field(None, max_length=200, description="Display name")
    email: EmailStr = Field(..., description="Email address (case-insensitive)")
    password: str = Field(..., min_length=1, description="Plain-text password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(APIModel):
    """Request to exchange credentials for an access token."""

    email: str = Field(..., min_length=1, description="Email address")
    password: str = Field(..., min_length=1, description="Plain-text password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class SignupResponse(APIModel):
    """Response from a successful signup."""

    message: str = "User created"
    user: UserPublic


class LoginResponse(APIModel):
    """Response from a successful login."""

    token: str = Field(..., description="Signed bearer token")
    user: UserPublic
