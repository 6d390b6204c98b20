"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """
    Base for models exchanged over HTTP.

    Fields are snake_case in Python and camelCase on the wire.
    Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (Mongo ObjectId as string)")
    email: EmailStr = Field(..., description="User's email address")
    issued_at: Optional[datetime] = Field(None, description="Token issue time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from JWT
    }
