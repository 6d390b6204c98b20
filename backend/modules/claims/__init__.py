"""
Claims module.

Handles claiming open posts.

Public API:
- IClaimService: Interface for claim operations
- Claim, ClaimResult, CreateClaimRequest, ClaimStatus: data models
- ClaimNotFoundError: exception
"""

from .interfaces import IClaimService
from .models import Claim, ClaimResult, ClaimStatus, CreateClaimRequest
from .exceptions import ClaimNotFoundError

__all__ = [
    # Interface
    "IClaimService",
    # Models
    "Claim",
    "ClaimResult",
    "ClaimStatus",
    "CreateClaimRequest",
    # Exceptions
    "ClaimNotFoundError",
]
