"""
Claim API endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends

from api.dependencies import get_claim_service
from api.middleware.auth import require_writer
from shared.models import AuthenticatedUser

from .interfaces import IClaimService
from .models import Claim, ClaimResult, CreateClaimRequest

router = APIRouter()


@router.post("", response_model=ClaimResult, status_code=201)
async def create_claim(
    request: CreateClaimRequest,
    writer: Optional[AuthenticatedUser] = Depends(require_writer),
    service: IClaimService = Depends(get_claim_service),
) -> ClaimResult:
    """
    Claim an open post.

    Returns 404 if the post does not exist and 409 if it is not open.
    """
    return await service.create_claim(request, claimed_by=writer.id if writer else None)


@router.get("/{claim_id}", response_model=Claim)
async def get_claim(
    claim_id: str,
    service: IClaimService = Depends(get_claim_service),
) -> Claim:
    """Get a single claim."""
    return await service.get_claim(claim_id)
