"""
Post API endpoints.

Mounted at /posts, and again at /api/food for older clients.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_post_service
from api.middleware.auth import require_writer
from shared.models import AuthenticatedUser

from .interfaces import IPostService
from .models import CreatePostRequest, Post, PostStatus

router = APIRouter()


@router.post("", response_model=Post, status_code=201)
async def create_post(
    request: CreatePostRequest,
    writer: Optional[AuthenticatedUser] = Depends(require_writer),
    service: IPostService = Depends(get_post_service),
) -> Post:
    """
    Create a new open post.

    Requires a bearer token or the API key, depending on AUTH_STRATEGY.
    """
    return await service.create_post(request, created_by=writer.id if writer else None)


@router.get("", response_model=list[Post])
async def list_posts(
    status: Optional[PostStatus] = Query(default=None, description="Filter by status"),
    service: IPostService = Depends(get_post_service),
) -> list[Post]:
    """List the most recent posts, newest first, capped at the page size."""
    return await service.list_recent(status)


@router.get("/nearby", response_model=list[Post])
async def nearby_posts(
    lat: float = Query(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude"),
    lng: float = Query(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude"),
    km: Optional[float] = Query(default=None, ge=0, allow_inf_nan=False, description="Radius in km"),
    service: IPostService = Depends(get_post_service),
) -> list[Post]:
    """
    List open posts within ``km`` of a point, nearest first.
    """
    return await service.find_nearby(lat, lng, km)


@router.get("/{post_id}", response_model=Post)
async def get_post(
    post_id: str,
    service: IPostService = Depends(get_post_service),
) -> Post:
    """Get a single post."""
    return await service.get_post(post_id)
