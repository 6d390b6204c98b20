"""Tests for the post service."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone

from modules.posts.exceptions import PostNotFoundError
from modules.posts.models import CreatePostRequest, GeoPoint, Post, PostStatus
from modules.posts.service import PostService
from shared.exceptions import ValidationError


def create_post(**overrides) -> Post:
    now = datetime.now(timezone.utc)
    data = {
        "id": "64b7f0c2a1b2c3d4e5f60001",
        "title": "Rice",
        "servings": 5,
        "location": GeoPoint.from_lat_lng(12.9, 77.6),
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return Post(**data)


@pytest.fixture
def repository():
    return MagicMock()


@pytest.fixture
def service(repository, settings):
    return PostService(repository, settings)


class TestCreatePost:
    @pytest.mark.asyncio
    async def test_builds_geojson_location(self, service, repository):
        """Location is stored as a GeoJSON point, longitude first."""
        repository.create_post.return_value = create_post()
        request = CreatePostRequest(title="Rice", servings=5, lat=12.9, lng=77.6)

        await service.create_post(request, created_by="user-1")

        data = repository.create_post.call_args.args[0]
        assert data["location"] == {"type": "Point", "coordinates": [77.6, 12.9]}
        assert data["created_by"] == "user-1"
        assert data["title"] == "Rice"
        assert "lat" not in data
        assert "lng" not in data

    @pytest.mark.asyncio
    async def test_zero_coordinates_survive(self, service, repository):
        repository.create_post.return_value = create_post(location=GeoPoint.from_lat_lng(0, 0))
        request = CreatePostRequest(title="Rice", servings=1, lat=0, lng=0)

        await service.create_post(request)

        data = repository.create_post.call_args.args[0]
        assert data["location"]["coordinates"] == [0, 0]
        assert data["created_by"] is None


class TestListRecent:
    @pytest.mark.asyncio
    async def test_uses_page_size(self, repository, settings_factory):
        repository.list_recent.return_value = []
        service = PostService(repository, settings_factory(page_size=20))

        await service.list_recent()

        repository.list_recent.assert_called_once_with(20, None)

    @pytest.mark.asyncio
    async def test_passes_status(self, service, repository):
        repository.list_recent.return_value = []
        await service.list_recent(PostStatus.OPEN)
        repository.list_recent.assert_called_once_with(50, PostStatus.OPEN)


class TestFindNearby:
    @pytest.mark.asyncio
    async def test_converts_km_to_metres(self, service, repository):
        repository.find_nearby.return_value = [create_post()]

        result = await service.find_nearby(12.9, 77.6, 1)

        assert len(result) == 1
        args, kwargs = repository.find_nearby.call_args
        assert args[0] == GeoPoint.from_lat_lng(12.9, 77.6)
        assert kwargs["max_distance_m"] == 1000
        assert kwargs["limit"] == 50
        assert kwargs["now"].tzinfo is not None

    @pytest.mark.asyncio
    async def test_default_radius(self, service, repository):
        repository.find_nearby.return_value = []

        await service.find_nearby(12.9, 77.6)

        assert repository.find_nearby.call_args.kwargs["max_distance_m"] == 5000

    @pytest.mark.asyncio
    async def test_zero_radius_is_not_the_default(self, service, repository):
        repository.find_nearby.return_value = []

        await service.find_nearby(12.9, 77.6, 0)

        assert repository.find_nearby.call_args.kwargs["max_distance_m"] == 0

    @pytest.mark.asyncio
    async def test_negative_radius(self, service, repository):
        with pytest.raises(ValidationError):
            await service.find_nearby(12.9, 77.6, -1)
        repository.find_nearby.assert_not_called()


class TestGetPost:
    @pytest.mark.asyncio
    async def test_found(self, service, repository):
        repository.get_by_id.return_value = create_post()
        post = await service.get_post("64b7f0c2a1b2c3d4e5f60001")
        assert post.title == "Rice"

    @pytest.mark.asyncio
    async def test_not_found(self, service, repository):
        repository.get_by_id.return_value = None
        with pytest.raises(PostNotFoundError):
            await service.get_post("64b7f0c2a1b2c3d4e5f60001")
