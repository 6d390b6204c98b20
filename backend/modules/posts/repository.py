"""
Post repository for database access.

Encapsulates all MongoDB queries and data mapping for the posts collection.
Proximity search is delegated to the 2dsphere index on ``location``;
nothing here computes distances.
"""

from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from shared.database import POSTS_COLLECTION
from shared.repository import BaseRepository

from .models import GeoPoint, Post, PostStatus


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    Note: This repository does NOT perform authorization checks.
    The gate in front of the routes is responsible for that.
    """

    collection_name = POSTS_COLLECTION

    def create_post(self, data: dict[str, Any]) -> Post:
        """
        Insert a new post.

        Args:
            data: Post fields (title, servings, location, ...). Status and
                timestamps are filled in here.

        Returns:
            Created Post with generated ID.
        """
        now = self._now()
        doc = {
            **data,
            "status": PostStatus.OPEN.value,
            "created_at": now,
            "updated_at": now,
        }
        if doc.get("created_by"):
            doc["created_by"] = self._parse_id(doc["created_by"]) or doc["created_by"]
        result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_post(doc)

    def get_by_id(self, post_id: str) -> Optional[Post]:
        oid = self._parse_id(post_id)
        if oid is None:
            return None
        doc = self._collection.find_one({"_id": oid})
        return self._map_to_post(doc) if doc else None

    def list_recent(
        self,
        limit: int,
        status: Optional[PostStatus] = None,
    ) -> list[Post]:
        """List posts newest first, at most ``limit``."""
        query: dict[str, Any] = {}
        if status:
            query["status"] = status.value

        cursor = (
            self._collection.find(query)
            .sort([("created_at", DESCENDING), ("_id", DESCENDING)])
            .limit(limit)
        )
        return [self._map_to_post(doc) for doc in cursor]

    def find_nearby(
        self,
        point: GeoPoint,
        max_distance_m: float,
        limit: int,
        now: datetime,
    ) -> list[Post]:
        """
        Find open, unexpired posts within ``max_distance_m`` of a point.

        Results come back nearest first, in the order $near returns them.
        """
        query = {
            "location": {
                "$near": {
                    "$geometry": {"type": "Point", "coordinates": list(point.coordinates)},
                    "$maxDistance": max_distance_m,
                }
            },
            **self._claimable_filter(now),
        }
        cursor = self._collection.find(query).limit(limit)
        return [self._map_to_post(doc) for doc in cursor]

    def claim_if_open(self, post_id: str, now: datetime) -> Optional[Post]:
        """
        Atomically move a post from open to claimed.

        A single conditional update, so of two concurrent callers at most
        one gets a document back.

        Returns:
            The updated Post, or None if no open, unexpired post matched.
        """
        oid = self._parse_id(post_id)
        if oid is None:
            return None
        doc = self._collection.find_one_and_update(
            {"_id": oid, **self._claimable_filter(now)},
            {"$set": {"status": PostStatus.CLAIMED.value, "updated_at": now}},
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_post(doc) if doc else None

    def reopen(self, post_id: str) -> bool:
        """Move a claimed post back to open. Returns True if a post changed."""
        oid = self._parse_id(post_id)
        if oid is None:
            return False
        result = self._collection.update_one(
            {"_id": oid, "status": PostStatus.CLAIMED.value},
            {"$set": {"status": PostStatus.OPEN.value, "updated_at": self._now()}},
        )
        return result.modified_count > 0

    @staticmethod
    def _claimable_filter(now: datetime) -> dict[str, Any]:
        # {"ready_until": None} also matches documents without the field
        return {
            "status": PostStatus.OPEN.value,
            "$or": [
                {"ready_until": None},
                {"ready_until": {"$gt": now}},
            ],
        }

    def _map_to_post(self, doc: dict[str, Any]) -> Post:
        data = self._with_string_id(doc)
        created_by = data.get("created_by")
        if isinstance(created_by, ObjectId):
            data["created_by"] = str(created_by)
        return Post.model_validate(data)
