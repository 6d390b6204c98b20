"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB database access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.database import Database


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - MongoDB database access via self._db
    - the repository's collection via self._collection
    - ObjectId parsing and document id mapping

    Subclasses set ``collection_name`` and implement domain-specific
    data access methods, handling document-to-Pydantic mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            collection_name = "posts"

            def get_by_id(self, post_id: str) -> Optional[Post]:
                oid = self._parse_id(post_id)
                doc = self._collection.find_one({"_id": oid}) if oid else None
                return self._map_to_post(doc) if doc else None
    """

    collection_name: str = ""

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a MongoDB database handle.

        Args:
            db: pymongo Database instance for database operations.
        """
        self._db = db

    @property
    def _collection(self) -> Collection:
        return self._db[self.collection_name]

    @staticmethod
    def _parse_id(value: Optional[str]) -> Optional[ObjectId]:
        """Parse a string id, returning None when it is not a valid ObjectId."""
        # ObjectId(None) would mint a fresh id, so only strings are accepted
        if not isinstance(value, str):
            return None
        try:
            return ObjectId(value)
        except InvalidId:
            return None

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def _with_string_id(doc: dict[str, Any]) -> dict[str, Any]:
        """Copy a document, replacing ``_id`` with a string ``id``."""
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return data
