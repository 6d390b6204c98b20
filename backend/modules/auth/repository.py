"""
User repository for database access.

Encapsulates all MongoDB queries and data mapping for the users collection.
Emails are stored lowercased; a unique index on ``email`` backs the
duplicate-signup check.
"""

from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from shared.database import USERS_COLLECTION
from shared.repository import BaseRepository

from .exceptions import EmailAlreadyRegisteredError
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """Repository for user data access."""

    collection_name = USERS_COLLECTION

    def create_user(
        self,
        email: str,
        password_hash: str,
        name: Optional[str] = None,
    ) -> UserRecord:
        """
        Insert a new user.

        Raises:
            EmailAlreadyRegisteredError: If the unique email index rejects it
        """
        now = self._now()
        doc: dict[str, Any] = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "created_at": now,
            "updated_at": now,
        }
        try:
            result = self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise EmailAlreadyRegisteredError(email)
        doc["_id"] = result.inserted_id
        return self._map_to_user(doc)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        doc = self._collection.find_one({"email": email})
        return self._map_to_user(doc) if doc else None

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        oid = self._parse_id(user_id)
        if oid is None:
            return None
        doc = self._collection.find_one({"_id": oid})
        return self._map_to_user(doc) if doc else None

    def email_exists(self, email: str) -> bool:
        return self._collection.count_documents({"email": email}, limit=1) > 0

    def _map_to_user(self, doc: dict[str, Any]) -> UserRecord:
        return UserRecord(**self._with_string_id(doc))
