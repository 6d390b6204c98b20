"""
Claim repository for database access.

Encapsulates all MongoDB queries and data mapping for the claims collection.
"""

from typing import Any, Optional

from bson import ObjectId

from shared.database import CLAIMS_COLLECTION
from shared.repository import BaseRepository

from .models import Claim, ClaimStatus


class ClaimRepository(BaseRepository[Claim]):
    """Repository for claim data access."""

    collection_name = CLAIMS_COLLECTION

    def create_claim(self, data: dict[str, Any]) -> Claim:
        """
        Insert a new accepted claim.

        Args:
            data: Claim fields; ``post_id`` must be a valid ObjectId string.
        """
        now = self._now()
        doc = {
            **data,
            "post_id": ObjectId(data["post_id"]),
            "status": ClaimStatus.ACCEPTED.value,
            "created_at": now,
            "updated_at": now,
        }
        if doc.get("claimed_by"):
            doc["claimed_by"] = self._parse_id(doc["claimed_by"]) or doc["claimed_by"]
        result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_claim(doc)

    def get_by_id(self, claim_id: str) -> Optional[Claim]:
        oid = self._parse_id(claim_id)
        if oid is None:
            return None
        doc = self._collection.find_one({"_id": oid})
        return self._map_to_claim(doc) if doc else None

    def _map_to_claim(self, doc: dict[str, Any]) -> Claim:
        data = self._with_string_id(doc)
        for key in ("post_id", "claimed_by"):
            if isinstance(data.get(key), ObjectId):
                data[key] = str(data[key])
        return Claim.model_validate(data)
