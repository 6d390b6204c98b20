"""
Database client factory for MongoDB.

Opens a single client per process, verifies the server is reachable
before the app starts serving, and creates the indexes the modules
rely on (the nearby query needs the 2dsphere index on posts.location).
"""

import logging
import time
from typing import Optional

from pymongo import ASCENDING, DESCENDING, GEOSPHERE, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import Settings, get_settings
from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"
CLAIMS_COLLECTION = "claims"


def create_mongo_client(settings: Optional[Settings] = None) -> MongoClient:
    """
    Create a MongoDB client and wait until the server answers a ping.

    Retries with exponential backoff; the delay starts at
    ``mongo_retry_backoff_seconds`` and doubles after each failure.

    Args:
        settings: Settings to use, defaults to the cached settings

    Returns:
        Connected MongoClient

    Raises:
        ExternalServiceError: If the server is still unreachable after
            ``mongo_connect_retries`` attempts
    """
    settings = settings or get_settings()
    attempts = max(1, settings.mongo_connect_retries)
    delay = settings.mongo_retry_backoff_seconds
    last_error: Optional[Exception] = None

    for attempt in range(1, attempts + 1):
        client = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
        )
        try:
            client.admin.command("ping")
            logger.info("Connected to MongoDB (attempt %d/%d)", attempt, attempts)
            return client
        except PyMongoError as e:
            last_error = e
            client.close()
            logger.warning(
                "MongoDB connection attempt %d/%d failed: %s", attempt, attempts, e
            )
            if attempt < attempts:
                time.sleep(delay)
                delay *= 2

    raise ExternalServiceError(
        "Could not connect to MongoDB",
        service="mongodb",
        code="DATABASE_UNAVAILABLE",
        details={"attempts": attempts, "error": str(last_error)},
    )


def get_database(client: MongoClient, settings: Optional[Settings] = None) -> Database:
    """Return the application database from a connected client."""
    settings = settings or get_settings()
    return client[settings.mongo_db_name]


def ensure_indexes(db: Database) -> None:
    """
    Create the indexes required by the application.

    create_index is idempotent, so this is safe to run on every startup.
    """
    db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    db[POSTS_COLLECTION].create_index([("location", GEOSPHERE)])
    db[POSTS_COLLECTION].create_index([("created_at", DESCENDING)])
    db[POSTS_COLLECTION].create_index([("status", ASCENDING)])
    db[CLAIMS_COLLECTION].create_index([("post_id", ASCENDING)])
    logger.info("MongoDB indexes ensured")


def ping(db: Database) -> bool:
    """Check that the database still answers. Never raises."""
    try:
        db.command("ping")
        return True
    except PyMongoError:
        logger.warning("MongoDB ping failed", exc_info=True)
        return False
