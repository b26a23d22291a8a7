"""
MongoDB integration.

This module provides the ``Database`` handle that owns the motor
client for the lifetime of the application, a FastAPI dependency
(``get_database``) that hands the active database to route handlers,
and a helper for converting path identifiers into ``ObjectId``
values.

The handle is constructed by ``create_app`` and stored on
``app.state``; nothing in this module keeps a global connection.
"""

import logging
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import ConfigurationError, PyMongoError

logger = logging.getLogger(__name__)

DONORS_COLLECTION = "donors"
INVENTORY_COLLECTION = "inventories"
REQUESTS_COLLECTION = "requests"


class Database:
    """Owns the MongoDB client and exposes the blood bank collections.

    A pre-built client may be injected (tests use an in-memory mock);
    otherwise ``connect`` creates an ``AsyncIOMotorClient`` from
    ``uri``.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        timeout_ms: int = 5000,
        client: Optional[Any] = None,
    ) -> None:
        self.uri = uri
        self.database_name = database_name
        self.timeout_ms = timeout_ms
        self._client = client
        self._owns_client = client is None
        self._db: Optional[AsyncIOMotorDatabase] = None
        self.connected = False

    async def connect(self) -> None:
        """Create the client and check that the server answers.

        Failure to reach the server is logged and swallowed so that the
        HTTP listener still starts; handlers report database errors per
        request until the server becomes reachable.
        """
        if not self._owns_client:
            self._db = self._client[self.database_name]
            self.connected = True
            return

        try:
            self._client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            self._db = self._client.get_default_database(default=self.database_name)
        except (ConfigurationError, ValueError) as e:
            # Malformed URI: keep serving, every request will report it.
            logger.error("MongoDB connection error: %s", e)
            return
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            self.connected = False
            logger.error("MongoDB connection error: %s", e)
            return
        self.connected = True
        logger.info("Connected to MongoDB database '%s'", self._db.name)

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")
        self._db = None
        self.connected = False

    @property
    def db(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._db

    @property
    def donors(self) -> AsyncIOMotorCollection:
        return self.db[DONORS_COLLECTION]

    @property
    def inventory(self) -> AsyncIOMotorCollection:
        return self.db[INVENTORY_COLLECTION]

    @property
    def requests(self) -> AsyncIOMotorCollection:
        return self.db[REQUESTS_COLLECTION]


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the application's database handle."""
    return request.app.state.database


def parse_object_id(value: str) -> ObjectId:
    """Convert a path identifier into an ``ObjectId``.

    Raises ``ValueError`` if ``value`` is not a valid 24 character
    hex string.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ValueError(f"Invalid id: {value!r}") from e
