"""
MongoDB connection handle.

All database access goes through a MongoConnection owned by the application.
Repositories receive the connection explicitly; there is no module-level client.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from homescreen.config import settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Any]


class MongoConnection:
    """Owns the async Mongo client and the database handle for one application."""

    def __init__(
        self,
        uri: str,
        database_name: str,
        client_factory: ClientFactory = AsyncIOMotorClient,
    ) -> None:
        """
        Args:
            uri: MongoDB connection URI
            database_name: Database name
            client_factory: Builds a client from the URI (swapped in tests)
        """
        self._uri = uri
        self._database_name = database_name
        self._client_factory = client_factory
        self._client: Any = None
        self._db: AsyncIOMotorDatabase | None = None

    @classmethod
    def from_settings(cls) -> MongoConnection:
        return cls(settings.MONGODB_URI, settings.MONGODB_DATABASE)

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Connect to MongoDB.

        Idempotent: a second call returns the handle created by the first.
        """
        if self._db is not None:
            logger.debug("MongoDB is already connected")
            return self._db

        self._client = self._client_factory(self._uri)
        self._db = self._client[self._database_name]
        logger.info("Connected to MongoDB database: %s", self._database_name)
        return self._db

    async def close(self) -> None:
        """Close the MongoDB client."""
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise RuntimeError("MongoDB not connected. Call connect() first.")
        return self._db
