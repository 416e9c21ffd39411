"""
MongoDB connection using Motor (async driver).
One client per process, created lazily on first use and shared by both collections.
"""

import asyncio
from typing import Any, Callable, NamedTuple, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from core.config import Settings, get_settings
from core.exceptions import DatabaseConnectionError
from core.logger import logger


class Collections(NamedTuple):
    """Cached collection handles."""

    todos: AsyncIOMotorCollection
    projects: AsyncIOMotorCollection


class MongoDB:
    """MongoDB connection manager with lazy, lock-guarded initialization."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ):
        """
        Initialize MongoDB connection manager.

        Args:
            settings: Settings to read the connection string and names from
            client_factory: Callable building the Motor client (swapped in tests)
        """
        self.settings = settings or get_settings()
        self.client_factory = client_factory
        self.client: Optional[Any] = None
        self._collections: Optional[Collections] = None
        self._lock = asyncio.Lock()
        logger.debug("MongoDB connection manager initialized")

    @property
    def is_connected(self) -> bool:
        return self._collections is not None

    async def connect(self) -> None:
        """
        Establish connection to MongoDB and open both collections.
        Safe to call concurrently: only the first caller creates a client.

        Raises:
            DatabaseConnectionError: If the server cannot be reached
        """
        async with self._lock:
            if self._collections is not None:
                return

            settings = self.settings
            logger.info(f"Connecting to MongoDB: {settings.masked_db_url}")

            try:
                self.client = self.client_factory(
                    settings.db_url,
                    serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
                    connectTimeoutMS=settings.mongodb_connect_timeout_ms,
                )

                # Test connection with ping
                await self.client.admin.command("ping")

                self._collections = Collections(
                    todos=self.client[settings.todo_db_name][
                        settings.todo_collection_name
                    ],
                    projects=self.client[settings.catalog_db_name][
                        settings.catalog_collection_name
                    ],
                )

                logger.info(
                    f"Connected to MongoDB: "
                    f"{settings.todo_db_name}.{settings.todo_collection_name}, "
                    f"{settings.catalog_db_name}.{settings.catalog_collection_name}"
                )

            except PyMongoError as e:
                logger.error(f"MongoDB connection error: {e}")
                logger.exception("Connection error details:")
                self._reset()
                raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

    async def get_collections(self) -> Collections:
        """
        Return the cached collection handles, connecting on first call.

        Raises:
            DatabaseConnectionError: If the connection cannot be established
        """
        if self._collections is None:
            await self.connect()
        return self._collections

    async def disconnect(self) -> None:
        """
        Close MongoDB connection.
        Safe to call even if not connected.
        """
        if self.client is None:
            logger.debug("MongoDB client not initialized, nothing to disconnect")
            return

        logger.info("Disconnecting from MongoDB...")
        self._reset()
        logger.info("Disconnected from MongoDB")

    async def health_check(self) -> bool:
        """
        Check if MongoDB connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        if self.client is None:
            logger.warning("MongoDB client not initialized")
            return False

        try:
            await self.client.admin.command("ping")
            logger.debug("MongoDB health check passed")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False

    def _reset(self) -> None:
        if self.client is not None:
            self.client.close()
        self.client = None
        self._collections = None


# Global instance
_mongodb: Optional[MongoDB] = None


def get_database() -> MongoDB:
    """Get or create the process-wide MongoDB manager (does not connect)."""
    global _mongodb
    if _mongodb is None:
        _mongodb = MongoDB()
    return _mongodb

