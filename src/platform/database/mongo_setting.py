"""
MongoDB async client management

This module provides:
1. MongoDatabase: owns the pymongo AsyncMongoClient and hands out collections
2. Collection name constants shared by the repositories
3. Index bootstrap for the collections the booking workflow queries

The client is created lazily on first use so that building the DI container
never opens a connection. Lifespan calls `ping()` to fail fast and `close()` on shutdown.
"""

from contextlib import contextmanager
from typing import Iterator

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger


class CollectionName:
    BOOKINGS = 'bookings'
    RESTAURANTS = 'restaurants'
    USERS = 'users'


class MongoDatabase:
    def __init__(
        self,
        *,
        uri: str | None = None,
        db_name: str | None = None,
        server_selection_timeout_ms: int | None = None,
    ) -> None:
        self.uri = uri or settings.MONGO_URI
        self.db_name = db_name or settings.MONGO_DB_NAME
        self.server_selection_timeout_ms = (
            server_selection_timeout_ms or settings.MONGO_SERVER_SELECTION_TIMEOUT_MS
        )
        self._client: AsyncMongoClient | None = None

    @property
    def client(self) -> AsyncMongoClient:
        if self._client is None:
            self._client = AsyncMongoClient(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                tz_aware=True,
            )
            Logger.base.info(f'🔗 [MONGO] Client created for database "{self.db_name}"')
        return self._client

    @property
    def db(self) -> AsyncDatabase:
        return self.client[self.db_name]

    def collection(self, name: str) -> AsyncCollection:
        return self.db[name]

    async def ping(self) -> None:
        """Fail fast at startup if the server is unreachable."""
        with translate_store_errors('Document store unreachable'):
            await self.client.admin.command('ping')
        Logger.base.info('📡 [MONGO] Ping ok')

    async def ensure_indexes(self) -> None:
        # Bookings are listed per owner in insertion order
        with translate_store_errors('Failed to create indexes'):
            await self.collection(CollectionName.BOOKINGS).create_index(
                [('userId', ASCENDING), ('_id', ASCENDING)]
            )
            await self.collection(CollectionName.RESTAURANTS).create_index(
                [('ownerId', ASCENDING)]
            )
        Logger.base.info('🗂️  [MONGO] Indexes ensured')

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            Logger.base.info('🔌 [MONGO] Client closed')


@contextmanager
def translate_store_errors(message: str) -> Iterator[None]:
    """Re-raise driver failures as PersistenceError carrying a client-safe message."""
    try:
        yield
    except PyMongoError as e:
        Logger.base.error(f'🗄️  [MONGO] {message}: {type(e).__name__}: {e}')
        raise PersistenceError(message) from e
