"""
SQLite key-value store using aiosqlite.
"""

from pathlib import Path

import aiosqlite

from dictanote.core.kv_store.base import KeyValueStore
from dictanote.utils.exceptions import StorageUnavailableError, StoreError
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)

_PROBE_KEY = "__storage_test__"


class SQLiteKeyValueStore(KeyValueStore):
    """
    Single-table SQLite backend.

    Features:
    - Local durable storage in one file
    - WAL journal for crash safety
    """

    def __init__(self, db_path: str = "data/dictanote.db"):
        """
        Initialize SQLite key-value store.

        Args:
            db_path: Path to SQLite database file (":memory:" for a private database)
        """
        self.db_path = db_path
        self.connection: aiosqlite.Connection | None = None

    async def connect(self) -> aiosqlite.Connection:
        """Establish connection to SQLite and create the schema."""
        if self.connection is not None:
            return self.connection

        try:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self.connection = await aiosqlite.connect(self.db_path)
            await self.connection.execute("PRAGMA journal_mode = WAL")
            await self.connection.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """
            )
            await self.connection.commit()
        except (OSError, aiosqlite.Error) as e:
            self.connection = None
            raise StorageUnavailableError(
                f"Cannot open SQLite store: {e}", context={"db_path": self.db_path}
            ) from e

        return self.connection

    async def initialize(self) -> None:
        """Initialize database schema."""
        await self.connect()
        logger.info("SQLite key-value store ready", extra={"db_path": self.db_path})

    async def is_available(self) -> bool:
        try:
            await self.set_item(_PROBE_KEY, "test")
            await self.remove_item(_PROBE_KEY)
            return True
        except StoreError:
            return False

    async def get_item(self, key: str) -> str | None:
        conn = await self.connect()
        try:
            async with conn.execute("SELECT value FROM kv WHERE key = ?", (key,)) as cursor:
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to read {key}: {e}") from e
        return row[0] if row else None

    async def set_item(self, key: str, value: str) -> None:
        conn = await self.connect()
        try:
            await conn.execute(
                "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                (key, value),
            )
            await conn.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to write {key}: {e}") from e

    async def remove_item(self, key: str) -> None:
        conn = await self.connect()
        try:
            await conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            await conn.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to remove {key}: {e}") from e

    async def clear(self) -> None:
        conn = await self.connect()
        try:
            await conn.execute("DELETE FROM kv")
            await conn.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to clear store: {e}") from e

    async def usage(self) -> int:
        conn = await self.connect()
        try:
            async with conn.execute(
                "SELECT COALESCE(SUM(LENGTH(CAST(key AS BLOB)) + LENGTH(CAST(value AS BLOB))), 0) "
                "FROM kv"
            ) as cursor:
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to compute usage: {e}") from e
        return int(row[0])

    async def close(self) -> None:
        """Close connection."""
        if self.connection:
            await self.connection.close()
            self.connection = None
