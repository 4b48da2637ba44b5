"""SQLite key-value backend.

Keeps the store in a SQLite database file so saved participants
survive restarts. Uses aiosqlite for async access.
"""

from pathlib import Path

import aiosqlite

from ..conversation.errors import QuotaExceeded
from .base import DEFAULT_QUOTA_CHARS, KeyValueStore, entry_size


class SQLiteKeyValueStore(KeyValueStore):
    """SQLite-backed key-value store.

    One table of (key, value) rows; the quota is checked against the
    summed lengths of all rows before each write.
    """

    def __init__(
        self,
        path: str | Path = "./chatmock_storage.db",
        quota: int = DEFAULT_QUOTA_CHARS,
    ):
        self._db_path = Path(path)
        self._quota = quota
        self._connection: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        """Open the database and create the schema."""
        if self._connection is not None:
            return
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connection = await aiosqlite.connect(self._db_path)
        await self._connection.execute("""
            CREATE TABLE IF NOT EXISTS kv_items (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        await self._connection.commit()

    async def disconnect(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    async def get_item(self, key: str) -> str | None:
        async with self._db().execute(
            "SELECT value FROM kv_items WHERE key = ?", (key,)
        ) as cursor:
            row = await cursor.fetchone()
        return row[0] if row else None

    async def set_item(self, key: str, value: str) -> None:
        conn = self._db()
        async with conn.execute(
            "SELECT COALESCE(SUM(LENGTH(key) + LENGTH(value)), 0) "
            "FROM kv_items WHERE key != ?",
            (key,),
        ) as cursor:
            row = await cursor.fetchone()
        required = row[0] + entry_size(key, value)
        if required > self._quota:
            raise QuotaExceeded(required, self._quota)

        await conn.execute("""
            INSERT INTO kv_items (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
        """, (key, value))
        await conn.commit()

    async def remove_item(self, key: str) -> None:
        conn = self._db()
        await conn.execute("DELETE FROM kv_items WHERE key = ?", (key,))
        await conn.commit()

    def _db(self) -> aiosqlite.Connection:
        if self._connection is None:
            raise RuntimeError("SQLiteKeyValueStore is not connected")
        return self._connection

    @property
    def quota(self) -> int:
        return self._quota

    @property
    def backend_type(self) -> str:
        return "sqlite"

    @property
    def db_path(self) -> Path:
        return self._db_path
