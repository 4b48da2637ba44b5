"""In-memory key-value backend.

Simple dict-based storage for session-only persistence.
Data is lost when the application exits.
"""

from ..conversation.errors import QuotaExceeded
from .base import DEFAULT_QUOTA_CHARS, KeyValueStore, entry_size


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store (session-only).

    Suitable for single-session use or testing.
    """

    def __init__(self, quota: int = DEFAULT_QUOTA_CHARS):
        self._quota = quota
        self._items: dict[str, str] = {}

    async def connect(self) -> None:
        """Initialize memory (no-op for in-memory)."""
        pass

    async def disconnect(self) -> None:
        """Close memory (no-op for in-memory)."""
        pass

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        used = sum(
            entry_size(k, v) for k, v in self._items.items() if k != key
        )
        required = used + entry_size(key, value)
        if required > self._quota:
            raise QuotaExceeded(required, self._quota)
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    @property
    def quota(self) -> int:
        return self._quota

    @property
    def backend_type(self) -> str:
        return "memory"
