"""Abstract base class for key-value store backends.

This module defines the interface for the blob store that keeps the
saved participant pair. The abstraction hides:
- Storage medium (process memory, SQLite file)
- Quota accounting
- Connection management

Semantics follow browser local storage: string keys, string values,
and a size limit measured in characters over all keys and values.
"""

from abc import ABC, abstractmethod

DEFAULT_QUOTA_CHARS = 5 * 1024 * 1024


class KeyValueStore(ABC):
    """Abstract string key-value store with a size quota."""

    @abstractmethod
    async def connect(self) -> None:
        """Initialize the backend."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the backend gracefully."""

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None."""

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store value under key.

        Raises:
            QuotaExceeded: If the write would exceed the quota. The
                previous value is kept.
        """

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Delete key. Missing keys are ignored."""

    @property
    @abstractmethod
    def quota(self) -> int:
        """Maximum number of characters over all keys and values."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""


def entry_size(key: str, value: str) -> int:
    """Characters an entry counts against the quota."""
    return len(key) + len(value)
