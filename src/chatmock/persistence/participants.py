"""Saved participant pair.

Hides the serialized format (a JSON array of two camelCase records
under one well-known key) from the rest of the editor.
"""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..conversation.defaults import DEFAULT_PARTICIPANTS
from ..conversation.errors import ParseError, PersistError, QuotaExceeded
from ..conversation.models import Participant
from .base import KeyValueStore

STORAGE_KEY = "messenger-mockup-participants"

ParticipantPair = tuple[Participant, Participant]

_PAIR_ADAPTER: TypeAdapter[ParticipantPair] = TypeAdapter(ParticipantPair)


def dump_participants(participants: ParticipantPair) -> str:
    """Serialize the pair to its stored JSON form."""
    return _PAIR_ADAPTER.dump_json(participants, by_alias=True).decode("utf-8")


def parse_participants(raw: str) -> ParticipantPair:
    """Parse a stored blob.

    Raises:
        ParseError: If the blob is not a JSON array of two participants
    """
    try:
        return _PAIR_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise ParseError(f"Invalid participant blob: {e.error_count()} error(s)") from e


class ParticipantStore:
    """Save, load and reset the participant pair in a key-value store."""

    def __init__(self, kv: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Storage", message)

    @property
    def key(self) -> str:
        return self._key

    @property
    def backend(self) -> KeyValueStore:
        return self._kv

    async def save(self, participants: ParticipantPair) -> None:
        """Write the pair under the storage key.

        Raises:
            QuotaExceeded: If the store's size limit would be exceeded
            PersistError: For any other serialization or write failure
        """
        try:
            data = dump_participants(participants)
        except Exception as e:
            raise PersistError(f"Failed to serialize participants: {e}") from e

        try:
            await self._kv.set_item(self._key, data)
        except QuotaExceeded:
            self._debug("error", f"Quota exceeded writing {len(data):,} characters")
            raise
        except Exception as e:
            self._debug("error", f"Failed to save participants: {e}")
            raise PersistError(f"Failed to save participants: {e}") from e

        self._debug("info", f"Saved participants ({len(data):,} characters)")

    async def load(self) -> ParticipantPair:
        """Read the saved pair, falling back to the defaults.

        Never raises: read and parse failures are logged and absorbed.
        """
        try:
            raw = await self._kv.get_item(self._key)
        except Exception as e:
            self._debug("error", f"Failed to read saved participants: {e}")
            return DEFAULT_PARTICIPANTS

        if raw is None:
            self._debug("debug", "No saved participants, using defaults")
            return DEFAULT_PARTICIPANTS

        try:
            participants = parse_participants(raw)
        except ParseError as e:
            self._debug("warning", f"{e}; using defaults")
            return DEFAULT_PARTICIPANTS

        self._debug("info", "Loaded saved participants")
        return participants

    async def reset(self) -> ParticipantPair:
        """Delete the saved pair and return the defaults.

        Raises:
            PersistError: If the backend fails to delete the key
        """
        try:
            await self._kv.remove_item(self._key)
        except Exception as e:
            raise PersistError(f"Failed to clear saved participants: {e}") from e
        self._debug("info", "Cleared saved participants")
        return DEFAULT_PARTICIPANTS
