"""Persistence module for chatmock.

Saves the participant pair to a local key-value store.
"""

from .base import DEFAULT_QUOTA_CHARS, KeyValueStore
from .factory import create_key_value_store
from .participants import (
    STORAGE_KEY,
    ParticipantStore,
    dump_participants,
    parse_participants,
)

__all__ = [
    "DEFAULT_QUOTA_CHARS",
    "KeyValueStore",
    "ParticipantStore",
    "STORAGE_KEY",
    "create_key_value_store",
    "dump_participants",
    "parse_participants",
]
