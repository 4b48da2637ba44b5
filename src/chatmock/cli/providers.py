"""Provider factory functions for CLI.

Centralizes creation of the key-value store and participant store from
options and environment variables. Hides configuration details from
command implementations.
"""

import os
from pathlib import Path

from ..persistence import DEFAULT_QUOTA_CHARS, ParticipantStore, create_key_value_store

DEFAULT_STORE_PATH = Path.home() / ".chatmock" / "storage.db"


def resolve_store_settings(
    backend: str | None = None,
    path: Path | None = None,
) -> tuple[str, Path, int]:
    """Fill unset launcher options from the environment.

    Environment variables:
        CHATMOCK_STORE: Store backend, "memory" or "sqlite" (default: sqlite)
        CHATMOCK_STORE_PATH: SQLite file (default: ~/.chatmock/storage.db)
        CHATMOCK_QUOTA_CHARS: Store size limit in characters (default: 5 MiB)
    """
    backend = backend or os.getenv("CHATMOCK_STORE", "sqlite")
    path = path or Path(os.getenv("CHATMOCK_STORE_PATH", str(DEFAULT_STORE_PATH)))
    quota = int(os.getenv("CHATMOCK_QUOTA_CHARS", str(DEFAULT_QUOTA_CHARS)))
    return backend, path.expanduser(), quota


def get_participant_store(
    backend: str | None = None,
    path: Path | None = None,
) -> ParticipantStore:
    """Create a participant store over the configured backend.

    The backend is not connected yet; callers connect and disconnect it.
    """
    backend, path, quota = resolve_store_settings(backend, path)
    if backend == "sqlite":
        kv = create_key_value_store("sqlite", path=path, quota=quota)
    else:
        kv = create_key_value_store(backend, quota=quota)
    return ParticipantStore(kv)
