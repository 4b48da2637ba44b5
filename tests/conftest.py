"""Pytest configuration and shared fixtures."""
import io
from datetime import datetime

import pytest
from PIL import Image

from chatmock.conversation import EditorSession, initial_state
from chatmock.persistence import ParticipantStore, create_key_value_store


@pytest.fixture
def fixed_clock():
    """Return a clock frozen at 2:05 PM."""
    return lambda: datetime(2024, 5, 17, 14, 5)


@pytest.fixture
def kv_store():
    """Return an in-memory key-value store with the default quota."""
    return create_key_value_store("memory")


@pytest.fixture
def participant_store(kv_store):
    """Return a participant store over the in-memory backend."""
    return ParticipantStore(kv_store)


@pytest.fixture
def session(participant_store, fixed_clock):
    """Return a session on the seed conversation with default participants."""
    return EditorSession(participant_store, initial_state(), clock=fixed_clock)


@pytest.fixture
def debug_log():
    """Return a list collecting (level, component, message) debug records."""
    records: list[tuple[str, str, str]] = []

    def _callback(level: str, component: str, message: str) -> None:
        records.append((level, component, message))

    _callback.records = records
    return _callback


@pytest.fixture
def png_bytes():
    """Return the bytes of a tiny PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (3, 2), "red").save(buffer, format="PNG")
    return buffer.getvalue()
