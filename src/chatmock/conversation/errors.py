"""Error types for the editor.

Persistence failures are turned into toasts by the session; the rest
propagate to whoever called the operation.
"""


class ChatMockError(Exception):
    """Base class for all chatmock errors."""


class PersistError(ChatMockError):
    """Writing the participant blob failed."""


class QuotaExceeded(PersistError):
    """The key-value store refused a write because of its size limit."""

    def __init__(self, required: int, quota: int) -> None:
        super().__init__(
            f"Storage quota exceeded: {required:,} characters needed, "
            f"limit is {quota:,}"
        )
        self.required = required
        self.quota = quota


class ParseError(ChatMockError):
    """A stored participant blob could not be parsed."""


class InvalidIndex(ChatMockError, IndexError):
    """Participant index outside the fixed pair."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Participant index must be 0 or 1, got {index}")
        self.index = index


class ImageDecodeError(ChatMockError):
    """Uploaded bytes are not a recognizable image."""
