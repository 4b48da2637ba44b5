"""Conversation module for chatmock.

Holds the editor state (participants, messages, selection) and the
operations that change it.
"""

from .defaults import (
    DEFAULT_PARTICIPANTS,
    LIKE_GLYPH,
    QUICK_REACT_EMOJI,
    QUICK_REACT_NAME,
    REACTION_EMOJIS,
    SEED_MESSAGES,
    initial_state,
)
from .errors import (
    ChatMockError,
    ImageDecodeError,
    InvalidIndex,
    ParseError,
    PersistError,
    QuotaExceeded,
)
from .models import (
    EditorState,
    Message,
    MessageSide,
    MessageType,
    Participant,
    ReactionGroup,
)
from .notifications import TOAST_TIMEOUT, Toast, ToastKind, ToastNotifier
from .session import EditorSession, parse_names
from .updates import ParticipantUpdate, SetAvatar, SetName

__all__ = [
    "ChatMockError",
    "DEFAULT_PARTICIPANTS",
    "EditorSession",
    "EditorState",
    "ImageDecodeError",
    "InvalidIndex",
    "LIKE_GLYPH",
    "Message",
    "MessageSide",
    "MessageType",
    "ParseError",
    "Participant",
    "ParticipantUpdate",
    "PersistError",
    "QUICK_REACT_EMOJI",
    "QUICK_REACT_NAME",
    "QuotaExceeded",
    "REACTION_EMOJIS",
    "ReactionGroup",
    "SEED_MESSAGES",
    "SetAvatar",
    "SetName",
    "TOAST_TIMEOUT",
    "Toast",
    "ToastKind",
    "ToastNotifier",
    "initial_state",
    "parse_names",
]
