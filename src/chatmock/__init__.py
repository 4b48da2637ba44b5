"""
Chatmock: an editor for fake chat-conversation screenshots.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .conversation import (
    EditorSession,
    EditorState,
    Message,
    MessageSide,
    MessageType,
    Participant,
    ReactionGroup,
)
from .persistence import ParticipantStore, create_key_value_store
from .render import project

__all__ = [
    "EditorSession",
    "EditorState",
    "Message",
    "MessageSide",
    "MessageType",
    "Participant",
    "ParticipantStore",
    "ReactionGroup",
    "create_key_value_store",
    "project",
]
