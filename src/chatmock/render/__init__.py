"""Render projection for chatmock.

Maps editor snapshots to view models and draws them with Rich.
"""

from .console import render_chat
from .models import (
    BubbleKind,
    ChatView,
    ComposerView,
    MessageView,
    ParticipantView,
    ReactionEditorView,
    ReactionField,
    ReactionPill,
)
from .projection import REACTION_COLORS, project, reaction_color, short_name

__all__ = [
    "BubbleKind",
    "ChatView",
    "ComposerView",
    "MessageView",
    "ParticipantView",
    "REACTION_COLORS",
    "ReactionEditorView",
    "ReactionField",
    "ReactionPill",
    "project",
    "reaction_color",
    "render_chat",
    "short_name",
]
