"""View models produced by the render projection.

Plain dataclasses describing what the preview shows; they carry no
behavior and know nothing about Textual or Rich.
"""

from dataclasses import dataclass, field
from enum import Enum

from ..conversation.models import MessageSide


class BubbleKind(str, Enum):
    """How a message body is drawn."""

    TEXT = "text"    # Plain grey bubble
    IMAGE = "image"  # Inline picture
    GLYPH = "glyph"  # Oversized like sticker, no bubble


@dataclass(frozen=True)
class ReactionPill:
    """A colored pill listing who reacted with one emoji."""

    emoji: str
    label: str
    background: str
    border: str


@dataclass(frozen=True)
class MessageView:
    id: str
    sender_name: str
    sender_avatar: str
    bubble: BubbleKind
    content: str
    timestamp: str
    side: MessageSide
    selected: bool = False
    reactions: list[ReactionPill] = field(default_factory=list)


@dataclass(frozen=True)
class ParticipantView:
    index: int
    id: str
    name: str
    avatar: str
    short_name: str
    active: bool


@dataclass(frozen=True)
class ComposerView:
    draft: str
    side: MessageSide
    can_send: bool


@dataclass(frozen=True)
class ReactionField:
    """One emoji input of the reaction manager."""

    emoji: str
    value: str


@dataclass(frozen=True)
class ReactionEditorView:
    """Reaction manager contents for the selected message."""

    message_id: str
    preview: str
    fields: list[ReactionField]


@dataclass(frozen=True)
class ChatView:
    """Everything the editor draws for one snapshot."""

    title: str
    messages: list[MessageView]
    participants: list[ParticipantView]
    composer: ComposerView
    reaction_editor: ReactionEditorView | None = None
