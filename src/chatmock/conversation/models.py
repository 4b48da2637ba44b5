"""Data models for the mockup conversation.

These models are immutable snapshots: every edit produces a new
EditorState rather than changing one in place. Field names serialize
in camelCase so the persisted participant records read
{id, name, avatar, isOnline}.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MessageSide(str, Enum):
    """Visual column a message renders in."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def participant_index(self) -> int:
        """Index of the participant that sends from this side."""
        return 0 if self is MessageSide.LEFT else 1

    @classmethod
    def for_index(cls, index: int) -> "MessageSide":
        return cls.LEFT if index == 0 else cls.RIGHT


class MessageType(str, Enum):
    """Kind of chat entry."""

    TEXT = "text"
    IMAGE = "image"
    LIKE = "like"


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Participant(_Frozen):
    """One of the two identities in the conversation."""

    id: str = Field(description="Stable unique identifier")
    name: str = Field(description="Display name")
    avatar: str = Field(description="Image URL or inline data URI")
    is_online: bool = Field(default=True, description="Display-only presence flag")


class ReactionGroup(_Frozen):
    """Reactor names attached to one emoji on one message."""

    emoji: str
    names: tuple[str, ...] = Field(min_length=1)


class Message(_Frozen):
    """A single entry of the conversation."""

    id: str
    text: str = Field(description="Body, image data URI, or the like glyph")
    sender_id: str
    timestamp: str = Field(description="Display-formatted wall-clock time")
    side: MessageSide
    reactions: tuple[ReactionGroup, ...] = ()
    type: MessageType = MessageType.TEXT

    def reaction_for(self, emoji: str) -> ReactionGroup | None:
        """Return the group for an emoji, if any."""
        for group in self.reactions:
            if group.emoji == emoji:
                return group
        return None

    @field_validator("reactions")
    @classmethod
    def validate_unique_emoji(
        cls, v: tuple[ReactionGroup, ...]
    ) -> tuple[ReactionGroup, ...]:
        """Ensure at most one group per emoji."""
        emojis = [group.emoji for group in v]
        if len(emojis) != len(set(emojis)):
            raise ValueError("duplicate reaction emoji on one message")
        return v


class EditorState(_Frozen):
    """Complete editor snapshot.

    Holds the participant pair, the message sequence and the transient
    UI state (selection, default side, composer draft).
    """

    participants: tuple[Participant, Participant]
    messages: tuple[Message, ...] = ()
    selected_message_id: str | None = None
    side: MessageSide = MessageSide.LEFT
    draft: str = ""
    chat_title: str = "Group Chat"

    @property
    def current_sender(self) -> Participant:
        """Participant that new messages are sent as."""
        return self.participants[self.side.participant_index]

    @property
    def selected_message(self) -> Message | None:
        if self.selected_message_id is None:
            return None
        return self.find_message(self.selected_message_id)

    def find_message(self, message_id: str) -> Message | None:
        for message in self.messages:
            if message.id == message_id:
                return message
        return None

    def resolve_sender(self, message: Message) -> Participant:
        """Participant that sent a message.

        A sender id that matches neither participant resolves to the
        first participant.
        """
        for participant in self.participants:
            if participant.id == message.sender_id:
                return participant
        return self.participants[0]
