"""Pure projection from editor state to view models.

Hides the presentation rules: bubble choice per message type, reaction
pill colors, participant short labels and the reaction manager fields.
"""

from ..conversation.defaults import REACTION_EMOJIS
from ..conversation.models import EditorState, Message, MessageType
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

# emoji -> (background, border), Tailwind 100/200 shades
REACTION_COLORS: dict[str, tuple[str, str]] = {
    "😍": ("#fef9c3", "#fef08a"),  # yellow
    "OK": ("#dcfce7", "#bbf7d0"),  # green
    "❤️": ("#fee2e2", "#fecaca"),  # red
    "👏": ("#ffedd5", "#fed7aa"),  # orange
    "👍": ("#dbeafe", "#bfdbfe"),  # blue
}
NEUTRAL_REACTION_COLOR = ("#f1f5f9", "#e2e8f0")  # slate

NAME_SEPARATOR = ", "

PREVIEW_MAX_LENGTH = 60
IMAGE_PREVIEW_LABEL = "[image]"

_BUBBLES = {
    MessageType.TEXT: BubbleKind.TEXT,
    MessageType.IMAGE: BubbleKind.IMAGE,
    MessageType.LIKE: BubbleKind.GLYPH,
}


def reaction_color(emoji: str) -> tuple[str, str]:
    """Background and border color for an emoji's pill."""
    return REACTION_COLORS.get(emoji, NEUTRAL_REACTION_COLOR)


def short_name(name: str) -> str:
    """Last word of a display name ("Phương QL" -> "QL")."""
    words = name.split()
    return words[-1] if words else name


def message_preview(message: Message, limit: int = PREVIEW_MAX_LENGTH) -> str:
    """One-line summary of a message for the reaction manager."""
    if message.type is MessageType.IMAGE:
        return IMAGE_PREVIEW_LABEL
    text = " ".join(message.text.split())
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def project_message(state: EditorState, message: Message) -> MessageView:
    sender = state.resolve_sender(message)
    pills = []
    for group in message.reactions:
        background, border = reaction_color(group.emoji)
        pills.append(ReactionPill(
            emoji=group.emoji,
            label=NAME_SEPARATOR.join(group.names),
            background=background,
            border=border,
        ))
    return MessageView(
        id=message.id,
        sender_name=sender.name,
        sender_avatar=sender.avatar,
        bubble=_BUBBLES[message.type],
        content=message.text,
        timestamp=message.timestamp,
        side=message.side,
        selected=message.id == state.selected_message_id,
        reactions=pills,
    )


def project_reaction_editor(state: EditorState) -> ReactionEditorView | None:
    message = state.selected_message
    if message is None:
        return None
    fields = []
    for emoji in REACTION_EMOJIS:
        group = message.reaction_for(emoji)
        value = NAME_SEPARATOR.join(group.names) if group else ""
        fields.append(ReactionField(emoji=emoji, value=value))
    return ReactionEditorView(
        message_id=message.id,
        preview=message_preview(message),
        fields=fields,
    )


def project(state: EditorState) -> ChatView:
    """Map a snapshot to the view models the editor draws."""
    participants = [
        ParticipantView(
            index=idx,
            id=p.id,
            name=p.name,
            avatar=p.avatar,
            short_name=short_name(p.name),
            active=idx == state.side.participant_index,
        )
        for idx, p in enumerate(state.participants)
    ]
    messages = [project_message(state, m) for m in state.messages]
    return ChatView(
        title=state.chat_title,
        messages=messages,
        participants=participants,
        composer=ComposerView(
            draft=state.draft,
            side=state.side,
            can_send=bool(state.draft.strip()),
        ),
        reaction_editor=project_reaction_editor(state),
    )
