"""Built-in participants, seed conversation and reaction vocabulary."""

from .models import (
    EditorState,
    Message,
    MessageSide,
    MessageType,
    Participant,
    ReactionGroup,
)

DEFAULT_PARTICIPANTS: tuple[Participant, Participant] = (
    Participant(
        id="user-1",
        name="Phương QL",
        avatar="https://picsum.photos/seed/user1/200",
        is_online=True,
    ),
    Participant(
        id="user-2",
        name="PHAN XUAN",
        avatar="https://picsum.photos/seed/user2/200",
        is_online=True,
    ),
)

SEED_MESSAGES: tuple[Message, ...] = (
    Message(
        id="1",
        text="Tôi mọi người hay bận. Nên team sẽ chốt đi ăn vào trưa thứ 6 nhé",
        sender_id="user-1",
        timestamp="10:00 AM",
        side=MessageSide.LEFT,
        reactions=(
            ReactionGroup(emoji="😍", names=("Thảo Bùi", "Lê Khanh", "Kim Tuyến")),
            ReactionGroup(emoji="OK", names=("PHAN XUAN",)),
            ReactionGroup(emoji="❤️", names=("PHAN XUAN", "bách")),
            ReactionGroup(emoji="👏", names=("Thanh Huyền",)),
        ),
        type=MessageType.TEXT,
    ),
    Message(
        id="2",
        text="vâng ạ",
        sender_id="user-2",
        timestamp="10:01 AM",
        side=MessageSide.RIGHT,
        type=MessageType.TEXT,
    ),
)

# Emoji offered by the reaction manager, in display order
REACTION_EMOJIS: tuple[str, ...] = ("😍", "OK", "❤️", "👏", "👍")

LIKE_GLYPH = "👍"

# Hover shortcut on a message row
QUICK_REACT_EMOJI = "❤️"
QUICK_REACT_NAME = "Người dùng"

DEFAULT_CHAT_TITLE = "Group Chat"

# Same format as the seed timestamps ("10:00 AM")
TIMESTAMP_FORMAT = "%I:%M %p"


def initial_state(
    participants: tuple[Participant, Participant] = DEFAULT_PARTICIPANTS,
) -> EditorState:
    """Build the start-up snapshot around a participant pair."""
    return EditorState(
        participants=participants,
        messages=SEED_MESSAGES,
        chat_title=DEFAULT_CHAT_TITLE,
    )
