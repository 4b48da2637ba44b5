"""Editor session: the owned state store and its mutation API.

Every operation builds a new EditorState and swaps it in; observers
receive whole snapshots only. Lookups for message and participant
targets always go through the current snapshot, so results of slow
operations (image decoding) land on whatever state exists when they
finish.
"""

import asyncio
import time
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from .defaults import (
    DEFAULT_PARTICIPANTS,
    LIKE_GLYPH,
    QUICK_REACT_EMOJI,
    QUICK_REACT_NAME,
    TIMESTAMP_FORMAT,
    initial_state,
)
from .errors import InvalidIndex, PersistError, QuotaExceeded
from .images import encode_data_uri
from .models import EditorState, Message, MessageSide, MessageType, ReactionGroup
from .notifications import Toast, ToastKind, ToastNotifier
from .updates import ParticipantUpdate, SetAvatar

if TYPE_CHECKING:
    from ..persistence import ParticipantStore

StateListener = Callable[[EditorState], None]

SAVE_OK = "Participants saved!"
SAVE_TOO_LARGE = "Image too large! Use a smaller picture."
SAVE_FAILED = "Failed to save participants!"
RESET_OK = "Participants reset!"
RESET_FAILED = "Failed to reset participants!"


def parse_names(names_raw: str) -> tuple[str, ...]:
    """Split a comma-separated name list, dropping blanks."""
    return tuple(name.strip() for name in names_raw.split(",") if name.strip())


class EditorSession:
    """Owns the editor state and applies user actions to it.

    Example:
        store = ParticipantStore(create_key_value_store("memory"))
        session = await EditorSession.open(store)
        session.set_draft("hello")
        session.add_message("text")
    """

    def __init__(
        self,
        store: "ParticipantStore",
        state: EditorState | None = None,
        notifier: ToastNotifier | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._state = state or initial_state()
        self._notifier = notifier or ToastNotifier()
        self._clock = clock
        self._listeners: list[StateListener] = []
        self._debug_callback: Any | None = None

    @classmethod
    async def open(
        cls,
        store: "ParticipantStore",
        notifier: ToastNotifier | None = None,
    ) -> "EditorSession":
        """Load saved participants and build a session around them."""
        participants = await store.load()
        return cls(store, initial_state(participants), notifier=notifier)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> EditorState:
        """Current snapshot."""
        return self._state

    @property
    def notifier(self) -> ToastNotifier:
        return self._notifier

    @property
    def store(self) -> "ParticipantStore":
        return self._store

    def subscribe(self, listener: StateListener) -> None:
        """Register a callable receiving every new snapshot."""
        self._listeners.append(listener)

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for logging.

        Propagated to the participant store.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._store.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Session", message)

    def _commit(self, **changes: Any) -> EditorState:
        self._state = self._state.model_copy(update=changes)
        for listener in self._listeners:
            listener(self._state)
        return self._state

    # ------------------------------------------------------------------
    # Transient UI state
    # ------------------------------------------------------------------

    def set_draft(self, text: str) -> None:
        self._commit(draft=text)

    def set_side(self, side: MessageSide) -> None:
        self._commit(side=MessageSide(side))

    def select_message(self, message_id: str | None) -> None:
        """Focus a message for reaction editing; None clears focus."""
        if message_id is not None and self._state.find_message(message_id) is None:
            return
        self._commit(selected_message_id=message_id)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def _next_message_id(self) -> str:
        taken = {m.id for m in self._state.messages}
        stamp = time.time_ns() // 1_000_000
        while str(stamp) in taken:
            stamp += 1
        return str(stamp)

    def add_message(
        self,
        kind: MessageType | str = MessageType.TEXT,
        content: str | None = None,
    ) -> Message | None:
        """Append a message sent from the current side.

        Args:
            kind: "text" takes the draft, "image" takes content,
                "like" uses the like glyph
            content: Image data URI for kind="image"

        Returns:
            The new message, or None when a text message has a blank draft
            or an image message has no image reference
        """
        kind = MessageType(kind)
        state = self._state
        if kind is MessageType.TEXT and not state.draft.strip():
            return None
        if kind is MessageType.IMAGE and not content:
            return None

        if kind is MessageType.TEXT:
            text = state.draft
        elif kind is MessageType.LIKE:
            text = LIKE_GLYPH
        else:
            text = content or ""

        message = Message(
            id=self._next_message_id(),
            text=text,
            sender_id=state.current_sender.id,
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            side=state.side,
            type=kind,
        )

        changes: dict[str, Any] = {"messages": state.messages + (message,)}
        if kind is MessageType.TEXT:
            changes["draft"] = ""
        self._commit(**changes)
        self._debug("debug", f"Added {kind.value} message {message.id}")
        return message

    def delete_message(self, message_id: str) -> bool:
        """Remove a message. Unknown ids are ignored."""
        state = self._state
        remaining = tuple(m for m in state.messages if m.id != message_id)
        if len(remaining) == len(state.messages):
            return False

        changes: dict[str, Any] = {"messages": remaining}
        if state.selected_message_id == message_id:
            changes["selected_message_id"] = None
        self._commit(**changes)
        self._debug("debug", f"Deleted message {message_id}")
        return True

    def update_reaction(self, message_id: str, emoji: str, names_raw: str) -> None:
        """Replace the reactor list of one emoji on one message.

        An empty list removes the emoji's group. Unknown ids are ignored.
        """
        names = parse_names(names_raw)
        state = self._state
        target = state.find_message(message_id)
        if target is None:
            return

        others = tuple(r for r in target.reactions if r.emoji != emoji)
        if names:
            reactions = others + (ReactionGroup(emoji=emoji, names=names),)
        else:
            reactions = others
        updated = target.model_copy(update={"reactions": reactions})

        self._commit(messages=tuple(
            updated if m.id == message_id else m for m in state.messages
        ))

    def quick_react(self, message_id: str) -> None:
        """Shortcut that sets the heart reaction to a placeholder reactor."""
        self.update_reaction(message_id, QUICK_REACT_EMOJI, QUICK_REACT_NAME)

    # ------------------------------------------------------------------
    # Participants
    # ------------------------------------------------------------------

    def update_participant(self, index: int, update: ParticipantUpdate) -> None:
        """Apply a SetName or SetAvatar update to participant 0 or 1.

        Raises:
            InvalidIndex: If index is not 0 or 1
        """
        _check_index(index)
        participants = list(self._state.participants)
        participants[index] = update.apply(participants[index])
        self._commit(participants=tuple(participants))

    def upload_image(
        self,
        data: bytes,
        target_index: int | None = None,
    ) -> "asyncio.Task[None]":
        """Decode an image file in the background and apply it.

        With a target index the image becomes that participant's avatar,
        otherwise it is appended as an image message.

        Args:
            data: Raw file contents
            target_index: Participant whose avatar to replace

        Returns:
            The background task; awaiting it re-raises ImageDecodeError

        Raises:
            InvalidIndex: If target_index is given and not 0 or 1
        """
        if target_index is not None:
            _check_index(target_index)

        async def _decode_and_apply() -> None:
            uri = await asyncio.to_thread(encode_data_uri, data)
            if target_index is None:
                self.add_message(MessageType.IMAGE, uri)
            else:
                self.update_participant(target_index, SetAvatar(uri))
            self._debug("info", f"Applied uploaded image ({len(data):,} bytes)")

        return asyncio.create_task(_decode_and_apply())

    async def save_participants(self) -> Toast:
        """Persist the current pair and report the outcome as a toast."""
        try:
            await self._store.save(self._state.participants)
            toast = Toast(SAVE_OK, ToastKind.SUCCESS)
        except QuotaExceeded:
            toast = Toast(SAVE_TOO_LARGE, ToastKind.ERROR)
        except PersistError:
            toast = Toast(SAVE_FAILED, ToastKind.ERROR)
        self._notifier.show(toast)
        return toast

    async def reset_participants(self) -> Toast:
        """Restore the default pair and clear the saved copy.

        The in-memory pair is reset even when clearing the store fails.
        """
        self._commit(participants=DEFAULT_PARTICIPANTS)
        try:
            await self._store.reset()
            toast = Toast(RESET_OK, ToastKind.SUCCESS)
        except PersistError as e:
            self._debug("error", str(e))
            toast = Toast(RESET_FAILED, ToastKind.ERROR)
        self._notifier.show(toast)
        return toast


def _check_index(index: int) -> None:
    if index not in (0, 1):
        raise InvalidIndex(index)
