"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Participant card and composer layout
- Reaction manager inputs
- Message row rendering (avatar, bubble, reaction pills)
- Toast display
- Log rendering and level filtering

Widgets never touch the editor session. They draw view models from the
render projection and post messages that the app turns into session
operations.
"""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input, RichLog, Static, TextArea

from ..conversation.notifications import Toast
from ..render.models import (
    BubbleKind,
    ChatView,
    MessageView,
    ParticipantView,
    ReactionEditorView,
    ReactionPill,
)
from .config import LOG_TIMESTAMP_FORMAT, LogLevel
from .images import avatar_widget, message_image_widget


class ParticipantCard(Horizontal):
    """Avatar, name input and avatar upload button for one participant."""

    class NameChanged(Message):
        def __init__(self, index: int, value: str) -> None:
            super().__init__()
            self.index = index
            self.value = value

    class AvatarRequested(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, participant: ParticipantView, *args, **kwargs) -> None:
        super().__init__(*args, classes="participant-card", **kwargs)
        self._participant = participant

    @property
    def index(self) -> int:
        return self._participant.index

    def compose(self) -> ComposeResult:
        p = self._participant
        with Vertical(classes="avatar-slot"):
            yield avatar_widget(p.name, p.avatar)
        yield Input(value=p.name, classes="participant-name")
        yield Button("Avatar", classes="avatar-btn").with_tooltip("Upload an avatar image")

    def update_participant(self, participant: ParticipantView) -> None:
        """Sync the card with a new projection."""
        previous = self._participant
        self._participant = participant

        name_input = self.query_one(".participant-name", Input)
        if not name_input.has_focus and name_input.value != participant.name:
            name_input.value = participant.name

        if previous.avatar != participant.avatar:
            slot = self.query_one(".avatar-slot", Vertical)
            slot.remove_children()
            slot.mount(avatar_widget(participant.name, participant.avatar))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self._participant.name:
            self.post_message(self.NameChanged(self.index, event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.AvatarRequested(self.index))


class ParticipantsSection(Vertical):
    """Both participant cards plus save/reset buttons."""

    BORDER_TITLE = "Participants"

    def __init__(self, participants: list[ParticipantView], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._initial = participants

    def compose(self) -> ComposeResult:
        for participant in self._initial:
            yield ParticipantCard(participant)
        with Horizontal(classes="section-buttons"):
            yield Button("Save default", id="save-btn", variant="success")
            yield Button("Reset", id="reset-btn")

    def update_participants(self, participants: list[ParticipantView]) -> None:
        for card, participant in zip(self.query(ParticipantCard), participants):
            card.update_participant(participant)


class ComposerSection(Vertical):
    """Side picker, draft area and send/like/image buttons."""

    BORDER_TITLE = "Add message"

    class DraftChanged(Message):
        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    def __init__(self, view: ChatView, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._view = view

    def compose(self) -> ComposeResult:
        with Horizontal(classes="side-picker"):
            for p in self._view.participants:
                yield Button(
                    p.short_name,
                    id=f"side-{p.index}",
                    variant="primary" if p.active else "default",
                    classes="side-btn",
                )
        text_area = TextArea(self._view.composer.draft, id="draft", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        with Horizontal(classes="section-buttons"):
            yield Button("Send", id="send-btn", variant="primary").with_tooltip(
                "Send the draft (Ctrl+J)"
            )
            yield Button("👍", id="like-btn").with_tooltip("Send a like sticker")
            yield Button("Image", id="image-btn").with_tooltip("Send an image")

    def update_view(self, view: ChatView) -> None:
        self._view = view
        for p in view.participants:
            button = self.query_one(f"#side-{p.index}", Button)
            button.label = p.short_name
            button.variant = "primary" if p.active else "default"
        draft = self.query_one("#draft", TextArea)
        if draft.text != view.composer.draft:
            draft.text = view.composer.draft
        self.query_one("#send-btn", Button).disabled = not view.composer.can_send

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        if event.text_area.text != self._view.composer.draft:
            self.post_message(self.DraftChanged(event.text_area.text))

    def focus_draft(self) -> None:
        self.query_one("#draft", TextArea).focus()


class ReactionManager(Vertical):
    """Reactor-name inputs for the selected message."""

    BORDER_TITLE = "Reactions"

    class ReactionEdited(Message):
        def __init__(self, message_id: str, emoji: str, names_raw: str) -> None:
            super().__init__()
            self.message_id = message_id
            self.emoji = emoji
            self.names_raw = names_raw

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._editor: ReactionEditorView | None = None

    def compose(self) -> ComposeResult:
        yield Static("Click a message to add reactions", classes="reaction-hint")

    def update_editor(self, editor: ReactionEditorView | None) -> None:
        previous = self._editor
        self._editor = editor
        same_message = (
            previous is not None
            and editor is not None
            and previous.message_id == editor.message_id
        )
        if same_message:
            self.query_one(".reaction-preview", Static).update(f'Editing: "{editor.preview}"')
            for field, name_input in zip(editor.fields, self.query(".reaction-input").results(Input)):
                if not name_input.has_focus and name_input.value != field.value:
                    name_input.value = field.value
            return
        if previous is None and editor is None:
            return

        self.remove_children()
        if editor is None:
            self.mount(Static("Click a message to add reactions", classes="reaction-hint"))
            return
        widgets = [Static(f'Editing: "{editor.preview}"', classes="reaction-preview")]
        for field in editor.fields:
            widgets.append(Static(f"{field.emoji} reacted by:", classes="reaction-label"))
            widgets.append(Input(
                value=field.value,
                placeholder="Name 1, Name 2...",
                name=field.emoji,
                classes="reaction-input",
            ))
        widgets.append(Button("Done", id="done-btn", classes="done-btn"))
        self.mount(*widgets)

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if self._editor is None or event.input.name is None:
            return
        current = next(
            (f.value for f in self._editor.fields if f.emoji == event.input.name), ""
        )
        if event.value != current:
            self.post_message(
                self.ReactionEdited(self._editor.message_id, event.input.name, event.value)
            )


class MessageRow(Vertical):
    """One message of the preview: avatar, name, bubble, reaction pills.

    Clicking the row selects it; the hover tools quick-react or delete.
    """

    class Selected(Message):
        def __init__(self, message_id: str) -> None:
            super().__init__()
            self.message_id = message_id

    class QuickReact(Message):
        def __init__(self, message_id: str) -> None:
            super().__init__()
            self.message_id = message_id

    class DeleteRequested(Message):
        def __init__(self, message_id: str) -> None:
            super().__init__()
            self.message_id = message_id

    def __init__(self, view: MessageView, *args, **kwargs) -> None:
        classes = "message-row -selected" if view.selected else "message-row"
        super().__init__(*args, classes=classes, **kwargs)
        self._view = view

    @property
    def message_id(self) -> str:
        return self._view.id

    def compose(self) -> ComposeResult:
        view = self._view
        with Horizontal(classes="row-main"):
            yield avatar_widget(view.sender_name, view.sender_avatar)
            with Vertical(classes="row-body"):
                yield Static(view.sender_name, classes="sender-name")
                yield self._bubble()
                if view.reactions:
                    with Horizontal(classes="reaction-pills"):
                        for pill in view.reactions:
                            yield reaction_pill(pill)
            with Horizontal(classes="row-tools"):
                yield Button("❤️", classes="quick-react-btn")
                yield Button("🗑", classes="delete-btn", variant="error")

    def _bubble(self) -> Widget:
        view = self._view
        if view.bubble is BubbleKind.IMAGE:
            return message_image_widget(view.content)
        if view.bubble is BubbleKind.GLYPH:
            return Static(view.content, classes="bubble bubble-glyph")
        return Static(view.content, classes="bubble bubble-text", markup=False)

    def on_click(self, event: Click) -> None:
        event.stop()
        if isinstance(event.widget, Button):
            return
        self.post_message(self.Selected(self.message_id))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("quick-react-btn"):
            self.post_message(self.QuickReact(self.message_id))
        else:
            self.post_message(self.DeleteRequested(self.message_id))


def reaction_pill(pill: ReactionPill) -> Static:
    widget = Static(f"{pill.emoji} {pill.label}", classes="reaction-pill", markup=False)
    widget.styles.background = pill.background
    widget.styles.border = ("round", pill.border)
    return widget


class ChatPreview(VerticalScroll):
    """Scrollable message list of the phone mockup.

    Rebuilds its rows whenever the projected messages change and scrolls
    to the newest message when the message sequence changes.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[MessageView] = []

    def show(self, view: ChatView) -> None:
        if view.messages == self._messages:
            return
        old_ids = [m.id for m in self._messages]
        new_ids = [m.id for m in view.messages]
        self._messages = list(view.messages)

        self.remove_children()
        if view.messages:
            self.mount(*(MessageRow(m) for m in view.messages))
        else:
            self.mount(Static("No messages yet", classes="empty-chat"))

        if new_ids != old_ids:
            self.call_after_refresh(self.scroll_end, animate=False)


class ToastBar(Static):
    """Bottom-right notification; hidden when no toast is active."""

    def on_mount(self) -> None:
        self.display = False

    def show_toast(self, toast: Toast | None) -> None:
        self.remove_class("-success", "-error")
        if toast is None:
            self.display = False
            return
        self.update(toast.message)
        self.add_class(f"-{toast.kind.value}")
        self.display = True


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, Storage)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "blue",
            "Session": "green",
            "Storage": "magenta",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {message}"
        )

    def debug(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
