"""Main Textual TUI application.

Orchestrates the UI components and turns user interaction into editor
session operations. Every session snapshot is projected once and the
result is handed to the widgets.
"""

from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Static

from ..conversation import (
    EditorSession,
    EditorState,
    ImageDecodeError,
    InvalidIndex,
    MessageSide,
    MessageType,
    SetName,
    Toast,
    ToastKind,
)
from ..render import ChatView, project
from .config import LogLevel
from .screens import ConfirmationScreen, ImagePathScreen
from .styles import APP_CSS
from .themes import MESSENGER_LIGHT
from .widgets import (
    ChatPreview,
    ComposerSection,
    DebugPanel,
    MessageRow,
    ParticipantCard,
    ParticipantsSection,
    ReactionManager,
    ToastBar,
)


class MockupEditorApp(App):
    """Textual editor for fake chat screenshots."""

    CSS = APP_CSS
    TITLE = "Chat Mockup"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+s", "save_participants", "Save Participants"),
        Binding("ctrl+j", "send", "Send", priority=True),
        Binding("ctrl+l", "send_like", "Like"),
        Binding("escape", "clear_selection", "Deselect"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
    ]

    def __init__(self, session: EditorSession, log_level: str | None = None) -> None:
        super().__init__()
        self._session = session
        self._log_level = log_level

    @property
    def session(self) -> EditorSession:
        return self._session

    def get_theme_variable_defaults(self) -> dict[str, str]:
        """Custom CSS variables, needed before the messenger theme is active."""
        return {"bubble-background": MESSENGER_LIGHT.variables["bubble-background"]}

    def compose(self) -> ComposeResult:
        view = project(self._session.state)

        with VerticalScroll(id="control-panel"):
            yield ParticipantsSection(view.participants, id="participants")
            yield ComposerSection(view, id="composer")
            yield ReactionManager(id="reaction-manager")

        with Center(id="preview-area"):
            with Vertical(id="phone"):
                yield Static(f"<  {view.title}", id="phone-header")
                yield ChatPreview(id="chat-preview")
                yield Static("+  Type a message...", id="phone-footer")

        yield ToastBar(id="toast")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(MESSENGER_LIGHT)
        self.theme = "messenger-light"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route debug messages to the log panel."""
            log_panel.log(component, message, LogLevel.from_string(level))

        self._session.set_debug_callback(debug_callback)
        self._session.subscribe(self._render_state)
        self._session.notifier.subscribe(self.query_one("#toast", ToastBar).show_toast)

        self._render_state(self._session.state)
        self.query_one("#composer", ComposerSection).focus_draft()

    def _render_state(self, state: EditorState) -> None:
        view: ChatView = project(state)
        self.query_one("#participants", ParticipantsSection).update_participants(view.participants)
        self.query_one("#composer", ComposerSection).update_view(view)
        self.query_one("#reaction-manager", ReactionManager).update_editor(view.reaction_editor)
        self.query_one("#phone-header", Static).update(f"<  {view.title}")
        self.query_one("#chat-preview", ChatPreview).show(view)

    def _log(self, level: int, message: str) -> None:
        self.query_one("#debug-panel", DebugPanel).log("TUI", message, level)

    # ------------------------------------------------------------------
    # Widget messages
    # ------------------------------------------------------------------

    def on_participant_card_name_changed(self, event: ParticipantCard.NameChanged) -> None:
        self._session.update_participant(event.index, SetName(event.value))

    def on_participant_card_avatar_requested(
        self, event: ParticipantCard.AvatarRequested
    ) -> None:
        index = event.index

        def _picked(path: Path | None) -> None:
            if path is not None:
                self._upload(path, index)

        self.push_screen(ImagePathScreen(f"Avatar for participant {index + 1}"), _picked)

    def on_composer_section_draft_changed(self, event: ComposerSection.DraftChanged) -> None:
        self._session.set_draft(event.text)

    def on_reaction_manager_reaction_edited(
        self, event: ReactionManager.ReactionEdited
    ) -> None:
        self._session.update_reaction(event.message_id, event.emoji, event.names_raw)

    def on_message_row_selected(self, event: MessageRow.Selected) -> None:
        self._session.select_message(event.message_id)

    def on_message_row_quick_react(self, event: MessageRow.QuickReact) -> None:
        self._session.quick_react(event.message_id)

    def on_message_row_delete_requested(self, event: MessageRow.DeleteRequested) -> None:
        self._session.delete_message(event.message_id)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "save-btn":
            self.action_save_participants()
        elif button_id == "reset-btn":
            self._confirm_reset()
        elif button_id.startswith("side-"):
            self._session.set_side(MessageSide.for_index(int(button_id[5:])))
        elif button_id == "send-btn":
            self.action_send()
        elif button_id == "like-btn":
            self.action_send_like()
        elif button_id == "image-btn":
            self._pick_message_image()
        elif button_id == "done-btn":
            self.action_clear_selection()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_send(self) -> None:
        """Send the draft as a text message."""
        self._session.add_message(MessageType.TEXT)

    def action_send_like(self) -> None:
        self._session.add_message(MessageType.LIKE)

    def action_clear_selection(self) -> None:
        self._session.select_message(None)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.toggle()

    @work(exclusive=True, group="persistence")
    async def action_save_participants(self) -> None:
        """Save the participant pair as the start-up default."""
        await self._session.save_participants()

    def _confirm_reset(self) -> None:
        def _confirmed(confirmed: bool | None) -> None:
            if confirmed:
                self._reset_participants()

        self.push_screen(
            ConfirmationScreen(
                "Reset participants",
                "Restore the default participants and forget the saved ones?",
            ),
            _confirmed,
        )

    @work(exclusive=True, group="persistence")
    async def _reset_participants(self) -> None:
        await self._session.reset_participants()

    def _pick_message_image(self) -> None:
        def _picked(path: Path | None) -> None:
            if path is not None:
                self._upload(path, None)

        self.push_screen(ImagePathScreen("Send an image"), _picked)

    @work(group="uploads")
    async def _upload(self, path: Path, target_index: int | None) -> None:
        """Read an image file and hand it to the session."""
        try:
            data = path.read_bytes()
            await self._session.upload_image(data, target_index)
        except (ImageDecodeError, InvalidIndex, OSError) as e:
            self._log(LogLevel.ERROR, f"Upload failed: {e}")
            self._session.notifier.show(Toast(f"Could not load image: {path.name}", ToastKind.ERROR))


async def run_textual_tui(session: EditorSession, log_level: str | None = None) -> None:
    """Run the Textual editor.

    Args:
        session: Opened editor session (participants already loaded)
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = MockupEditorApp(session=session, log_level=log_level)
    await app.run_async()
