"""Modal screens for the TUI.

This module hides the design decisions about:
- Confirmation dialog appearance (CSS, layout)
- How an image file is picked (typed path)
- Keyboard shortcuts for dialogs

To change how dialogs look, modify only this file.
"""

from pathlib import Path

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

DIALOG_CSS = """
    align: center middle;
    background: $background 70%;

    .dialog {
        width: 60;
        height: auto;
        max-height: 20;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    .dialog-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    .dialog-prompt {
        width: 100%;
        text-align: center;
        padding: 1 2;
        color: $foreground;
    }

    .dialog-error {
        color: $error;
        height: auto;
    }

    .dialog-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    .dialog-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
"""


class ConfirmationScreen(ModalScreen[bool]):
    """Yes/No confirmation dialog."""

    DEFAULT_CSS = "ConfirmationScreen {" + DIALOG_CSS + "}"

    BINDINGS = [
        Binding("y", "confirm_yes", "Yes", show=False),
        Binding("n", "confirm_no", "No", show=False),
        Binding("escape", "confirm_no", "Cancel", show=False),
    ]

    def __init__(self, title: str, prompt: str) -> None:
        super().__init__()
        self._title = title
        self._prompt = prompt

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static(self._title, classes="dialog-title")
            yield Static(self._prompt, classes="dialog-prompt")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Yes", id="btn-yes", variant="success")
                yield Button("No", id="btn-no", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-yes")

    def action_confirm_yes(self) -> None:
        self.dismiss(True)

    def action_confirm_no(self) -> None:
        self.dismiss(False)


class ImagePathScreen(ModalScreen[Path | None]):
    """Ask for the path of an image file to upload.

    Dismisses with the resolved path, or None when cancelled.
    """

    DEFAULT_CSS = "ImagePathScreen {" + DIALOG_CSS + "}"

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, title: str) -> None:
        super().__init__()
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static(self._title, classes="dialog-title")
            yield Input(placeholder="Path to an image file", id="image-path")
            yield Static("", id="image-path-error", classes="dialog-error")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Upload", id="btn-upload", variant="primary")
                yield Button("Cancel", id="btn-cancel")

    def on_mount(self) -> None:
        self.query_one("#image-path", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-upload":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _submit(self) -> None:
        raw = self.query_one("#image-path", Input).value.strip()
        if not raw:
            return
        path = Path(raw).expanduser()
        if not path.is_file():
            self.query_one("#image-path-error", Static).update(f"No such file: {path}")
            return
        self.dismiss(path)
