"""Terminal UI module for chatmock.

Provides a Textual-based editor for chat mockups.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (participant cards, composer, message rows, toast, log)
- images.py: Inline image rendering (avatars, image messages)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- screens.py: Modal dialogs (confirmation, image path)
- config.py: UI constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import MockupEditorApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatPreview, DebugPanel, MessageRow, ReactionManager, ToastBar

__all__ = [
    "ChatPreview",
    "DebugPanel",
    "LogLevel",
    "MessageRow",
    "MockupEditorApp",
    "ReactionManager",
    "ToastBar",
    "run_textual_tui",
]
