"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout:
- Left column: control panel (participants, composer, reactions)
- Right column: phone-frame preview with header and fake input bar
- Toast in the bottom-right corner, log panel docked at the bottom
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: horizontal;
    layers: base overlay;
    background: $background;
}

#control-panel {
    width: 1fr;
    max-width: 60;
    height: 100%;
    background: $surface;
    border-right: solid $border;
    padding: 0 1;
}

#control-panel > Vertical {
    height: auto;
    margin: 1 0;
    padding: 0 1;
    background: $panel;
    border: round $border;
    border-title-color: $primary;
    border-title-style: bold;
}

.section-buttons {
    height: auto;
    margin-top: 1;

    Button {
        width: 1fr;
        margin-right: 1;
    }
}

/* ============================================
   Participant Cards
   ============================================ */
.participant-card {
    height: auto;
    margin: 1 0 0 0;
    align: left middle;

    .avatar-slot {
        width: 6;
        height: auto;
    }

    .participant-name {
        width: 1fr;
    }

    .avatar-btn {
        min-width: 10;
    }
}

.avatar {
    width: 4;
    height: 2;
    margin-right: 1;
}

.avatar-initials {
    background: $primary;
    color: white;
    text-style: bold;
    content-align: center middle;
}

/* ============================================
   Composer
   ============================================ */
.side-picker {
    height: auto;
    margin-top: 1;

    .side-btn {
        width: 1fr;
        margin-right: 1;
    }
}

#draft {
    height: 5;
    margin-top: 1;
    border: round $border;

    &:focus {
        border: round $primary;
    }
}

/* ============================================
   Reaction Manager
   ============================================ */
#reaction-manager {
    background: $primary 8%;
    border: round $primary 40%;
}

.reaction-hint {
    color: $text-muted;
    text-align: center;
    padding: 1 0;
}

.reaction-preview {
    color: $primary;
    text-style: italic;
    margin-top: 1;
}

.reaction-label {
    text-style: bold;
    margin-top: 1;
}

.done-btn {
    width: 100%;
    margin: 1 0;
}

/* ============================================
   Phone Preview
   ============================================ */
#preview-area {
    width: 2fr;
    height: 100%;
    align: center middle;
}

#phone {
    width: 64;
    max-width: 100%;
    height: 100%;
    max-height: 44;
    background: $surface;
    border: round $border;
}

#phone-header {
    height: 3;
    padding: 1 2;
    border-bottom: solid $border;
    text-style: bold;
}

#phone-footer {
    height: 3;
    padding: 1 2;
    border-top: solid $border;
    color: $text-muted;
}

#chat-preview {
    height: 1fr;
    padding: 1 1;
    scrollbar-gutter: stable;
}

.empty-chat {
    color: $text-muted;
    text-align: center;
}

/* ============================================
   Message Rows
   ============================================ */
.message-row {
    height: auto;
    margin-bottom: 1;
    border: blank;

    &.-selected {
        border: round $accent;
    }

    .row-main {
        height: auto;
    }

    .row-body {
        width: 1fr;
        height: auto;
    }

    .row-tools {
        display: none;
        width: auto;
        height: 3;
        dock: right;

        Button {
            min-width: 5;
            margin-left: 1;
        }
    }

    &:hover .row-tools {
        display: block;
    }
}

.sender-name {
    color: #334155;
    text-style: bold;
}

.bubble-text {
    width: auto;
    max-width: 100%;
    padding: 0 1;
    background: $bubble-background;
}

.bubble-glyph {
    width: auto;
    text-style: bold;
    padding: 1 0;
}

.message-image {
    width: 24;
    height: auto;
}

.message-image-placeholder {
    color: $text-muted;
    text-style: italic;
}

.reaction-pills {
    height: auto;
    margin-top: 1;
}

.reaction-pill {
    width: auto;
    height: 3;
    padding: 0 1;
    margin-right: 1;
    color: #334155;
}

/* ============================================
   Toast and Log
   ============================================ */
ToastBar {
    dock: bottom;
    offset: -2 -2;
    width: auto;
    max-width: 50;
    padding: 1 2;
    color: white;
    text-style: bold;
    layer: overlay;

    &.-success {
        background: $success;
    }

    &.-error {
        background: $error;
    }
}

#debug-panel {
    dock: bottom;
    height: 12;
    border: round $secondary;
    border-title-color: $secondary;
    background: $surface;
}
"""
