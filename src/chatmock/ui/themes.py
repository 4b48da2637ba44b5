"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

The preview imitates a light enterprise messenger (slate greys, blue
accent), so the editor uses a matching light theme.
"""

from textual.theme import Theme

MESSENGER_LIGHT = Theme(
    name="messenger-light",
    primary="#2563eb",      # Blue 600 - buttons, selection ring
    secondary="#64748b",    # Slate 500
    accent="#3b82f6",       # Blue 500 - highlights
    foreground="#0f172a",   # Slate 900 text
    background="#f1f5f9",   # Slate 100 page
    success="#22c55e",      # Green 500 - success toast
    warning="#f97316",      # Orange 500
    error="#ef4444",        # Red 500 - error toast
    surface="#ffffff",      # Panels and phone frame
    panel="#f8fafc",        # Slate 50 - control sections
    dark=False,
    variables={
        "border": "#e2e8f0",
        "border-blurred": "#e2e8f0",

        "scrollbar": "#cbd5e1",
        "scrollbar-hover": "#94a3b8",
        "scrollbar-active": "#2563eb",
        "scrollbar-background": "#f8fafc",

        "footer-foreground": "#334155",
        "footer-background": "#e2e8f0",
        "footer-key-foreground": "#2563eb",

        "text-muted": "#94a3b8",

        # Chat bubble grey of the preview
        "bubble-background": "#f5f6f7",

        "input-selection-background": "#3b82f6 30%",
        "button-color-foreground": "#ffffff",
    },
)
