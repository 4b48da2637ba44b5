"""Image display for the TUI.

Hidden design decisions:
- Image rendering approach (textual-image picks Sixel, TGP or halfcells)
- Inline data URIs are decoded in memory; remote URLs are never fetched
  and show an initials placeholder instead
"""

from textual.widget import Widget
from textual.widgets import Static
from textual_image.widget import Image as TextualImageWidget

from ..conversation.errors import ImageDecodeError
from ..conversation.images import decode_data_uri, is_data_uri
from ..render.console import avatar_initials


def image_widget(source: str, classes: str = "") -> Widget | None:
    """Build an image widget for a data URI, or None if it can't be shown."""
    if not is_data_uri(source):
        return None
    try:
        picture = decode_data_uri(source)
    except ImageDecodeError:
        return None
    return TextualImageWidget(picture, classes=classes)


def avatar_widget(name: str, source: str) -> Widget:
    """Avatar picture, or the sender's initials when it can't be drawn."""
    widget = image_widget(source, classes="avatar")
    if widget is not None:
        return widget
    return Static(avatar_initials(name), classes="avatar avatar-initials")


def message_image_widget(source: str) -> Widget:
    """Inline picture of an image message."""
    widget = image_widget(source, classes="message-image")
    if widget is not None:
        return widget
    return Static("[image unavailable]", classes="message-image-placeholder")
