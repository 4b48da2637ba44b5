"""Rich rendering of a projected conversation.

Used by the command line preview; the Textual editor draws the same
view models with widgets instead.
"""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from ..conversation.errors import ImageDecodeError
from ..conversation.images import decode_data_uri, is_data_uri
from .models import BubbleKind, ChatView, MessageView


def avatar_initials(name: str) -> str:
    """Up to two initials for an avatar placeholder."""
    letters = [word[0] for word in name.split() if word]
    return "".join(letters[:2]).upper() or "?"


def image_label(content: str) -> str:
    """Describe an image message body without drawing it."""
    if is_data_uri(content):
        try:
            img = decode_data_uri(content)
        except ImageDecodeError:
            return "[image]"
        return f"[image {img.width}x{img.height}]"
    return f"[image {content}]"


def render_reactions(view: MessageView) -> Text:
    pills = Text()
    for i, pill in enumerate(view.reactions):
        if i:
            pills.append("  ")
        pills.append(
            f" {pill.emoji} {pill.label} ",
            style=f"#334155 on {pill.background}",
        )
    return pills


def render_message(view: MessageView) -> RenderableType:
    header = Text()
    header.append(f"({avatar_initials(view.sender_name)}) ", style="bold #2563eb")
    header.append(view.sender_name, style="bold #334155")
    header.append(f"  {view.timestamp}", style="dim")

    if view.bubble is BubbleKind.GLYPH:
        body: RenderableType = Text(view.content, style="bold")
    elif view.bubble is BubbleKind.IMAGE:
        body = Text(image_label(view.content), style="italic #64748b")
    else:
        body = Text(view.content, style="#0f172a on #f5f6f7")

    parts: list[RenderableType] = [header, body]
    if view.reactions:
        parts.append(render_reactions(view))
    if view.selected:
        return Panel(Group(*parts), border_style="#3b82f6", padding=(0, 1))
    return Group(*parts, Text(""))


def render_chat(view: ChatView) -> Panel:
    """Build a phone-frame panel for the whole conversation."""
    rows = [render_message(m) for m in view.messages]
    if not rows:
        rows = [Text("No messages yet", style="dim")]
    return Panel(
        Group(*rows),
        title=f"< {view.title}",
        title_align="left",
        subtitle="Type a message...",
        border_style="#cbd5e1",
        width=64,
        padding=(1, 2),
    )
