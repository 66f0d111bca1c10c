"""Shared rendering helpers: icons, badges, loading/empty/error blocks."""

from typing import Optional

from rich.panel import Panel
from rich.text import Text

from ...domain.models import Platform

ICONS = {
    "spotify": "🎵",
    "youtube": "📺",
    "playlist": "📋",
    "song": "🎵",
    "import": "📥",
    "duration": "⏱️",
    "error": "❌",
    "success": "✅",
}

PLATFORM_STYLES = {
    Platform.SPOTIFY: "bold green",
    Platform.YOUTUBE: "bold red",
}


def platform_badge(platform: Platform) -> Text:
    """Colored platform tag, e.g. [spotify]."""
    platform = Platform(platform)
    return Text(f"[{platform.value}]", style=PLATFORM_STYLES[platform])


def render_loading(message: str) -> Text:
    return Text(message, style="dim italic")


def render_empty_state(icon: str, title: str, hint: str) -> Panel:
    """Distinct empty-state block (not an error)."""
    body = Text()
    body.append(f"{icon}\n", style="bold")
    body.append(f"{title}\n", style="bold")
    body.append(hint, style="dim")
    return Panel(body, border_style="dim", padding=(1, 2))


def render_message(error: Optional[str] = None, success: Optional[str] = None) -> Optional[Text]:
    """Inline status line; error wins over success."""
    if error:
        return Text(f"{ICONS['error']} {error}", style="red")
    if success:
        return Text(f"{ICONS['success']} {success}", style="green")
    return None
