"""Import form rendering."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from ..state import ImportState
from .common import ICONS, render_message

EXAMPLE_URL = "https://open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M"

INSTRUCTIONS = [
    "Open Spotify and navigate to the playlist you want to import",
    "Click the three dots menu (⋯) next to the playlist name",
    'Select "Share" → "Copy link to playlist"',
    "Paste the URL with: import <url>",
]


def render_import(state: ImportState) -> RenderableType:
    parts: list[RenderableType] = [
        Text("Import Spotify Playlist", style="bold cyan"),
        Text("Paste a Spotify playlist URL to import it into your library", style="dim"),
    ]

    auth = Text()
    auth.append("Make sure you're authenticated with both platforms:\n")
    auth.append(f"{ICONS['spotify']} Connect Spotify  ", style="bold green")
    auth.append("(auth spotify)\n", style="dim")
    auth.append(f"{ICONS['youtube']} Connect YouTube  ", style="bold red")
    auth.append("(auth youtube)", style="dim")
    parts.append(Panel(auth, title="Authentication", border_style="blue"))

    form = Text()
    form.append("Spotify Playlist URL: ", style="bold")
    form.append(state.url or "https://open.spotify.com/playlist/...", style="" if state.url else "dim")
    form.append(f"\nExample: {EXAMPLE_URL}\n", style="dim")
    if state.loading:
        form.append("Importing...", style="yellow")
    else:
        form.append(
            "Import Playlist",
            style="bold" if state.can_submit else "dim",
        )
    parts.append(Panel(form, title="Import Playlist", border_style="cyan"))

    message = render_message(
        error=state.error,
        success="Playlist imported successfully!" if state.success else None,
    )
    if message:
        parts.append(message)

    steps = Text()
    for idx, step in enumerate(INSTRUCTIONS, start=1):
        steps.append(f"{idx}. {step}\n")
    parts.append(Panel(steps, title="How to get a Spotify playlist URL", border_style="dim"))

    return Group(*parts)
