"""Dashboard rendering: totals, quick links and recent playlists."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...domain.models import Playlist
from ..selectors import DashboardStats
from ..state import DashboardState
from .common import ICONS, platform_badge, render_loading, render_message

QUICK_ACTIONS = [
    ("/import", f"{ICONS['import']} Import Spotify Playlist"),
    ("/playlists", f"{ICONS['playlist']} View All Playlists"),
    ("/songs", f"{ICONS['song']} Manage Songs"),
]


def render_dashboard(
    state: DashboardState, stats: DashboardStats, recent: list[Playlist]
) -> RenderableType:
    if state.loading:
        return render_loading("Loading dashboard...")

    parts: list[RenderableType] = [
        Text("Dashboard", style="bold cyan"),
        Text("Manage your Spotify to YouTube playlist conversions", style="dim"),
    ]

    error = render_message(error=state.error)
    if error:
        parts.append(error)

    totals = Table.grid(padding=(0, 4))
    for _ in range(4):
        totals.add_column(justify="center")
    totals.add_row(
        Text(str(stats.total_playlists), style="bold"),
        Text(str(stats.total_songs), style="bold"),
        Text(str(stats.spotify_playlists), style="bold green"),
        Text(str(stats.youtube_playlists), style="bold red"),
    )
    totals.add_row("Total Playlists", "Total Songs", "Spotify Playlists", "YouTube Playlists")
    parts.append(Panel(totals, title="Stats", border_style="cyan"))

    actions = Text()
    for path, label in QUICK_ACTIONS:
        actions.append(f"{label}  ", style="bold")
        actions.append(f"(go {path})\n", style="dim")
    parts.append(Panel(actions, title="Quick Actions", border_style="blue"))

    parts.append(Panel(_render_recent(recent), title="Recent Playlists", border_style="magenta"))
    return Group(*parts)


def _render_recent(recent: list[Playlist]) -> RenderableType:
    if not recent:
        return Text("No playlists yet. Start by importing one!", style="dim")

    table = Table.grid(padding=(0, 2))
    table.add_column()
    table.add_column()
    table.add_column(justify="right")
    for playlist in recent:
        table.add_row(
            Text(playlist.name, style="bold"),
            Text(f"{playlist.platform.value} • {playlist.song_count} songs", style="dim"),
            platform_badge(playlist.platform),
        )
    return table
