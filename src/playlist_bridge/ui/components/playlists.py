"""Playlist list rendering: filter bar and playlist cards."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...domain.conversion import convert_label
from ...domain.formatting import format_duration
from ...domain.models import Playlist
from ...domain.urls import playlist_link
from ..selectors import song_preview
from ..state import PLATFORM_FILTERS, PlaylistListState
from .common import ICONS, platform_badge, render_empty_state, render_loading, render_message

FILTER_LABELS = {"all": "All", "spotify": "Spotify", "youtube": "YouTube"}


def render_filter_bar(active: str, counts: dict[str, int]) -> Text:
    bar = Text()
    for key in PLATFORM_FILTERS:
        label = f" {FILTER_LABELS[key]} ({counts.get(key, 0)}) "
        bar.append(label, style="reverse bold" if key == active else "dim")
        bar.append(" ")
    return bar


def render_playlist_card(playlist: Playlist, busy: bool, preview_limit: int = 3) -> Panel:
    body = Table.grid(padding=(0, 1))
    body.add_column()

    if playlist.description:
        body.add_row(Text(playlist.description, style="italic"))
    body.add_row(
        Text(
            f"{ICONS['song']} {playlist.song_count} songs   "
            f"{ICONS['duration']} {playlist.total_minutes} min"
        )
    )

    shown, remaining = song_preview(playlist, preview_limit)
    for song in shown:
        line = Text("  ")
        line.append(song.title, style="bold")
        line.append(f" - {song.artist}  ", style="dim")
        line.append(format_duration(song.duration))
        body.add_row(line)
    if remaining > 0:
        body.add_row(Text(f"  +{remaining} more songs", style="dim"))

    action = Text()
    if busy:
        action.append("Converting...", style="yellow")
    else:
        action.append(convert_label(playlist), style="bold")
        action.append(f"  (convert {playlist.id})", style="dim")
    action.append(f"   Delete (delete {playlist.id})", style="dim")
    body.add_row(action)

    if playlist.external_id:
        body.add_row(
            Text(
                f"Open in {playlist.platform.label}: "
                f"{playlist_link(playlist.platform, playlist.external_id)}",
                style="underline blue",
            )
        )

    title = Text(f"{playlist.name} ")
    title.append_text(platform_badge(playlist.platform))
    return Panel(body, title=title, title_align="left", subtitle=f"id: {playlist.id}")


def render_playlists(
    state: PlaylistListState,
    visible: list[Playlist],
    counts: dict[str, int],
    preview_limit: int = 3,
) -> RenderableType:
    if state.loading:
        return render_loading("Loading playlists...")

    parts: list[RenderableType] = [
        Text("Your Playlists", style="bold cyan"),
        render_filter_bar(state.platform_filter, counts),
    ]

    message = render_message(error=state.action_error or state.error)
    if message:
        parts.append(message)

    if state.last_result and state.last_result.message:
        parts.append(Text(state.last_result.message, style="green"))

    if not visible:
        parts.append(
            render_empty_state(
                ICONS["playlist"],
                "No playlists found",
                "Start by importing a Spotify playlist or create a new one",
            )
        )
        return Group(*parts)

    for playlist in visible:
        parts.append(
            render_playlist_card(playlist, state.is_converting(playlist.id), preview_limit)
        )
    return Group(*parts)
