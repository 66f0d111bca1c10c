"""Song manager rendering: searchable table and the song detail overlay."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...domain.formatting import format_duration, format_timestamp, or_not_available
from ...domain.models import Platform, Song
from ..state import SongManagerState
from .common import ICONS, render_empty_state, render_loading, render_message


def platform_indicators(song: Song) -> str:
    return " ".join(
        ICONS[platform.value] for platform in Platform if platform in song.platforms
    )


def render_song_table(songs: list[Song]) -> Table:
    table = Table(expand=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Artist")
    table.add_column("Album")
    table.add_column("Duration", justify="right")
    table.add_column("Platforms", justify="center")
    for song in songs:
        table.add_row(
            song.id,
            song.title,
            song.artist,
            song.album,
            format_duration(song.duration),
            platform_indicators(song),
        )
    return table


def render_song_detail(song: Song) -> Panel:
    """Detail overlay: summary, platform links and raw metadata."""
    body = Text()
    body.append(f"{song.title}\n", style="bold")
    body.append(f"{song.artist}\n")
    body.append(f"{song.album}\n", style="italic")
    body.append(f"Duration: {format_duration(song.duration)}\n\n")

    body.append("Platform Links:\n", style="bold")
    if song.spotify_url:
        body.append(f"  {ICONS['spotify']} Open in Spotify: {song.spotify_url}\n", style="green")
    if song.youtube_url:
        body.append(f"  {ICONS['youtube']} Open in YouTube: {song.youtube_url}\n", style="red")

    body.append("\nMetadata:\n", style="bold")
    body.append(f"  Spotify ID: {or_not_available(song.spotify_id)}\n")
    body.append(f"  YouTube ID: {or_not_available(song.youtube_id)}\n")
    body.append(f"  Created: {format_timestamp(song.created_at)}\n")
    body.append(f"  Updated: {format_timestamp(song.updated_at)}")

    return Panel(body, title="Song Details", subtitle="close", border_style="bright_cyan")


def render_song_manager(state: SongManagerState, visible: list[Song]) -> RenderableType:
    if state.loading:
        return render_loading("Loading songs...")

    parts: list[RenderableType] = [Text("Song Manager", style="bold cyan")]
    if state.query:
        parts.append(Text(f"Search: {state.query}"))
    parts.append(
        Text(f"Showing {len(visible)} of {len(state.songs)} songs", style="dim")
    )

    message = render_message(error=state.action_error or state.error)
    if message:
        parts.append(message)

    if not visible:
        hint = (
            "Try adjusting your search criteria"
            if state.query
            else "Songs will appear here when you import playlists"
        )
        parts.append(render_empty_state(ICONS["song"], "No songs found", hint))
    else:
        parts.append(render_song_table(visible))

    if state.selected is not None:
        parts.append(render_song_detail(state.selected))

    return Group(*parts)
