"""Rendering functions for the terminal views (Rich renderables)."""

from .dashboard import render_dashboard
from .importer import render_import
from .playlists import render_playlist_card, render_playlists
from .songs import render_song_detail, render_song_manager
from .not_found import render_not_found

__all__ = [
    "render_dashboard",
    "render_import",
    "render_not_found",
    "render_playlist_card",
    "render_playlists",
    "render_song_detail",
    "render_song_manager",
]
