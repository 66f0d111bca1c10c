"""Memoized selectors for projections in the render path.

Redux-style memoization that caches results based on input equality.
Only recalculates when inputs actually change.
"""

from functools import wraps
from typing import Any, Callable, Generic, NamedTuple, TypeVar

from loguru import logger

from ..domain.models import Platform, Playlist, Song
from .state import PlaylistListState, SongManagerState

T = TypeVar("T")

# Cached input combinations kept per selector
MAX_CACHE_ENTRIES = 128


class MemoizedSelector(Generic[T]):
    """Cache-based selector that only recalculates when inputs change.

    Inputs must be hashable (tuples of frozen models, strings). The oldest
    entry is evicted once the cache is full.

    Usage:
        @MemoizedSelector
        def expensive_operation(arg1: str, arg2: tuple[Song, ...]) -> list[Song]:
            return result
    """

    def __init__(self, func: Callable[..., T]) -> None:
        self.func = func
        self._cache: dict[Any, T] = {}
        wraps(func)(self)

    def __call__(self, *args: Any, **kwargs: Any) -> T:
        cache_key = (args, tuple(sorted(kwargs.items())))

        if cache_key in self._cache:
            logger.trace(f"Cache hit for {self.func.__name__}")
            return self._cache[cache_key]

        logger.trace(f"Cache miss for {self.func.__name__} - computing")
        result = self.func(*args, **kwargs)

        if len(self._cache) >= MAX_CACHE_ENTRIES:
            self._cache.pop(next(iter(self._cache)))
        self._cache[cache_key] = result

        return result

    def clear_cache(self) -> None:
        """Clear cached results. Useful for testing or memory management."""
        self._cache.clear()


# ----------------------------------------------------------------------
# Playlists
# ----------------------------------------------------------------------


def filter_playlists(
    playlists: tuple[Playlist, ...], platform_filter: str
) -> list[Playlist]:
    """Playlists matching the platform selector ("all" keeps everything)."""
    if platform_filter == "all":
        return list(playlists)
    return [p for p in playlists if p.platform == platform_filter]


def platform_counts(playlists: tuple[Playlist, ...]) -> dict[str, int]:
    """Counts shown on each filter button."""
    counts = {"all": len(playlists)}
    for platform in Platform:
        counts[platform.value] = sum(1 for p in playlists if p.platform == platform)
    return counts


def visible_playlists(state: PlaylistListState) -> list[Playlist]:
    return filter_playlists(state.playlists, state.platform_filter)


def song_preview(playlist: Playlist, limit: int = 3) -> tuple[tuple[Song, ...], int]:
    """First `limit` songs of a playlist plus how many are not shown."""
    shown = playlist.songs[:limit]
    return shown, playlist.song_count - len(shown)


# ----------------------------------------------------------------------
# Songs
# ----------------------------------------------------------------------


@MemoizedSelector
def search_songs(query: str, songs: tuple[Song, ...]) -> list[Song]:
    """Case-insensitive substring search over title, artist and album.

    Note: songs is a tuple (immutable) for proper cache key comparison.
    """
    if not query.strip():
        return list(songs)

    query_lower = query.lower()
    return [
        song
        for song in songs
        if query_lower in song.title.lower()
        or query_lower in song.artist.lower()
        or query_lower in song.album.lower()
    ]


def visible_songs(state: SongManagerState) -> list[Song]:
    """Songs to list: backend search results when present, else local search."""
    if state.search_results is not None and state.query.strip():
        return list(state.search_results)
    return search_songs(state.query, state.songs)


# ----------------------------------------------------------------------
# Dashboard
# ----------------------------------------------------------------------


class DashboardStats(NamedTuple):
    total_playlists: int
    total_songs: int
    spotify_playlists: int
    youtube_playlists: int


def dashboard_stats(
    playlists: tuple[Playlist, ...], songs: tuple[Song, ...]
) -> DashboardStats:
    counts = platform_counts(playlists)
    return DashboardStats(
        total_playlists=len(playlists),
        total_songs=len(songs),
        spotify_playlists=counts[Platform.SPOTIFY.value],
        youtube_playlists=counts[Platform.YOUTUBE.value],
    )


def recent_playlists(playlists: tuple[Playlist, ...], limit: int = 5) -> list[Playlist]:
    """First `limit` playlists in backend order."""
    return list(playlists[:limit])
