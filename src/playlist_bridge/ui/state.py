"""View state management - immutable state updates.

Each view owns one frozen state type. Reducers take (state, action) and
return a new state; unknown actions return the state unchanged.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from loguru import logger

from ..domain.models import ConversionResult, Playlist, Song
from .actions import (
    Action,
    BusyFinished,
    BusyStarted,
    ErrorCleared,
    ErrorReported,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    FilterChanged,
    QueryChanged,
    SearchResultsReceived,
    SelectionCleared,
    SongSelected,
    SubmitFailed,
    SubmitStarted,
    SubmitSucceeded,
    UrlChanged,
)

# Three-way platform selector for the playlist view
PLATFORM_FILTERS = ("all", "spotify", "youtube")


@dataclass(frozen=True)
class DashboardData:
    """Payload of a dashboard fetch (both collections arrive together)."""

    playlists: tuple[Playlist, ...] = ()
    songs: tuple[Song, ...] = ()


@dataclass(frozen=True)
class DashboardState:
    loading: bool = True
    error: Optional[str] = None
    playlists: tuple[Playlist, ...] = ()
    songs: tuple[Song, ...] = ()


@dataclass(frozen=True)
class ImportState:
    url: str = ""
    loading: bool = False
    success: bool = False
    error: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        """Submit control is disabled while loading or with an empty URL."""
        return not self.loading and bool(self.url.strip())


@dataclass(frozen=True)
class PlaylistListState:
    loading: bool = True
    error: Optional[str] = None
    playlists: tuple[Playlist, ...] = ()
    platform_filter: str = "all"
    # Playlist ids with a conversion or sync in flight
    converting_ids: frozenset[str] = field(default_factory=frozenset)
    last_result: Optional[ConversionResult] = None
    # Failure of the last convert/sync/delete; fetch failures use `error`
    action_error: Optional[str] = None

    def is_converting(self, playlist_id: str) -> bool:
        return playlist_id in self.converting_ids


@dataclass(frozen=True)
class SongManagerState:
    loading: bool = True
    error: Optional[str] = None
    songs: tuple[Song, ...] = ()
    query: str = ""
    # Set only when the backend search endpoint answered for `query`
    search_results: Optional[tuple[Song, ...]] = None
    selected: Optional[Song] = None
    action_error: Optional[str] = None

    @property
    def modal_open(self) -> bool:
        return self.selected is not None


# ----------------------------------------------------------------------
# Shared fetch transitions
# ----------------------------------------------------------------------


def start_fetch(state):
    """Enter loading; a new fetch clears the previous error."""
    return replace(state, loading=True, error=None)


def fail_fetch(state, error: str):
    """Leave loading with an error; previously fetched data is kept."""
    return replace(state, loading=False, error=error)


# ----------------------------------------------------------------------
# Reducers
# ----------------------------------------------------------------------


def reduce_dashboard(state: DashboardState, action: Action) -> DashboardState:
    """Apply an action to the dashboard state."""
    if isinstance(action, FetchStarted):
        return start_fetch(state)
    if isinstance(action, FetchSucceeded):
        data: DashboardData = action.data
        return replace(
            state,
            loading=False,
            error=None,
            playlists=tuple(data.playlists),
            songs=tuple(data.songs),
        )
    if isinstance(action, FetchFailed):
        return fail_fetch(state, action.error)
    if isinstance(action, ErrorCleared):
        return replace(state, error=None)

    logger.trace(f"Dashboard ignores {type(action).__name__}")
    return state


def reduce_import(state: ImportState, action: Action) -> ImportState:
    """Apply an action to the import form state.

    A failed submit keeps the URL so the user can correct it; a successful
    one clears it.
    """
    if isinstance(action, UrlChanged):
        return replace(state, url=action.url)
    if isinstance(action, SubmitStarted):
        return replace(state, loading=True, success=False, error=None)
    if isinstance(action, SubmitSucceeded):
        return replace(state, loading=False, success=True, error=None, url="")
    if isinstance(action, SubmitFailed):
        return replace(state, loading=False, success=False, error=action.error)
    if isinstance(action, ErrorReported):
        return replace(state, error=action.error)
    if isinstance(action, ErrorCleared):
        return replace(state, error=None)

    logger.trace(f"Import form ignores {type(action).__name__}")
    return state


def reduce_playlists(state: PlaylistListState, action: Action) -> PlaylistListState:
    """Apply an action to the playlist list state."""
    if isinstance(action, FetchStarted):
        return start_fetch(state)
    if isinstance(action, FetchSucceeded):
        return replace(state, loading=False, playlists=tuple(action.data))
    if isinstance(action, FetchFailed):
        return fail_fetch(state, action.error)
    if isinstance(action, FilterChanged):
        if action.platform_filter not in PLATFORM_FILTERS:
            return replace(
                state, action_error=f"Unknown filter: {action.platform_filter}"
            )
        return replace(state, platform_filter=action.platform_filter)
    if isinstance(action, BusyStarted):
        return replace(
            state,
            converting_ids=state.converting_ids | {action.playlist_id},
            action_error=None,
        )
    if isinstance(action, BusyFinished):
        return replace(
            state,
            converting_ids=state.converting_ids - {action.playlist_id},
            last_result=action.result if action.result else state.last_result,
        )
    if isinstance(action, ErrorReported):
        return replace(state, action_error=action.error)
    if isinstance(action, ErrorCleared):
        return replace(state, error=None, action_error=None)

    logger.trace(f"Playlist list ignores {type(action).__name__}")
    return state


def _refresh_results(
    results: Optional[tuple[Song, ...]], songs: tuple[Song, ...]
) -> Optional[tuple[Song, ...]]:
    """Keep server search results in step with a refetch (deleted songs drop out)."""
    if results is None:
        return None
    latest = {song.id: song for song in songs}
    return tuple(latest[song.id] for song in results if song.id in latest)


def _refresh_selection(
    selected: Optional[Song], songs: tuple[Song, ...]
) -> Optional[Song]:
    """Point an open detail overlay at the latest fetched copy (or close it)."""
    if selected is None:
        return None
    for song in songs:
        if song.id == selected.id:
            return song
    return None


def reduce_songs(state: SongManagerState, action: Action) -> SongManagerState:
    """Apply an action to the song manager state."""
    if isinstance(action, FetchStarted):
        return start_fetch(state)
    if isinstance(action, FetchSucceeded):
        songs = tuple(action.data)
        return replace(
            state,
            loading=False,
            songs=songs,
            search_results=_refresh_results(state.search_results, songs),
            selected=_refresh_selection(state.selected, songs),
        )
    if isinstance(action, FetchFailed):
        return fail_fetch(state, action.error)
    if isinstance(action, QueryChanged):
        return replace(state, query=action.query, search_results=None)
    if isinstance(action, SearchResultsReceived):
        # Results for a stale query are dropped
        if action.query != state.query:
            return state
        return replace(state, search_results=tuple(action.songs))
    if isinstance(action, SongSelected):
        return replace(state, selected=action.song)
    if isinstance(action, SelectionCleared):
        return replace(state, selected=None)
    if isinstance(action, ErrorReported):
        return replace(state, action_error=action.error)
    if isinstance(action, ErrorCleared):
        return replace(state, error=None, action_error=None)

    logger.trace(f"Song manager ignores {type(action).__name__}")
    return state
