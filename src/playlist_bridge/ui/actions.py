"""Named actions that drive view state transitions.

Controllers never assign state fields directly: every change is one of
these actions passed through the view's reducer in ui.state.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from ..domain.models import ConversionResult, Song


# Fetch lifecycle (shared by every list view)


@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchSucceeded:
    data: Any


@dataclass(frozen=True)
class FetchFailed:
    error: str


# Import form


@dataclass(frozen=True)
class UrlChanged:
    url: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    pass


@dataclass(frozen=True)
class SubmitFailed:
    error: str


# Playlist list


@dataclass(frozen=True)
class FilterChanged:
    platform_filter: str


@dataclass(frozen=True)
class BusyStarted:
    """A conversion or sync was sent for this playlist id."""

    playlist_id: str


@dataclass(frozen=True)
class BusyFinished:
    playlist_id: str
    result: Optional[ConversionResult] = None


# Song manager


@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class SearchResultsReceived:
    """Server-side search results for the current query."""

    query: str
    songs: tuple[Song, ...]


@dataclass(frozen=True)
class SongSelected:
    song: Song


@dataclass(frozen=True)
class SelectionCleared:
    pass


# Non-fatal errors from mutations (delete, convert, sync, auth)


@dataclass(frozen=True)
class ErrorReported:
    error: str


@dataclass(frozen=True)
class ErrorCleared:
    pass


Action = Union[
    FetchStarted,
    FetchSucceeded,
    FetchFailed,
    UrlChanged,
    SubmitStarted,
    SubmitSucceeded,
    SubmitFailed,
    FilterChanged,
    BusyStarted,
    BusyFinished,
    QueryChanged,
    SearchResultsReceived,
    SongSelected,
    SelectionCleared,
    ErrorReported,
    ErrorCleared,
]
