"""
Song manager controller: live search, detail overlay and deletion.

Search filters the fetched set locally on every query change. When
`server_search` is enabled the backend search endpoint is asked as well and
its results replace the local projection for that query.
"""

from typing import Optional

from loguru import logger
from pydantic import ValidationError

from ...api.client import ApiClient
from ...domain.exceptions import PlaylistBridgeError
from ...domain.models import Song, SongQuery
from ..actions import (
    ErrorCleared,
    ErrorReported,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    QueryChanged,
    SearchResultsReceived,
    SelectionCleared,
    SongSelected,
)
from ..selectors import visible_songs
from ..state import SongManagerState, reduce_songs
from .base import ConfirmFn, ViewController

DELETE_PROMPT = "Are you sure you want to delete this song?"


class SongManagerController(ViewController[SongManagerState]):
    name = "songs"

    def __init__(
        self, client: ApiClient, confirm: ConfirmFn, server_search: bool = False
    ) -> None:
        super().__init__(SongManagerState(), reduce_songs)
        self.client = client
        self.confirm = confirm
        self.server_search = server_search

    def on_mount(self) -> None:
        self.fetch()

    def fetch(self) -> SongManagerState:
        self.dispatch(FetchStarted())
        try:
            songs = self.client.list_songs()
        except PlaylistBridgeError as e:
            logger.error(f"Error fetching songs: {e}")
            return self.dispatch(FetchFailed(f"Failed to load songs: {e}"))
        return self.dispatch(FetchSucceeded(tuple(songs)))

    @property
    def visible(self) -> list[Song]:
        return visible_songs(self.state)

    def find(self, song_id: str) -> Optional[Song]:
        for song in self.state.songs:
            if song.id == song_id:
                return song
        return None

    def set_query(self, query: str) -> SongManagerState:
        state = self.dispatch(QueryChanged(query))
        if not self.server_search or not query.strip():
            return state

        try:
            results = self.client.search_songs(SongQuery(q=query))
        except (PlaylistBridgeError, ValidationError) as e:
            # Local filtering still applies
            logger.warning(f"Server search failed for {query!r}: {e}")
            return self.dispatch(ErrorReported(f"Search failed: {e}"))
        return self.dispatch(SearchResultsReceived(query, tuple(results)))

    # Detail overlay

    def select(self, song_id: str) -> Optional[Song]:
        """Open the detail overlay on the latest fetched copy of a song."""
        song = self.find(song_id)
        if song is None:
            self.dispatch(ErrorReported(f"Song not found: {song_id}"))
            return None
        self.dispatch(SongSelected(song))
        return song

    def close(self) -> SongManagerState:
        return self.dispatch(SelectionCleared())

    def refresh_selected(self) -> Optional[Song]:
        """Re-fetch the selected song from the backend."""
        selected = self.state.selected
        if selected is None:
            return None
        try:
            song = self.client.get_song(selected.id)
        except PlaylistBridgeError as e:
            logger.error(f"Error fetching song {selected.id}: {e}")
            self.dispatch(ErrorReported(f"Failed to load song: {e}"))
            return None
        self.dispatch(SongSelected(song))
        return song

    def delete(self, song_id: str) -> bool:
        """Delete after confirmation; refetch only when the delete succeeded."""
        if not self.confirm(DELETE_PROMPT):
            logger.debug(f"Delete of song {song_id} cancelled")
            return False

        try:
            self.client.delete_song(song_id)
        except PlaylistBridgeError as e:
            logger.error(f"Error deleting song {song_id}: {e}")
            self.dispatch(ErrorReported(f"Failed to delete song: {e}"))
            return False

        self.dispatch(ErrorCleared())
        self.fetch()
        return True
