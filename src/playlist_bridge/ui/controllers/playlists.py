"""
Playlist list controller: platform filter, conversion, sync and deletion.

Conversion lifecycle per playlist id: Idle -> Converting -> Idle. At most
one conversion (or sync) per id is in flight; other ids may convert
concurrently. Whatever the outcome, the list is refetched afterwards because
the backend may have created a counterpart playlist.
"""

from typing import Optional

from loguru import logger

from ...api.client import ApiClient
from ...domain.conversion import build_conversion_request
from ...domain.exceptions import PlaylistBridgeError
from ...domain.models import ConversionResult, Playlist
from ..actions import (
    BusyFinished,
    BusyStarted,
    ErrorCleared,
    ErrorReported,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    FilterChanged,
)
from ..selectors import platform_counts, visible_playlists
from ..state import PlaylistListState, reduce_playlists
from .base import ConfirmFn, ViewController

DELETE_PROMPT = "Are you sure you want to delete this playlist?"


class PlaylistListController(ViewController[PlaylistListState]):
    name = "playlists"

    def __init__(self, client: ApiClient, confirm: ConfirmFn) -> None:
        super().__init__(PlaylistListState(), reduce_playlists)
        self.client = client
        self.confirm = confirm

    def on_mount(self) -> None:
        self.fetch()

    def fetch(self) -> PlaylistListState:
        self.dispatch(FetchStarted())
        try:
            playlists = self.client.list_playlists()
        except PlaylistBridgeError as e:
            logger.error(f"Error fetching playlists: {e}")
            return self.dispatch(FetchFailed(f"Failed to load playlists: {e}"))
        return self.dispatch(FetchSucceeded(tuple(playlists)))

    # Projections

    @property
    def visible(self) -> list[Playlist]:
        return visible_playlists(self.state)

    @property
    def counts(self) -> dict[str, int]:
        return platform_counts(self.state.playlists)

    def find(self, playlist_id: str) -> Optional[Playlist]:
        for playlist in self.state.playlists:
            if playlist.id == playlist_id:
                return playlist
        return None

    def set_filter(self, platform_filter: str) -> PlaylistListState:
        return self.dispatch(FilterChanged(platform_filter))

    # Mutations

    def _begin(self, playlist_id: str) -> bool:
        """Mark a playlist busy unless it already is."""
        _, applied = self.dispatch_if(
            lambda state: not state.is_converting(playlist_id),
            BusyStarted(playlist_id),
        )
        if not applied:
            logger.info(f"Playlist {playlist_id} is busy; ignoring duplicate request")
        return applied

    def convert(self, playlist_id: str) -> Optional[ConversionResult]:
        """Convert a playlist to its complementary platform.

        Returns:
            The backend's result, or None if the call failed or was refused
        """
        playlist = self.find(playlist_id)
        if playlist is None:
            self.dispatch(ErrorReported(f"Playlist not found: {playlist_id}"))
            return None

        conversion = build_conversion_request(playlist)
        if not self._begin(playlist_id):
            return None

        logger.info(
            f"Converting playlist {playlist_id}: "
            f"{conversion.source_platform.value} -> {conversion.target_platform.value}"
        )
        result: Optional[ConversionResult] = None
        try:
            result = self.client.convert_playlist(playlist_id, conversion)
        except PlaylistBridgeError as e:
            logger.error(f"Error converting playlist {playlist_id}: {e}")
            self.dispatch(ErrorReported(f"Failed to convert playlist: {e}"))
        finally:
            self.dispatch(BusyFinished(playlist_id, result))

        self.fetch()
        return result

    def sync(self, playlist_id: str) -> bool:
        """Re-sync a playlist from its source platform, then refetch."""
        if self.find(playlist_id) is None:
            self.dispatch(ErrorReported(f"Playlist not found: {playlist_id}"))
            return False
        if not self._begin(playlist_id):
            return False

        ok = False
        try:
            message = self.client.sync_playlist(playlist_id)
            logger.info(f"Synced playlist {playlist_id}: {message}")
            ok = True
        except PlaylistBridgeError as e:
            logger.error(f"Error syncing playlist {playlist_id}: {e}")
            self.dispatch(ErrorReported(f"Failed to sync playlist: {e}"))
        finally:
            self.dispatch(BusyFinished(playlist_id))

        self.fetch()
        return ok

    def delete(self, playlist_id: str) -> bool:
        """Delete after confirmation; refetch only when the delete succeeded."""
        if not self.confirm(DELETE_PROMPT):
            logger.debug(f"Delete of playlist {playlist_id} cancelled")
            return False

        try:
            self.client.delete_playlist(playlist_id)
        except PlaylistBridgeError as e:
            logger.error(f"Error deleting playlist {playlist_id}: {e}")
            self.dispatch(ErrorReported(f"Failed to delete playlist: {e}"))
            return False

        self.dispatch(ErrorCleared())
        self.fetch()
        return True
