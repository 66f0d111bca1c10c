"""Dashboard controller: library totals and recent playlists."""

from loguru import logger

from ...api.client import ApiClient
from ...domain.exceptions import PlaylistBridgeError
from ...domain.models import Playlist
from ..actions import FetchFailed, FetchStarted, FetchSucceeded
from ..selectors import DashboardStats, dashboard_stats, recent_playlists
from ..state import DashboardData, DashboardState, reduce_dashboard
from .base import ViewController


class DashboardController(ViewController[DashboardState]):
    name = "dashboard"

    def __init__(self, client: ApiClient, recent_limit: int = 5) -> None:
        super().__init__(DashboardState(), reduce_dashboard)
        self.client = client
        self.recent_limit = recent_limit

    def on_mount(self) -> None:
        self.fetch()

    def fetch(self) -> DashboardState:
        """Fetch playlists and songs; either failing fails the whole fetch."""
        self.dispatch(FetchStarted())
        try:
            playlists = self.client.list_playlists()
            songs = self.client.list_songs()
        except PlaylistBridgeError as e:
            logger.error(f"Error fetching dashboard data: {e}")
            return self.dispatch(FetchFailed(f"Failed to load dashboard: {e}"))

        logger.info(f"Dashboard loaded: {len(playlists)} playlists, {len(songs)} songs")
        return self.dispatch(
            FetchSucceeded(DashboardData(playlists=tuple(playlists), songs=tuple(songs)))
        )

    @property
    def stats(self) -> DashboardStats:
        return dashboard_stats(self.state.playlists, self.state.songs)

    @property
    def recent(self) -> list[Playlist]:
        return recent_playlists(self.state.playlists, self.recent_limit)
