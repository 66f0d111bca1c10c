"""View controllers: one per routed view."""

from .base import ConfirmFn, ViewController
from .dashboard import DashboardController
from .importer import ImportController
from .playlists import PlaylistListController
from .songs import SongManagerController

__all__ = [
    "ConfirmFn",
    "DashboardController",
    "ImportController",
    "PlaylistListController",
    "SongManagerController",
    "ViewController",
]
