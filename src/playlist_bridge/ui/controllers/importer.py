"""
Import controller: playlist URL form and per-platform authentication.

The created playlist carries placeholder metadata: the backend is not asked
for the real title/description before creation.
"""

from typing import Optional

from loguru import logger

from ...api.client import ApiClient
from ...core.config import ImportConfig
from ...domain.exceptions import InvalidInput, PlaylistBridgeError
from ...domain.models import Platform, Playlist, PlaylistDraft
from ...domain.session import Navigator, SessionContext
from ...domain.urls import extract_playlist_id
from ..actions import (
    ErrorCleared,
    ErrorReported,
    SubmitFailed,
    SubmitStarted,
    SubmitSucceeded,
    UrlChanged,
)
from ..state import ImportState, reduce_import
from .base import ViewController


class ImportController(ViewController[ImportState]):
    name = "import"

    def __init__(
        self,
        client: ApiClient,
        session: SessionContext,
        navigator: Navigator,
        import_config: Optional[ImportConfig] = None,
    ) -> None:
        super().__init__(ImportState(), reduce_import)
        self.client = client
        self.session = session
        self.navigator = navigator
        self.import_config = import_config or ImportConfig()

    def set_url(self, url: str) -> ImportState:
        return self.dispatch(UrlChanged(url))

    def build_draft(self, url: str) -> PlaylistDraft:
        """Creation body for a playlist URL.

        Raises:
            InvalidInput: If the URL is blank
            InvalidUrl: If no playlist id can be extracted
        """
        if not url.strip():
            raise InvalidInput("Please enter a playlist URL")

        return PlaylistDraft(
            external_id=extract_playlist_id(url),
            platform=Platform.SPOTIFY,
            name=self.import_config.default_name,
            description=self.import_config.default_description,
            user_id=self.session.user_id,
        )

    def submit(self, url: Optional[str] = None) -> Optional[Playlist]:
        """Import the playlist at the current (or given) URL.

        Returns:
            The created playlist, or None on failure (see state.error)
        """
        if url is not None:
            self.set_url(url)
        url = self.state.url

        self.dispatch(SubmitStarted())
        try:
            draft = self.build_draft(url)
            playlist = self.client.create_playlist(draft)
        except PlaylistBridgeError as e:
            logger.warning(f"Import failed for {url!r}: {e}")
            self.dispatch(SubmitFailed(str(e) or "Failed to import playlist"))
            return None

        logger.info(f"Imported playlist {draft.external_id} as {playlist.id}")
        self.dispatch(SubmitSucceeded())
        return playlist

    def authenticate(self, platform: Platform) -> bool:
        """Send the user to the backend-issued authorization URL.

        Fire-and-forget: the OAuth callback is not correlated here.
        """
        platform = Platform(platform)
        try:
            auth_url = self.client.auth_url(platform)
        except PlaylistBridgeError as e:
            logger.error(f"Error starting {platform.value} auth: {e}")
            self.dispatch(ErrorReported(f"Failed to authenticate with {platform.value}"))
            return False

        self.dispatch(ErrorCleared())
        self.navigator.open_url(auth_url)
        return True
