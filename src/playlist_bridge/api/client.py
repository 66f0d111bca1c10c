"""
HTTP client adapter for the conversion backend.

Single point of outbound calls: attaches the base URL, session credentials
and JSON content type, and turns every response into either a typed domain
value or a raised NetworkFailure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from loguru import logger
from pydantic import BaseModel, ValidationError

from ..core.config import ApiConfig
from ..domain.exceptions import NetworkFailure
from ..domain.models import (
    ConversionRequest,
    ConversionResult,
    Platform,
    Playlist,
    PlaylistDraft,
    Song,
    SongDraft,
    SongQuery,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class ApiResponse:
    """Response envelope: HTTP status plus decoded JSON body (None if empty)."""

    status_code: int
    data: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


def _error_message(response: requests.Response) -> str:
    """Best-effort message from a failed response ({"error": ...} bodies)."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code} {response.reason or ''}".strip()


def _unwrap_list(data: Any, key: str) -> list:
    """Accept both bare lists and {"<key>": [...]} envelopes."""
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get(key) or []
    if not isinstance(data, list):
        raise NetworkFailure(f"Unexpected response: expected a list of {key}")
    return data


class ApiClient:
    """Typed client for the /api/v1 backend.

    One requests.Session per client carries cookies between calls, so a
    session established by the OAuth flow is reused on every request.
    """

    def __init__(
        self,
        config: ApiConfig,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = config.base_url.rstrip("/")
        self.timeout = config.timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update(JSON_HEADERS)
        self.session.verify = config.verify_ssl
        for name, value in config.cookies.items():
            self.session.cookies.set(name, value)

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Send one request and return its envelope.

        Raises:
            NetworkFailure: On transport errors, HTTP status >= 400, or an
                undecodable body
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method, url, json=json, params=params, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise NetworkFailure(str(e), path=path) from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.warning(f"{method} {path} -> {response.status_code}: {message}")
            raise NetworkFailure(message, status_code=response.status_code, path=path)

        data = None
        if response.content:
            try:
                data = response.json()
            except ValueError as e:
                raise NetworkFailure(
                    f"Unexpected response from {path}: not JSON",
                    status_code=response.status_code,
                    path=path,
                ) from e

        return ApiResponse(
            status_code=response.status_code,
            data=data,
            headers=dict(response.headers),
        )

    def _parse(self, model: Type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid {model.__name__} from {path}: {e}")
            raise NetworkFailure(
                f"Unexpected response from {path}: invalid {model.__name__}",
                path=path,
            ) from e

    def _parse_list(self, model: Type[ModelT], data: Any, key: str, path: str) -> list[ModelT]:
        return [self._parse(model, item, path) for item in _unwrap_list(data, key)]

    # ------------------------------------------------------------------
    # Health & auth
    # ------------------------------------------------------------------

    def health(self) -> Dict[str, Any]:
        """Liveness check."""
        data = self.request("GET", "/health").data
        return data if isinstance(data, dict) else {"status": data}

    def auth_url(self, platform: Platform) -> str:
        """Fetch the OAuth authorization URL for a platform."""
        path = f"/auth/{Platform(platform).value}"
        data = self.request("GET", path).data
        if not isinstance(data, dict) or not data.get("auth_url"):
            raise NetworkFailure(f"Unexpected response from {path}: no auth_url", path=path)
        return str(data["auth_url"])

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def list_playlists(self) -> list[Playlist]:
        data = self.request("GET", "/playlists").data
        return self._parse_list(Playlist, data, "playlists", "/playlists")

    def get_playlist(self, playlist_id: str) -> Playlist:
        path = f"/playlists/{playlist_id}"
        return self._parse(Playlist, self.request("GET", path).data, path)

    def create_playlist(self, draft: PlaylistDraft) -> Playlist:
        data = self.request("POST", "/playlists", json=draft.to_payload()).data
        return self._parse(Playlist, data, "/playlists")

    def update_playlist(self, playlist_id: str, draft: PlaylistDraft) -> ApiResponse:
        # Backend may answer with the playlist or with a status message
        return self.request("PUT", f"/playlists/{playlist_id}", json=draft.to_payload())

    def delete_playlist(self, playlist_id: str) -> None:
        self.request("DELETE", f"/playlists/{playlist_id}")

    def convert_playlist(
        self, playlist_id: str, conversion: ConversionRequest
    ) -> ConversionResult:
        path = f"/playlists/{playlist_id}/convert"
        data = self.request("POST", path, json=conversion.to_payload()).data
        return self._parse(ConversionResult, data or {}, path)

    def sync_playlist(self, playlist_id: str) -> str:
        """Re-sync a playlist from its source platform; returns the backend message."""
        data = self.request("POST", f"/playlists/{playlist_id}/sync").data
        if isinstance(data, dict):
            return str(data.get("message", ""))
        return ""

    # ------------------------------------------------------------------
    # Songs
    # ------------------------------------------------------------------

    def list_songs(self) -> list[Song]:
        data = self.request("GET", "/songs").data
        return self._parse_list(Song, data, "songs", "/songs")

    def get_song(self, song_id: str) -> Song:
        path = f"/songs/{song_id}"
        return self._parse(Song, self.request("GET", path).data, path)

    def create_song(self, draft: SongDraft) -> Song:
        data = self.request("POST", "/songs", json=draft.to_payload()).data
        return self._parse(Song, data, "/songs")

    def update_song(self, song_id: str, draft: SongDraft) -> ApiResponse:
        return self.request("PUT", f"/songs/{song_id}", json=draft.to_payload())

    def delete_song(self, song_id: str) -> None:
        self.request("DELETE", f"/songs/{song_id}")

    def search_songs(self, query: SongQuery) -> list[Song]:
        """Server-side song search.

        The query goes in both the body and the query string; the backend
        reads q/limit from the query string.
        """
        payload = query.model_dump()
        data = self.request("POST", "/songs/search", json=payload, params=payload).data
        return self._parse_list(Song, data, "songs", "/songs/search")
