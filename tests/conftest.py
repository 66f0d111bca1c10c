"""Shared fixtures: sample songs/playlists and a recording fake backend."""

from datetime import datetime
from typing import Any, Optional

import pytest

from playlist_bridge.domain.exceptions import NetworkFailure
from playlist_bridge.domain.models import (
    ConversionRequest,
    ConversionResult,
    Platform,
    Playlist,
    PlaylistDraft,
    Song,
    SongQuery,
)


def make_song(song_id: str, title: str = "Song", artist: str = "Artist", **kwargs: Any) -> Song:
    return Song(id=song_id, title=title, artist=artist, **kwargs)


def make_playlist(
    playlist_id: str,
    platform: Platform = Platform.SPOTIFY,
    songs: tuple[Song, ...] = (),
    **kwargs: Any,
) -> Playlist:
    kwargs.setdefault("name", f"Playlist {playlist_id}")
    return Playlist(id=playlist_id, platform=platform, songs=songs, **kwargs)


class FakeApiClient:
    """In-memory stand-in for ApiClient that records every call.

    Set `fail` to a method name (or a set of names) to make those calls
    raise NetworkFailure.
    """

    def __init__(
        self,
        playlists: Optional[list[Playlist]] = None,
        songs: Optional[list[Song]] = None,
    ) -> None:
        self.playlists = list(playlists or [])
        self.songs = list(songs or [])
        self.calls: list[tuple[str, tuple]] = []
        self.fail: set[str] = set()
        self.conversion_result = ConversionResult(
            success=True, converted_songs=2, new_playlist_id="p-new", message="Converted 2 songs"
        )
        self.search_results: list[Song] = []
        self.closed = False
        # Hook run inside convert_playlist, before it returns
        self.on_convert = None

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if name in self.fail:
            raise NetworkFailure(f"{name} failed", status_code=500)

    def called(self, name: str) -> list[tuple]:
        return [args for call, args in self.calls if call == name]

    def close(self) -> None:
        self.closed = True

    def health(self) -> dict:
        self._record("health")
        return {"status": "healthy"}

    def auth_url(self, platform: Platform) -> str:
        self._record("auth_url", platform)
        return f"https://accounts.example.com/authorize?platform={platform.value}"

    def list_playlists(self) -> list[Playlist]:
        self._record("list_playlists")
        return list(self.playlists)

    def create_playlist(self, draft: PlaylistDraft) -> Playlist:
        self._record("create_playlist", draft)
        playlist = Playlist(
            id=f"p{len(self.playlists) + 1}",
            name=draft.name or "",
            description=draft.description or "",
            user_id=draft.user_id or "",
            platform=draft.platform or Platform.SPOTIFY,
            external_id=draft.external_id or "",
        )
        self.playlists.append(playlist)
        return playlist

    def delete_playlist(self, playlist_id: str) -> None:
        self._record("delete_playlist", playlist_id)
        self.playlists = [p for p in self.playlists if p.id != playlist_id]

    def convert_playlist(self, playlist_id: str, conversion: ConversionRequest) -> ConversionResult:
        self._record("convert_playlist", playlist_id, conversion)
        if self.on_convert is not None:
            self.on_convert()
        return self.conversion_result

    def sync_playlist(self, playlist_id: str) -> str:
        self._record("sync_playlist", playlist_id)
        return "Playlist synced successfully"

    def list_songs(self) -> list[Song]:
        self._record("list_songs")
        return list(self.songs)

    def get_song(self, song_id: str) -> Song:
        self._record("get_song", song_id)
        for song in self.songs:
            if song.id == song_id:
                return song
        raise NetworkFailure("Song not found", status_code=404)

    def delete_song(self, song_id: str) -> None:
        self._record("delete_song", song_id)
        self.songs = [s for s in self.songs if s.id != song_id]

    def search_songs(self, query: SongQuery) -> list[Song]:
        self._record("search_songs", query)
        return list(self.search_results)


class RecordingNavigator:
    def __init__(self) -> None:
        self.opened: list[str] = []

    def open_url(self, url: str) -> None:
        self.opened.append(url)


@pytest.fixture
def songs() -> list[Song]:
    """Four songs with mixed platform coverage."""
    return [
        make_song(
            "s1",
            title="Bohemian Rhapsody",
            artist="Queen",
            album="A Night at the Opera",
            duration=354,
            spotify_id="sp1",
            spotify_url="https://open.spotify.com/track/sp1",
            created_at=datetime(2024, 1, 1, 12, 0),
            updated_at=datetime(2024, 1, 2, 12, 0),
        ),
        make_song(
            "s2",
            title="Hotel California",
            artist="Eagles",
            album="Hotel California",
            duration=391,
            youtube_id="yt2",
            youtube_url="https://www.youtube.com/watch?v=yt2",
        ),
        make_song(
            "s3",
            title="Imagine",
            artist="John Lennon",
            album="Imagine",
            duration=183,
            spotify_id="sp3",
            youtube_id="yt3",
        ),
        make_song("s4", title="Yesterday", artist="The Beatles", album="Help!", duration=125),
    ]


@pytest.fixture
def playlists(songs: list[Song]) -> list[Playlist]:
    """Two Spotify playlists and one YouTube playlist."""
    return [
        make_playlist("p1", Platform.SPOTIFY, tuple(songs), external_id="37i9dQZF1DX"),
        make_playlist("p2", Platform.YOUTUBE, tuple(songs[:2]), external_id="PLabc"),
        make_playlist("p3", Platform.SPOTIFY),
    ]


@pytest.fixture
def fake_client(playlists: list[Playlist], songs: list[Song]) -> FakeApiClient:
    return FakeApiClient(playlists=playlists, songs=songs)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()
