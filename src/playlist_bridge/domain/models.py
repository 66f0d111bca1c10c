"""Domain types shared by the API adapter and every view.

Wire-compatible with the conversion backend's JSON: field names match the
backend's keys, and optional platform fields may be absent or empty strings.
"""

from datetime import datetime
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class Platform(StrEnum):
    """Streaming platforms a playlist or song can live on."""

    SPOTIFY = "spotify"
    YOUTUBE = "youtube"

    @property
    def label(self) -> str:
        return "YouTube" if self is Platform.YOUTUBE else "Spotify"


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class Song(BaseModel):
    id: str
    title: str = ""
    artist: str = ""
    album: str = ""
    duration: int = Field(default=0, ge=0)  # seconds
    spotify_id: Optional[str] = None
    youtube_id: Optional[str] = None
    spotify_url: Optional[str] = None
    youtube_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @field_validator(
        "spotify_id", "youtube_id", "spotify_url", "youtube_url", mode="before"
    )
    @classmethod
    def _empty_means_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Song":
        if self.created_at and self.updated_at and self.created_at > self.updated_at:
            raise ValueError("created_at must not be after updated_at")
        return self

    @property
    def platforms(self) -> frozenset[Platform]:
        """Platforms this song has an identifier on (zero, one or both)."""
        found = set()
        if self.spotify_id:
            found.add(Platform.SPOTIFY)
        if self.youtube_id:
            found.add(Platform.YOUTUBE)
        return frozenset(found)


class Playlist(BaseModel):
    id: str
    name: str = ""
    description: str = ""
    user_id: str = ""
    platform: Platform
    external_id: str = ""
    songs: tuple[Song, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @field_validator("songs", mode="before")
    @classmethod
    def _null_songs(cls, value: Any) -> Any:
        # The backend serializes an empty Go slice as null
        return () if value is None else value

    @model_validator(mode="after")
    def _check_invariants(self) -> "Playlist":
        seen: set[str] = set()
        for song in self.songs:
            if song.id in seen:
                raise ValueError(f"duplicate song id in playlist: {song.id}")
            seen.add(song.id)
        if self.created_at and self.updated_at and self.created_at > self.updated_at:
            raise ValueError("created_at must not be after updated_at")
        return self

    @property
    def song_count(self) -> int:
        return len(self.songs)

    @property
    def total_duration(self) -> int:
        """Sum of song durations in seconds."""
        return sum(song.duration for song in self.songs)

    @property
    def total_minutes(self) -> int:
        """Total duration rounded to the nearest minute (half rounds up)."""
        return int(self.total_duration / 60 + 0.5)


class PlaylistDraft(BaseModel):
    """Partial playlist for create/update bodies; unset fields are omitted."""

    name: Optional[str] = None
    description: Optional[str] = None
    user_id: Optional[str] = None
    platform: Optional[Platform] = None
    external_id: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SongDraft(BaseModel):
    """Partial song for create/update bodies; unset fields are omitted."""

    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)
    spotify_id: Optional[str] = None
    youtube_id: Optional[str] = None
    spotify_url: Optional[str] = None
    youtube_url: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ConversionRequest(BaseModel):
    playlist_id: str
    source_platform: Platform
    target_platform: Platform

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _platforms_differ(self) -> "ConversionRequest":
        if self.source_platform == self.target_platform:
            raise ValueError("source_platform and target_platform must differ")
        return self

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ConversionResult(BaseModel):
    success: bool = False
    converted_songs: int = 0
    failed_songs: list[str] = Field(default_factory=list)
    new_playlist_id: Optional[str] = None
    message: str = ""

    @field_validator("failed_songs", mode="before")
    @classmethod
    def _null_failures(cls, value: Any) -> Any:
        return [] if value is None else value


class SongQuery(BaseModel):
    q: str = Field(min_length=1)
    limit: int = Field(default=10, gt=0)

    @field_validator("q")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Search query is required")
        return value
