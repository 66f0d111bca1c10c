"""Domain layer: value types, rules and formatting for playlist conversion."""

from .exceptions import InvalidInput, InvalidUrl, NetworkFailure, PlaylistBridgeError
from .models import (
    ConversionRequest,
    ConversionResult,
    Platform,
    Playlist,
    PlaylistDraft,
    Song,
    SongDraft,
    SongQuery,
)

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "InvalidInput",
    "InvalidUrl",
    "NetworkFailure",
    "Platform",
    "Playlist",
    "PlaylistBridgeError",
    "PlaylistDraft",
    "Song",
    "SongDraft",
    "SongQuery",
]
