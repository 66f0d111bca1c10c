"""
Conversion rules between the two supported platforms.

Only complementary pairs exist: a playlist always converts to the platform
it does not live on.
"""

from .models import ConversionRequest, Platform, Playlist

_COMPLEMENT = {
    Platform.SPOTIFY: Platform.YOUTUBE,
    Platform.YOUTUBE: Platform.SPOTIFY,
}


def target_platform(source: Platform) -> Platform:
    """Return the complement of a platform (spotify <-> youtube)."""
    return _COMPLEMENT[Platform(source)]


def build_conversion_request(playlist: Playlist) -> ConversionRequest:
    """Build the conversion intent for a playlist's current platform."""
    return ConversionRequest(
        playlist_id=playlist.id,
        source_platform=playlist.platform,
        target_platform=target_platform(playlist.platform),
    )


def convert_label(playlist: Playlist) -> str:
    """Action label for a playlist card, e.g. "Convert to YouTube"."""
    return f"Convert to {target_platform(playlist.platform).label}"
