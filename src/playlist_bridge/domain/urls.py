"""Playlist URL parsing and platform-native links."""

import re

from .exceptions import InvalidUrl
from .models import Platform

# Matches the identifier in ".../playlist/<id>" share links
PLAYLIST_ID_PATTERN = re.compile(r"playlist/([a-zA-Z0-9]+)")

_PLAYLIST_LINKS = {
    Platform.SPOTIFY: "https://open.spotify.com/playlist/{external_id}",
    Platform.YOUTUBE: "https://www.youtube.com/playlist?list={external_id}",
}


def extract_playlist_id(url: str) -> str:
    """Extract the platform-native playlist id from a share URL.

    Args:
        url: Playlist URL, e.g. https://open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M

    Returns:
        The alphanumeric identifier following "playlist/"

    Raises:
        InvalidUrl: If the URL has no playlist identifier
    """
    match = PLAYLIST_ID_PATTERN.search(url)
    if not match:
        raise InvalidUrl(url)
    return match.group(1)


def playlist_link(platform: Platform, external_id: str) -> str:
    """Link that opens a playlist on its own platform."""
    return _PLAYLIST_LINKS[Platform(platform)].format(external_id=external_id)
