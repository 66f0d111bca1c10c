"""Tests for conversion rules."""

import pytest

from playlist_bridge.domain.conversion import (
    build_conversion_request,
    convert_label,
    target_platform,
)
from playlist_bridge.domain.models import Platform, Playlist


class TestTargetPlatform:
    """The target is always the complement of the source."""

    @pytest.mark.parametrize(
        "source,target",
        [(Platform.SPOTIFY, Platform.YOUTUBE), (Platform.YOUTUBE, Platform.SPOTIFY)],
    )
    def test_complement(self, source: Platform, target: Platform) -> None:
        assert target_platform(source) is target

    def test_round_trip_is_identity(self) -> None:
        for platform in Platform:
            assert target_platform(target_platform(platform)) is platform


class TestBuildConversionRequest:
    """Tests for build_conversion_request."""

    def test_for_every_platform(self) -> None:
        for platform in Platform:
            playlist = Playlist(id="p1", platform=platform)
            request = build_conversion_request(playlist)
            assert request.playlist_id == "p1"
            assert request.source_platform is platform
            assert request.target_platform is target_platform(platform)
            assert request.source_platform != request.target_platform


class TestConvertLabel:
    def test_spotify_playlist(self) -> None:
        assert convert_label(Playlist(id="p1", platform="spotify")) == "Convert to YouTube"

    def test_youtube_playlist(self) -> None:
        assert convert_label(Playlist(id="p1", platform="youtube")) == "Convert to Spotify"
