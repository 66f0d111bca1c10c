"""playlist-bridge: terminal client for Spotify <-> YouTube playlist conversion."""

__version__ = "0.1.0"
