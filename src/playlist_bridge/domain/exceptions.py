"""Error taxonomy shared by the API adapter and the view controllers."""

from typing import Optional


class PlaylistBridgeError(Exception):
    """Base exception for playlist-bridge operations."""

    pass


class InvalidInput(PlaylistBridgeError):
    """Raised when user input is malformed or a required field is empty."""

    pass


class InvalidUrl(InvalidInput):
    """Raised when a playlist URL has no extractable identifier."""

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        super().__init__(message or "Invalid Spotify playlist URL")


class NetworkFailure(PlaylistBridgeError):
    """Raised when a backend call fails at the transport or HTTP level."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        path: Optional[str] = None,
    ):
        self.status_code = status_code
        self.path = path
        super().__init__(message)
