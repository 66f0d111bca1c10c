"""
Session and navigation collaborators injected into view controllers.

Controllers never read a global user or redirect the terminal themselves:
identity comes from a SessionContext and OAuth redirects go through a
Navigator, so tests can supply both.
"""

import webbrowser
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from ..core.output import log


@dataclass(frozen=True)
class SessionContext:
    """Identity of the user issuing requests."""

    user_id: str


class Navigator(Protocol):
    """Capability to send the user to an external URL."""

    def open_url(self, url: str) -> None: ...


class BrowserNavigator:
    """Opens URLs in the system browser (fire-and-forget)."""

    def open_url(self, url: str) -> None:
        logger.info(f"Opening browser: {url}")
        browser_opened = False
        try:
            browser_opened = webbrowser.open(url)
        except (webbrowser.Error, OSError) as e:
            logger.debug(f"Failed to open browser: {e}")

        if browser_opened:
            log("✓ Browser opened for authorization", level="info")
        else:
            # Headless systems: leave the URL for the user to copy
            log("⚠ Could not open browser automatically", level="warning")
            log("Please open this URL in your browser:", level="info")
            log(url, level="info")
