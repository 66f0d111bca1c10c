"""Application context for explicit state passing.

AppContext bundles configuration, the API client, injected collaborators
(session identity, navigator, confirmation prompt) and the currently routed
view. Functions return updated contexts rather than mutating global state.
"""

from dataclasses import dataclass, replace
from typing import Optional

from rich.console import Console
from rich.prompt import Confirm

from playlist_bridge.api.client import ApiClient
from playlist_bridge.core.config import Config
from playlist_bridge.core.console import get_console
from playlist_bridge.domain.session import BrowserNavigator, Navigator, SessionContext
from playlist_bridge.ui.controllers.base import ConfirmFn, ViewController


def ask_confirmation(prompt: str) -> bool:
    """Interactive destructive-action guard."""
    return Confirm.ask(prompt, default=False)


@dataclass(frozen=True)
class AppContext:
    """Immutable application context passed to routing and command handlers.

    Attributes:
        config: Application configuration
        client: HTTP client adapter for the conversion backend
        session: Identity used for mutating calls
        navigator: Opens OAuth authorization URLs
        confirm: Destructive-action guard
        console: Rich Console for rendering
        path: Currently routed path
        view: Controller of the current view (None for unknown paths)
    """

    config: Config
    client: ApiClient
    session: SessionContext
    navigator: Navigator
    confirm: ConfirmFn
    console: Console
    path: str = "/"
    view: Optional[ViewController] = None

    @classmethod
    def create(
        cls,
        config: Config,
        client: Optional[ApiClient] = None,
        navigator: Optional[Navigator] = None,
        confirm: Optional[ConfirmFn] = None,
        console: Optional[Console] = None,
    ) -> "AppContext":
        """Create initial application context (no view routed yet)."""
        if console is None:
            console = get_console()
            console.no_color = not config.ui.use_colors
        return cls(
            config=config,
            client=client or ApiClient(config.api),
            session=SessionContext(user_id=config.session.user_id),
            navigator=navigator or BrowserNavigator(),
            confirm=confirm or ask_confirmation,
            console=console,
        )

    def with_view(self, path: str, view: Optional[ViewController]) -> "AppContext":
        """Return new context routed to `path`."""
        return replace(self, path=path, view=view)

    def with_confirm(self, confirm: ConfirmFn) -> "AppContext":
        return replace(self, confirm=confirm)
