"""
View routing and command handling for playlist-bridge.

Routes paths to view controllers and shell commands to controller actions.
"""

from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger
from rich.console import RenderableType

from playlist_bridge.context import AppContext
from playlist_bridge.core.output import log
from playlist_bridge.domain.exceptions import NetworkFailure
from playlist_bridge.domain.models import Platform
from playlist_bridge.ui import components
from playlist_bridge.ui.controllers import (
    DashboardController,
    ImportController,
    PlaylistListController,
    SongManagerController,
    ViewController,
)
from playlist_bridge.ui.state import PLATFORM_FILTERS

ViewFactory = Callable[[AppContext], ViewController]


def _dashboard(ctx: AppContext) -> ViewController:
    return DashboardController(ctx.client, recent_limit=ctx.config.ui.recent_playlists)


def _import(ctx: AppContext) -> ViewController:
    return ImportController(
        ctx.client, ctx.session, ctx.navigator, import_config=ctx.config.importer
    )


def _playlists(ctx: AppContext) -> ViewController:
    return PlaylistListController(ctx.client, ctx.confirm)


def _songs(ctx: AppContext) -> ViewController:
    return SongManagerController(
        ctx.client, ctx.confirm, server_search=ctx.config.ui.server_search
    )


ROUTES: Dict[str, ViewFactory] = {
    "/": _dashboard,
    "/import": _import,
    "/playlists": _playlists,
    "/songs": _songs,
}


def normalize_path(path: str) -> str:
    path = "/" + path.strip().strip("/")
    return path


def resolve(path: str) -> Optional[ViewFactory]:
    """View factory for a path, or None for unknown paths."""
    return ROUTES.get(normalize_path(path))


def navigate(ctx: AppContext, path: str) -> AppContext:
    """Leave the current view and mount the one at `path`."""
    path = normalize_path(path)
    if ctx.view is not None:
        ctx.view.unmount()

    factory = resolve(path)
    if factory is None:
        logger.info(f"No route for {path}")
        return ctx.with_view(path, None)

    view = factory(ctx)
    view.mount()
    return ctx.with_view(path, view)


def render_view(ctx: AppContext) -> RenderableType:
    """Render whatever view is currently routed."""
    view = ctx.view
    preview = ctx.config.ui.song_preview

    if isinstance(view, DashboardController):
        return components.render_dashboard(view.state, view.stats, view.recent)
    if isinstance(view, ImportController):
        return components.render_import(view.state)
    if isinstance(view, PlaylistListController):
        return components.render_playlists(view.state, view.visible, view.counts, preview)
    if isinstance(view, SongManagerController):
        return components.render_song_manager(view.state, view.visible)
    return components.render_not_found(ctx.path)


def view_error(ctx: AppContext) -> Optional[str]:
    """Inline error of the current view, if any."""
    state = getattr(ctx.view, "state", None)
    if state is None:
        return None
    return getattr(state, "action_error", None) or getattr(state, "error", None)


def _ensure_view(ctx: AppContext, path: str) -> AppContext:
    """Route to `path` unless already there."""
    if ctx.path == path and ctx.view is not None:
        return ctx
    return navigate(ctx, path)


def print_help() -> None:
    """Display help information for available commands."""
    help_text = """
playlist-bridge - Spotify <-> YouTube playlist conversion

Navigation:
  go <path>               Open a view: /, /import, /playlists, /songs
  refresh                 Refetch the current view

Import:
  import <url>            Import a Spotify playlist by URL
  auth <spotify|youtube>  Connect a platform (opens the browser)

Playlists:
  filter <all|spotify|youtube>  Filter playlists by platform
  convert <id>            Convert a playlist to the other platform
  sync <id>               Re-sync a playlist from its source platform
  delete <id>             Delete a playlist (or a song on /songs)

Songs:
  search [text]           Filter songs by title, artist or album
  show <id>               Show song details
  close                   Close song details

  health                  Check the backend
  help                    Show this help message
  quit, exit              Exit the program
"""
    log(help_text.strip())


def handle_health(ctx: AppContext) -> bool:
    try:
        status = ctx.client.health()
    except NetworkFailure as e:
        log(f"❌ Backend unavailable: {e}", level="error")
        return False
    log(f"✅ Backend healthy: {status}", level="success")
    return True


def _usage(message: str) -> None:
    log(f"Usage: {message}", level="warning")


def handle_command(ctx: AppContext, command: str, args: List[str]) -> Tuple[AppContext, bool]:
    """
    Handle a single shell command with explicit state passing.

    Args:
        ctx: Application context
        command: Command name
        args: Command arguments

    Returns:
        (updated_context, should_continue) - Updated context and whether to continue
    """
    command = command.lower()

    if command in ("quit", "exit"):
        return ctx, False

    if command == "help":
        print_help()
        return ctx, True

    if command == "health":
        handle_health(ctx)
        return ctx, True

    if command == "go":
        return navigate(ctx, args[0] if args else "/"), True

    if command == "refresh":
        if ctx.view is not None:
            ctx.view.mount()
        return ctx, True

    if command == "import":
        ctx = _ensure_view(ctx, "/import")
        ctx.view.submit(" ".join(args))
        return ctx, True

    if command == "auth":
        if not args or args[0] not in {p.value for p in Platform}:
            _usage("auth <spotify|youtube>")
            return ctx, True
        ctx = _ensure_view(ctx, "/import")
        ctx.view.authenticate(Platform(args[0]))
        return ctx, True

    if command == "filter":
        if not args or args[0] not in PLATFORM_FILTERS:
            _usage("filter <all|spotify|youtube>")
            return ctx, True
        ctx = _ensure_view(ctx, "/playlists")
        ctx.view.set_filter(args[0])
        return ctx, True

    if command in ("convert", "sync"):
        if not args:
            _usage(f"{command} <playlist id>")
            return ctx, True
        ctx = _ensure_view(ctx, "/playlists")
        if command == "convert":
            ctx.view.convert(args[0])
        else:
            ctx.view.sync(args[0])
        return ctx, True

    if command == "delete":
        if not args:
            _usage("delete <id>")
            return ctx, True
        if not isinstance(ctx.view, SongManagerController):
            ctx = _ensure_view(ctx, "/playlists")
        ctx.view.delete(args[0])
        return ctx, True

    if command == "search":
        ctx = _ensure_view(ctx, "/songs")
        ctx.view.set_query(" ".join(args))
        return ctx, True

    if command == "show":
        if not args:
            _usage("show <song id>")
            return ctx, True
        ctx = _ensure_view(ctx, "/songs")
        ctx.view.select(args[0])
        return ctx, True

    if command == "close":
        if isinstance(ctx.view, SongManagerController):
            ctx.view.close()
        return ctx, True

    log(f"Unknown command: {command}. Type 'help' for available commands.", level="warning")
    return ctx, True
