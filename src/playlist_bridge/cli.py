"""
playlist-bridge - CLI entry point

One-shot subcommands route to a view, run a single action, render the
result and exit. With no subcommand the interactive shell starts.
"""

import argparse
import os
import sys
from typing import Callable, Optional

from playlist_bridge import router
from playlist_bridge.context import AppContext
from playlist_bridge.core.output import log
from playlist_bridge.domain.models import Platform
from playlist_bridge.main import bootstrap, interactive_mode
from playlist_bridge.ui.controllers import ViewController

ViewAction = Callable[[ViewController], object]


def run_view_action(
    ctx: AppContext, path: str, action: Optional[ViewAction] = None
) -> int:
    """Route to a view, apply one action and render.

    Returns:
        Exit code (0 for success, 1 if the view reports an error)
    """
    ctx = router.navigate(ctx, path)
    try:
        if action is not None and ctx.view is not None:
            action(ctx.view)
        ctx.console.print(router.render_view(ctx))
    finally:
        if ctx.view is not None:
            ctx.view.unmount()
        ctx.client.close()

    return 1 if router.view_error(ctx) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="playlist-bridge - Spotify <-> YouTube playlist conversion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--api-url",
        help="Backend base URL (overrides config and PLAYLIST_BRIDGE_API_URL)",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    subparsers.add_parser("dashboard", help="Show library totals and recent playlists")
    subparsers.add_parser("health", help="Check the backend")

    shell_parser = subparsers.add_parser("shell", help="Start the interactive shell")
    shell_parser.add_argument("--path", default="/", help="View to open first")

    import_parser = subparsers.add_parser("import", help="Import a Spotify playlist by URL")
    import_parser.add_argument("url", help="Spotify playlist URL")

    auth_parser = subparsers.add_parser("auth", help="Connect a platform account")
    auth_parser.add_argument("platform", choices=["spotify", "youtube"])

    playlists_parser = subparsers.add_parser("playlists", help="List playlists")
    playlists_parser.add_argument(
        "--platform", choices=["all", "spotify", "youtube"], default="all"
    )

    convert_parser = subparsers.add_parser(
        "convert", help="Convert a playlist to the other platform"
    )
    convert_parser.add_argument("playlist_id")

    sync_parser = subparsers.add_parser(
        "sync", help="Re-sync a playlist from its source platform"
    )
    sync_parser.add_argument("playlist_id")

    delete_playlist_parser = subparsers.add_parser("delete-playlist", help="Delete a playlist")
    delete_playlist_parser.add_argument("playlist_id")
    delete_playlist_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )

    songs_parser = subparsers.add_parser("songs", help="List songs")
    songs_parser.add_argument("--search", default="", help="Filter by title, artist or album")

    song_parser = subparsers.add_parser("song", help="Show song details")
    song_parser.add_argument("song_id")

    delete_song_parser = subparsers.add_parser("delete-song", help="Delete a song")
    delete_song_parser.add_argument("song_id")
    delete_song_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )

    return parser


def dispatch(args: argparse.Namespace, ctx: AppContext) -> int:
    """Run one parsed subcommand against a context."""
    if getattr(args, "yes", False):
        ctx = ctx.with_confirm(lambda _prompt: True)

    sub = args.subcommand

    if sub == "health":
        try:
            return 0 if router.handle_health(ctx) else 1
        finally:
            ctx.client.close()

    if sub == "dashboard":
        return run_view_action(ctx, "/")
    if sub == "import":
        return run_view_action(ctx, "/import", lambda view: view.submit(args.url))
    if sub == "auth":
        return run_view_action(ctx, "/import", lambda view: view.authenticate(Platform(args.platform)))
    if sub == "playlists":
        return run_view_action(ctx, "/playlists", lambda view: view.set_filter(args.platform))
    if sub == "convert":
        return run_view_action(ctx, "/playlists", lambda view: view.convert(args.playlist_id))
    if sub == "sync":
        return run_view_action(ctx, "/playlists", lambda view: view.sync(args.playlist_id))
    if sub == "delete-playlist":
        return run_view_action(ctx, "/playlists", lambda view: view.delete(args.playlist_id))
    if sub == "songs":
        return run_view_action(ctx, "/songs", lambda view: view.set_query(args.search))
    if sub == "song":
        return run_view_action(ctx, "/songs", lambda view: view.select(args.song_id))
    if sub == "delete-song":
        return run_view_action(ctx, "/songs", lambda view: view.delete(args.song_id))

    raise ValueError(f"Unknown subcommand: {sub}")


def main() -> None:
    """Main entry point for the playlist-bridge command."""
    parser = build_parser()
    args = parser.parse_args()

    if args.api_url:
        os.environ["PLAYLIST_BRIDGE_API_URL"] = args.api_url

    try:
        ctx = bootstrap()
    except ValueError as e:
        log(f"❌ Invalid configuration: {e}", level="error")
        sys.exit(1)

    if args.subcommand is None:
        interactive_mode(ctx=ctx)
        return
    if args.subcommand == "shell":
        interactive_mode(args.path, ctx=ctx)
        return

    sys.exit(dispatch(args, ctx))


if __name__ == "__main__":
    main()
