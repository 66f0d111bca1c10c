"""
Interactive shell for playlist-bridge.

Loads configuration, sets up logging, routes to the dashboard and then
reads commands until the user quits.
"""

import locale
import shlex
from pathlib import Path
from typing import Optional

from loguru import logger

from playlist_bridge import router
from playlist_bridge.context import AppContext
from playlist_bridge.core import config
from playlist_bridge.core.config import Config, get_data_dir
from playlist_bridge.core.output import log, setup_loguru

PROMPT = "[bold cyan]playlist-bridge[/bold cyan] [dim]{path}[/dim] > "


def init_logging(current_config: Config) -> Path:
    """Initialize loguru from the logging config section."""
    log_file = (
        Path(current_config.logging.log_file)
        if current_config.logging.log_file
        else get_data_dir() / "playlist-bridge.log"
    )
    setup_loguru(
        log_file,
        level=current_config.logging.level.upper(),
        console_output=current_config.logging.console_output,
    )
    return log_file


def init_locale() -> None:
    """Apply the user's LC_TIME so dates render in their locale."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not apply locale for dates: {e}")


def bootstrap(current_config: Optional[Config] = None) -> AppContext:
    """Load config, initialize logging and build the application context."""
    if current_config is None:
        current_config = config.load_config()
    init_logging(current_config)
    init_locale()
    logger.info(f"Backend: {current_config.api.base_url}")
    return AppContext.create(current_config)


def run_shell(ctx: AppContext, start_path: str = "/") -> AppContext:
    """Read-eval-render loop over router.handle_command."""
    ctx = router.navigate(ctx, start_path)
    should_continue = True

    while should_continue:
        ctx.console.print(router.render_view(ctx))
        try:
            line = ctx.console.input(PROMPT.format(path=ctx.path))
        except (EOFError, KeyboardInterrupt):
            ctx.console.print()
            break

        try:
            parts = shlex.split(line)
        except ValueError as e:
            log(f"Could not parse command: {e}", level="warning")
            continue
        if not parts:
            continue

        ctx, should_continue = router.handle_command(ctx, parts[0], parts[1:])

    return ctx


def interactive_mode(start_path: str = "/", ctx: Optional[AppContext] = None) -> None:
    """Run the interactive command loop."""
    if ctx is None:
        ctx = bootstrap()
    try:
        ctx = run_shell(ctx, start_path)
    finally:
        if ctx.view is not None:
            ctx.view.unmount()
        ctx.client.close()
        logger.info("Shell exited")
