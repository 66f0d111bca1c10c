"""Centralized Rich Console management.

A single Rich Console instance shared by output helpers and view rendering,
so nothing needs to import a console from the entry point.
"""

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich Console instance.

    Returns:
        Console: The global Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console()
    return _console
