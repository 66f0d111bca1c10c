"""Fallback view for unknown paths."""

from rich.console import Group, RenderableType
from rich.text import Text


def render_not_found(path: str) -> RenderableType:
    return Group(
        Text("404 - Page not found", style="bold red"),
        Text(f"No view at {path!r}. Try: go /", style="dim"),
    )
