"""Rich Console factory and theme for reflectctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

REFLECT_THEME = Theme(
    {
        "reflect.ok": "bold green",
        "reflect.error": "bold red",
        "reflect.warning": "bold yellow",
        "reflect.op": "bold cyan",
        "reflect.key": "dim",
        "reflect.date": "bold blue",
        "reflect.path": "dim",
        "reflect.title": "bold",
        "reflect.type.daily": "green",
        "reflect.type.weekly": "magenta",
        "reflect.status.on-track": "green",
        "reflect.status.needs-attention": "yellow",
        "reflect.status.behind": "red",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "daily": "reflect.type.daily",
    "weekly": "reflect.type.weekly",
}

_STATUS_STYLES: dict[str, str] = {
    "On Track": "reflect.status.on-track",
    "Needs Attention": "reflect.status.needs-attention",
    "Behind": "reflect.status.behind",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=REFLECT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(review_type: str) -> str:
    """Return the Rich style name for a review family."""
    return _TYPE_STYLES.get(review_type, "")


def style_for_status(status: str) -> str:
    """Return the Rich style name for a canonical goal status."""
    return _STATUS_STYLES.get(status, "")
