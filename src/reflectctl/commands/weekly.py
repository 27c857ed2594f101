"""Command group: weekly reviews."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

import click

from reflectctl.commands._base import ReflectGroup
from reflectctl.commands._input import payload_option, read_payload
from reflectctl.domain.types import ReviewType
from reflectctl.services.reviews import ReviewService

if TYPE_CHECKING:
    from collections.abc import Callable

    from reflectctl.commands._context import AppContext

_WEEKLY_EXAMPLES = """\
  reflectctl weekly get 2025-12-29
  reflectctl weekly create --from-json week.json
  reflectctl weekly create --date 2025-12-29 --week 1 --moved-needle "Launched beta" \\
      --noise "Inbox zero" --time-leaks "Meetings" --insight "Batch calls" \\
      --adjustment "No-meeting Wednesday" --duration 18
  reflectctl weekly update 2025-12-29 --from-json week.json
  reflectctl --json weekly list"""


def _current_week() -> tuple[str, int]:
    """Monday of the current ISO week and its week number."""
    today = datetime.date.today()
    monday = today - datetime.timedelta(days=today.weekday())
    return monday.isoformat(), monday.isocalendar().week


def weekly_fields(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the weekly review field options to a command."""
    options = [
        click.option("--week", "week_number", type=int, default=None, help="ISO week number."),
        click.option("--moved-needle", default=None, help="What moved the needle."),
        click.option(
            "--noise", "noise_disguised_as_work", default=None, help="Noise disguised as work."
        ),
        click.option("--time-leaks", default=None, help="Where time leaked."),
        click.option("--insight", "strategic_insight", default=None, help="Strategic insight."),
        click.option(
            "--adjustment",
            "adjustment_for_next_week",
            default=None,
            help="Adjustment for next week.",
        ),
        click.option("--notes", default=None, help="Optional notes."),
        click.option("--duration", type=int, default=None, help="Minutes spent."),
        payload_option,
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group(cls=ReflectGroup, examples=_WEEKLY_EXAMPLES)
@click.pass_obj
def weekly(app: AppContext) -> None:
    """Read, write, and list weekly reviews."""


@weekly.command(
    examples="""\
  reflectctl weekly get 2025-12-29
  reflectctl --json weekly get 2025-12-29"""
)
@click.argument("date")
@click.pass_obj
def get(app: AppContext, date: str) -> None:
    """Show the weekly review starting DATE (YYYY-MM-DD)."""
    app.emit(ReviewService(app.workspace).get_review(ReviewType.WEEKLY, date))


@weekly.command(
    examples="""\
  reflectctl weekly create --from-json week.json
  reflectctl weekly create --date 2025-12-29 --week 1 --from-json week.json"""
)
@click.option("--date", default=None, help="Week starting date (default: this Monday).")
@weekly_fields
@click.pass_obj
def create(app: AppContext, date: str | None, payload_file: Any, **fields: Any) -> None:
    """Create this week's (or --date's) weekly review."""
    payload = read_payload(payload_file, date=date, **fields)
    if "date" not in payload:
        monday, week = _current_week()
        payload["date"] = monday
        payload.setdefault("week_number", week)
    app.emit(ReviewService(app.workspace).create_review(ReviewType.WEEKLY, payload))


@weekly.command(
    examples="""\
  reflectctl weekly update 2025-12-29 --from-json week.json"""
)
@click.argument("date")
@weekly_fields
@click.pass_obj
def update(app: AppContext, date: str, payload_file: Any, **fields: Any) -> None:
    """Replace the weekly review starting DATE."""
    payload = read_payload(payload_file, **fields)
    payload["date"] = date
    app.emit(ReviewService(app.workspace).update_review(ReviewType.WEEKLY, date, payload))


@weekly.command(
    name="list",
    examples="""\
  reflectctl weekly list
  reflectctl --json weekly list --sort asc""",
)
@click.option("--sort", type=click.Choice(["desc", "asc"]), default=None, help="Date order.")
@click.pass_obj
def list_cmd(app: AppContext, sort: str | None) -> None:
    """List weekly reviews."""
    app.emit(ReviewService(app.workspace).list_reviews("weekly", sort))
