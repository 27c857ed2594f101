"""Command group: daily check-ins."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

import click

from reflectctl.commands._base import ReflectGroup
from reflectctl.commands._input import payload_option, read_payload
from reflectctl.domain.types import LIFE_MAP_DOMAINS, FrictionAction, ReviewType
from reflectctl.services.reviews import ReviewService

if TYPE_CHECKING:
    from collections.abc import Callable

    from reflectctl.commands._context import AppContext

_DAILY_EXAMPLES = """\
  reflectctl daily get 2026-01-05
  reflectctl daily create --energy 7 --win "Shipped the parser" --priority "Write tests"
  reflectctl daily create --date 2026-01-05 --energy 6 --win "Ran 5k" \\
      --priority "Call mom" --friction "Slow build" --friction-action needs-action
  reflectctl daily create --from-json today.json --rating health=8 --rating fun=4
  reflectctl daily update 2026-01-05 --from-json today.json
  reflectctl --json daily list --sort asc"""


def _parse_ratings(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> dict[str, int] | None:
    if not value:
        return None
    ratings: dict[str, int] = {}
    for item in value:
        domain, sep, score = item.partition("=")
        domain = domain.strip().lower()
        if not sep or domain not in LIFE_MAP_DOMAINS or not score.strip().isdigit():
            allowed = ", ".join(LIFE_MAP_DOMAINS)
            raise click.BadParameter(f"{item!r} is not DOMAIN=N with DOMAIN one of: {allowed}")
        ratings[domain] = int(score)
    return ratings


def daily_fields(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the daily review field options to a command."""
    options = [
        click.option("--energy", "energy_level", type=int, help="Energy level (1-10)."),
        click.option("--energy-factors", default=None, help="What's affecting your energy."),
        click.option("--win", "meaningful_win", default=None, help="One meaningful win."),
        click.option("--friction", "friction_point", default=None, help="One friction point."),
        click.option(
            "--friction-action",
            type=click.Choice([a.value for a in FrictionAction]),
            default=None,
            help="Whether the friction point needs action.",
        ),
        click.option("--let-go", "thing_to_let_go", default=None, help="One thing to let go."),
        click.option(
            "--priority", "tomorrow_priority", default=None, help="One priority for tomorrow."
        ),
        click.option("--notes", default=None, help="Brief notes."),
        click.option("--duration", type=int, default=None, help="Minutes spent."),
        click.option(
            "--rating",
            "domain_ratings",
            multiple=True,
            callback=_parse_ratings,
            help="Life Map rating as DOMAIN=N (repeatable).",
        ),
        payload_option,
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group(cls=ReflectGroup, examples=_DAILY_EXAMPLES)
@click.pass_obj
def daily(app: AppContext) -> None:
    """Read, write, and list daily check-ins."""


@daily.command(
    examples="""\
  reflectctl daily get 2026-01-05
  reflectctl --json daily get 2026-01-05"""
)
@click.argument("date")
@click.pass_obj
def get(app: AppContext, date: str) -> None:
    """Show the daily review for DATE (YYYY-MM-DD)."""
    app.emit(ReviewService(app.workspace).get_review(ReviewType.DAILY, date))


@daily.command(
    examples="""\
  reflectctl daily create --energy 7 --win "Shipped it" --priority "Write docs"
  reflectctl daily create --date 2026-01-05 --from-json review.json"""
)
@click.option("--date", default=None, help="Review date (default: today).")
@daily_fields
@click.pass_obj
def create(app: AppContext, date: str | None, payload_file: Any, **fields: Any) -> None:
    """Create today's (or --date's) daily review."""
    payload = read_payload(payload_file, date=date, **fields)
    payload.setdefault("date", datetime.date.today().isoformat())
    app.emit(ReviewService(app.workspace).create_review(ReviewType.DAILY, payload))


@daily.command(
    examples="""\
  reflectctl daily update 2026-01-05 --energy 8 --win "Fixed it" --priority "Rest"
  reflectctl daily update 2026-01-05 --from-json review.json"""
)
@click.argument("date")
@daily_fields
@click.pass_obj
def update(app: AppContext, date: str, payload_file: Any, **fields: Any) -> None:
    """Replace the daily review for DATE."""
    payload = read_payload(payload_file, **fields)
    payload["date"] = date
    app.emit(ReviewService(app.workspace).update_review(ReviewType.DAILY, date, payload))


@daily.command(
    name="list",
    examples="""\
  reflectctl daily list
  reflectctl --json daily list --sort asc""",
)
@click.option("--sort", type=click.Choice(["desc", "asc"]), default=None, help="Date order.")
@click.pass_obj
def list_cmd(app: AppContext, sort: str | None) -> None:
    """List daily reviews."""
    app.emit(ReviewService(app.workspace).list_reviews("daily", sort))
