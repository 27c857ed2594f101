"""Command group: goal documents, snapshots, and drafts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from reflectctl.commands._base import ReflectGroup
from reflectctl.commands._input import content_option
from reflectctl.services.drafts import DraftService
from reflectctl.services.goals import GoalsService

if TYPE_CHECKING:
    from reflectctl.commands._context import AppContext

_GOALS_EXAMPLES = """\
  reflectctl goals snapshot
  reflectctl goals get 1-year
  reflectctl goals save 3-year --file goals.md
  cat goals.md | reflectctl goals save 10-year
  reflectctl goals draft save 1-year --file wip.md
  reflectctl goals draft get 1-year
  reflectctl goals draft clear 1-year"""

_TIMEFRAME_HELP = "TIMEFRAME is one of 1-year, 3-year, 10-year."


@click.group(cls=ReflectGroup, examples=_GOALS_EXAMPLES)
@click.pass_obj
def goals(app: AppContext) -> None:
    """Goal documents by timeframe."""


@goals.command(
    examples="""\
  reflectctl goals snapshot
  reflectctl --json goals snapshot"""
)
@click.pass_obj
def snapshot(app: AppContext) -> None:
    """Show the first few goals of the snapshot timeframe."""
    app.emit(GoalsService(app.workspace).snapshot())


@goals.command(epilog=_TIMEFRAME_HELP)
@click.argument("timeframe")
@click.pass_obj
def get(app: AppContext, timeframe: str) -> None:
    """Show the goals document for TIMEFRAME."""
    app.emit(GoalsService(app.workspace).get_goals(timeframe))


@goals.command(epilog=_TIMEFRAME_HELP)
@click.argument("timeframe")
@content_option
@click.pass_obj
def save(app: AppContext, timeframe: str, source: Any) -> None:
    """Replace the goals document for TIMEFRAME and clear its draft."""
    app.emit(GoalsService(app.workspace).save_goals(timeframe, source.read()))


@goals.group(examples=_GOALS_EXAMPLES)
@click.pass_obj
def draft(app: AppContext) -> None:
    """Work-in-progress copies of goal documents."""


@draft.command(name="get", epilog=_TIMEFRAME_HELP)
@click.argument("timeframe")
@click.pass_obj
def draft_get(app: AppContext, timeframe: str) -> None:
    """Show the draft for TIMEFRAME, if any."""
    app.emit(DraftService(app.workspace).get_draft(timeframe))


@draft.command(name="save", epilog=_TIMEFRAME_HELP)
@click.argument("timeframe")
@content_option
@click.pass_obj
def draft_save(app: AppContext, timeframe: str, source: Any) -> None:
    """Save a draft for TIMEFRAME."""
    app.emit(DraftService(app.workspace).save_draft(timeframe, source.read()))


@draft.command(name="clear", epilog=_TIMEFRAME_HELP)
@click.argument("timeframe")
@click.pass_obj
def draft_clear(app: AppContext, timeframe: str) -> None:
    """Discard the draft for TIMEFRAME."""
    app.emit(DraftService(app.workspace).clear_draft(timeframe))
