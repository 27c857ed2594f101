"""Command group: framework documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from reflectctl.commands._base import ReflectGroup
from reflectctl.commands._input import content_option
from reflectctl.services.frameworks import FrameworkService

if TYPE_CHECKING:
    from reflectctl.commands._context import AppContext

_FRAMEWORK_EXAMPLES = """\
  reflectctl framework get vivid-vision
  reflectctl framework save annual-review --file annual.md
  reflectctl --json framework get ideal-life-costing"""

_NAME_HELP = "NAME is one of annual-review, vivid-vision, ideal-life-costing."


@click.group(cls=ReflectGroup, examples=_FRAMEWORK_EXAMPLES)
@click.pass_obj
def framework(app: AppContext) -> None:
    """Annual review, vivid vision, and ideal life costing documents."""


@framework.command(epilog=_NAME_HELP)
@click.argument("name")
@click.pass_obj
def get(app: AppContext, name: str) -> None:
    """Show the framework document NAME."""
    app.emit(FrameworkService(app.workspace).get_framework(name))


@framework.command(epilog=_NAME_HELP)
@click.argument("name")
@content_option
@click.pass_obj
def save(app: AppContext, name: str, source: Any) -> None:
    """Replace the framework document NAME."""
    app.emit(FrameworkService(app.workspace).save_framework(name, source.read()))
