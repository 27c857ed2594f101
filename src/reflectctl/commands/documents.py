"""Command group: memory, north-star, and principles documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from reflectctl.commands._base import ReflectGroup
from reflectctl.commands._input import content_option
from reflectctl.services.documents import DocumentService

if TYPE_CHECKING:
    from reflectctl.commands._context import AppContext

_DOCUMENT_EXAMPLES = """\
  reflectctl doc get principles
  reflectctl doc save memory --file memory.md
  cat north_star.md | reflectctl doc save north-star"""

_NAME_HELP = "NAME is one of memory, north-star, principles."


@click.group(name="doc", cls=ReflectGroup, examples=_DOCUMENT_EXAMPLES)
@click.pass_obj
def document(app: AppContext) -> None:
    """Memory, north star, and principles documents."""


@document.command(epilog=_NAME_HELP)
@click.argument("name")
@click.pass_obj
def get(app: AppContext, name: str) -> None:
    """Show the document NAME."""
    app.emit(DocumentService(app.workspace).get_document(name))


@document.command(epilog=_NAME_HELP)
@click.argument("name")
@content_option
@click.pass_obj
def save(app: AppContext, name: str, source: Any) -> None:
    """Replace the document NAME."""
    app.emit(DocumentService(app.workspace).save_document(name, source.read()))
