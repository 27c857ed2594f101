"""Command group: the combined review feed."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reflectctl.commands._base import ReflectGroup
from reflectctl.services.reviews import ReviewService

if TYPE_CHECKING:
    from reflectctl.commands._context import AppContext


@click.group(cls=ReflectGroup)
@click.pass_obj
def reviews(app: AppContext) -> None:
    """Daily and weekly reviews as one feed."""


@reviews.command(
    name="list",
    examples="""\
  reflectctl reviews list
  reflectctl reviews list --type weekly
  reflectctl --json reviews list --type all --sort asc
  reflectctl -q reviews list""",
)
@click.option("--type", "review_type", default="all", help="all, daily, or weekly.")
@click.option("--sort", default=None, help="desc (newest first) or asc.")
@click.pass_obj
def list_cmd(app: AppContext, review_type: str, sort: str | None) -> None:
    """List daily and weekly reviews by date."""
    app.emit(ReviewService(app.workspace).list_reviews(review_type, sort))
