"""Subcommand modules for reflectctl.

Provides register_commands() which uses deferred imports to keep
``reflectctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from reflectctl.commands.daily import daily
    from reflectctl.commands.documents import document
    from reflectctl.commands.frameworks import framework
    from reflectctl.commands.goals import goals
    from reflectctl.commands.life_map import life_map
    from reflectctl.commands.reviews import reviews
    from reflectctl.commands.weekly import weekly

    cli.add_command(daily)
    cli.add_command(weekly)
    cli.add_command(reviews)
    cli.add_command(goals)
    cli.add_command(framework)
    cli.add_command(life_map)
    cli.add_command(document)
