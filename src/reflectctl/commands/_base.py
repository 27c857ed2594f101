"""Click base classes with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints copy-pasteable invocations
and exits. Groups hand the same classes down to their subcommands and
nested groups, so only top-level groups need ``cls=ReflectGroup``.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds the eager ``--examples`` option when *examples* text is given."""

    params: list[click.Parameter]
    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class ReflectCommand(_ExamplesMixin, click.Command):
    """A command accepting ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class ReflectGroup(_ExamplesMixin, click.Group):
    """A group accepting ``examples=`` whose children do too."""

    command_class = ReflectCommand
    group_class = type

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
