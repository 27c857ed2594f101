"""Root CLI group for reflectctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from reflectctl import __version__
from reflectctl.commands import register_commands
from reflectctl.commands._context import AppContext
from reflectctl.config.settings import ReflectSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="reflectctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--root",
    "data_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Data directory (default: config file's directory, else CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_root: Path | None,
) -> None:
    """reflectctl: reviews, goals, the Life Map, and life documents."""
    ctx.ensure_object(dict)
    settings = ReflectSettings.from_cli(
        config_path=config_path,
        data_root=data_root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
