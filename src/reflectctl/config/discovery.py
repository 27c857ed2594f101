"""Locating and reading ``reflectctl.toml``.

The data root and the config file are resolved together: ``--root`` wins,
otherwise the directory holding the discovered config file, otherwise the
CWD. ``REFLECTCTL_CONFIG`` pins the file and disables the walk-up.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "reflectctl.toml"
CONFIG_ENV_VAR = "REFLECTCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """The nearest ``reflectctl.toml`` at or above *start* (default: CWD).

    A set ``REFLECTCTL_CONFIG`` is authoritative: its file is returned if
    it exists and nothing is returned otherwise.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate(config_path: str | None, data_root: Path | None) -> tuple[Path | None, Path]:
    """Resolve ``(config file, data root)`` for a CLI invocation.

    An explicit *config_path* that does not exist means "no config file".
    """
    if config_path:
        explicit = Path(config_path)
        toml_path = explicit if explicit.is_file() else None
    else:
        toml_path = find_config(data_root)

    if data_root is not None:
        return toml_path, data_root
    return toml_path, toml_path.parent if toml_path else Path.cwd()


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; malformed TOML becomes a user-facing Click error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
