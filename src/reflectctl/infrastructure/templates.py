"""Shared Jinja2 template loading with per-root override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

OVERRIDE_DIR = Path(".reflectctl") / "templates"


def build_template_environment(group: str, *, data_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.reflectctl/templates/`` inside the data
    root. Both a namespaced directory (for example
    ``.reflectctl/templates/documents/``) and the shared root are searched.
    """

    loaders: list[BaseLoader] = []
    if data_root is not None:
        template_root = data_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("reflectctl", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)


def render_document(template_name: str, *, data_root: Path | None = None, **context: object) -> str:
    """Render a document template from the ``documents`` group."""
    env = build_template_environment("documents", data_root=data_root)
    return env.get_template(template_name).render(**context)
