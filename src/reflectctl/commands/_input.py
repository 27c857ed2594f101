"""Shared option helpers: document content and JSON payloads."""

from __future__ import annotations

import json
from typing import Any

import click

content_option = click.option(
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default="stdin",
    help="Read document content from a file.",
)

payload_option = click.option(
    "--from-json",
    "payload_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read field values from a JSON object; options override it.",
)


def read_payload(payload_file: Any, **fields: Any) -> dict[str, Any]:
    """Merge a JSON object from *payload_file* with non-None *fields*."""
    payload: dict[str, Any] = {}
    if payload_file is not None:
        try:
            loaded = json.load(payload_file)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"Invalid JSON: {exc}", param_hint="--from-json") from exc
        if not isinstance(loaded, dict):
            raise click.BadParameter("Expected a JSON object", param_hint="--from-json")
        payload.update(loaded)
    payload.update({key: value for key, value in fields.items() if value is not None})
    return payload
