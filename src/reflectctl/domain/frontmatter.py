"""Frontmatter extraction for review, goal, and framework documents.

Two readers share the same ``---`` delimiter rules:

- :func:`extract_frontmatter` is the line-based ``key: value`` reader every
  codec uses. It is total: a missing, unterminated, or garbled block yields
  an empty mapping and the untouched input.
- :func:`load_metadata` reads the same block through ruamel.yaml so typed
  values (dates, lists) survive for metadata responses.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, NamedTuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONTMATTER_DELIMITER = "---"

_KEY_VALUE_RE = re.compile(r"^\s*([A-Za-z0-9_][\w.-]*)\s*:\s*(.*?)\s*$")


class Frontmatter(NamedTuple):
    """A document split into its leading key/value block and body."""

    frontmatter: dict[str, str]
    body: str


def _split_block(raw: str) -> tuple[list[str], str] | None:
    """Return ``(block_lines, body)`` or None when no closed block leads *raw*."""
    normalized = raw.replace("\r\n", "\n")
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            body = "\n".join(lines[i + 1 :])
            return lines[1:i], body.lstrip("\n")
    return None


def extract_frontmatter(raw: str) -> Frontmatter:
    """Split *raw* into ``(frontmatter, body)``.

    Lines inside the block that are not ``key: value`` pairs are skipped.
    Leading blank lines are stripped from the body.
    """
    split = _split_block(raw)
    if split is None:
        return Frontmatter({}, raw)

    block, body = split
    fm: dict[str, str] = {}
    for line in block:
        m = _KEY_VALUE_RE.match(line)
        if m:
            fm[m.group(1)] = m.group(2)
    return Frontmatter(fm, body)


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def load_metadata(raw: str) -> dict[str, Any]:
    """Load the frontmatter block as YAML for metadata responses.

    Date values become ``YYYY-MM-DD`` strings. Blocks that are not valid
    YAML mappings fall back to the line-based reader.
    """
    split = _split_block(raw)
    if split is None:
        return {}

    block, _body = split
    try:
        data = YAML(typ="safe", pure=True).load("\n".join(block))
    except YAMLError:
        return dict(extract_frontmatter(raw).frontmatter)
    if not isinstance(data, dict):
        return dict(extract_frontmatter(raw).frontmatter)
    return _plain(data)
