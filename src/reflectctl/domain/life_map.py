"""Life Map assessment table.

The Life Map document is free-form markdown around one table::

    | Domain | Score (1-10) | Brief Assessment |
    |--------|--------------|------------------|
    | Career | 8 | Strong momentum, good team |

Rows are matched by their first cell, case-insensitively, against the six
Life Map domains; header, divider and unknown rows are ignored. Parsing is
permissive: a score cell is read up to its first non-numeric character and
truncated, and a cell with no leading number scores 0. Updates rewrite the
domain rows in place and leave every other line untouched.
"""

from __future__ import annotations

import math
import re
from typing import Annotated, Any

from pydantic import AllowInfNan, Field, Strict, StrictInt

from reflectctl.domain.records import Record
from reflectctl.domain.types import LIFE_MAP_DOMAINS

LIFE_MAP_FILENAME = "life_map.md"

TABLE_HEADER = "| Domain | Score (1-10) | Brief Assessment |"
TABLE_RULE = "|--------|--------------|------------------|"

NEW_LIFE_MAP = "# Life Map\n"

MIN_SCORE = 1
MAX_SCORE = 10

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_CELL_RE = re.compile(r"(?<!\\)\|")


class LifeMapDomain(Record):
    """One row of the assessment table."""

    score: int = 0
    assessment: str = ""


class LifeMap(Record):
    """All six domains; rows missing from the document stay at score 0."""

    career: LifeMapDomain = Field(default_factory=LifeMapDomain)
    relationships: LifeMapDomain = Field(default_factory=LifeMapDomain)
    health: LifeMapDomain = Field(default_factory=LifeMapDomain)
    meaning: LifeMapDomain = Field(default_factory=LifeMapDomain)
    finances: LifeMapDomain = Field(default_factory=LifeMapDomain)
    fun: LifeMapDomain = Field(default_factory=LifeMapDomain)

    def chart_data(self) -> list[dict[str, Any]]:
        """``[{domain, score}]`` in domain order, for radar charts."""
        return [
            {"domain": key.capitalize(), "score": getattr(self, key).score}
            for key in LIFE_MAP_DOMAINS
        ]

    def total(self) -> int:
        return sum(getattr(self, key).score for key in LIFE_MAP_DOMAINS)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_score(cell: str) -> int:
    """Leading number of *cell*, truncated toward zero; 0 if there is none.

    Examples:
        >>> parse_score("8.5")
        8
        >>> parse_score("n/a")
        0
    """
    m = _NUMBER_RE.match(cell.strip())
    if m is None:
        return 0
    value = float(m.group())
    return math.trunc(value) if math.isfinite(value) else 0


def _parse_row(line: str) -> tuple[str, LifeMapDomain] | None:
    stripped = line.strip()
    if not stripped.startswith("|"):
        return None
    cells = [cell.strip().replace("\\|", "|") for cell in _CELL_RE.split(stripped)]
    if len(cells) < 2:
        return None
    key = cells[1].lower()
    if key not in LIFE_MAP_DOMAINS:
        return None
    score = parse_score(cells[2]) if len(cells) > 2 else 0
    assessment = cells[3] if len(cells) > 3 else ""
    return key, LifeMapDomain(score=score, assessment=assessment)


def parse_life_map(raw: str) -> LifeMap:
    """Read the domain rows of *raw*; a later row for a domain wins."""
    rows: dict[str, LifeMapDomain] = {}
    for line in raw.splitlines():
        parsed = _parse_row(line)
        if parsed is not None:
            key, domain = parsed
            rows[key] = domain
    return LifeMap(**rows)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _format_row(key: str, domain: LifeMapDomain) -> str:
    # A table cell is one line; pipes are escaped so the row still splits.
    assessment = " ".join(domain.assessment.split()).replace("|", "\\|")
    return f"| {key.capitalize()} | {domain.score} | {assessment} |"


def serialize_table(life_map: LifeMap) -> str:
    """The full assessment table, header included, in domain order."""
    rows = [_format_row(key, getattr(life_map, key)) for key in LIFE_MAP_DOMAINS]
    return "\n".join([TABLE_HEADER, TABLE_RULE, *rows]) + "\n"


def update_life_map(raw: str, life_map: LifeMap) -> str:
    """Rewrite the domain rows of *raw* to match *life_map*.

    Existing rows are replaced where they stand. Domains with no row are
    inserted after the last existing row, and a document with no rows at
    all gets a fresh table appended.
    """
    rows = {key: _format_row(key, getattr(life_map, key)) for key in LIFE_MAP_DOMAINS}
    out: list[str] = []
    seen: set[str] = set()
    after_last_row = 0
    for line in raw.splitlines(keepends=True):
        parsed = _parse_row(line)
        if parsed is None:
            out.append(line)
            continue
        key = parsed[0]
        out.append(rows[key] + ("\n" if line.endswith("\n") else ""))
        seen.add(key)
        after_last_row = len(out)

    missing = [rows[key] + "\n" for key in LIFE_MAP_DOMAINS if key not in seen]
    if not missing:
        return "".join(out)

    if not seen:
        text = "".join(out)
        if text and not text.endswith("\n"):
            text += "\n"
        return text + ("\n" if text else "") + serialize_table(life_map)

    if not out[after_last_row - 1].endswith("\n"):
        out[after_last_row - 1] += "\n"
    out[after_last_row:after_last_row] = missing
    return "".join(out)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

_Score = StrictInt | Annotated[float, Strict(), AllowInfNan(False)]


def clamp_score(score: float) -> int:
    """Truncate *score* and pin it to the 1-10 range."""
    return max(MIN_SCORE, min(MAX_SCORE, math.trunc(score)))


class LifeMapDomainUpdate(Record):
    """Changes to one domain; omitted fields keep their stored value."""

    score: _Score | None = None
    assessment: str | None = None


class LifeMapDomainUpdates(Record):
    career: LifeMapDomainUpdate | None = None
    relationships: LifeMapDomainUpdate | None = None
    health: LifeMapDomainUpdate | None = None
    meaning: LifeMapDomainUpdate | None = None
    finances: LifeMapDomainUpdate | None = None
    fun: LifeMapDomainUpdate | None = None


class LifeMapForm(Record):
    """Validated input for a partial Life Map update.

    Scores must be numbers; they are truncated and clamped to 1-10 when
    applied. Keys other than the six domains are ignored.
    """

    domains: LifeMapDomainUpdates

    def apply(self, life_map: LifeMap) -> LifeMap:
        changes: dict[str, LifeMapDomain] = {}
        for key in LIFE_MAP_DOMAINS:
            patch: LifeMapDomainUpdate | None = getattr(self.domains, key)
            if patch is None:
                continue
            current: LifeMapDomain = getattr(life_map, key)
            changes[key] = LifeMapDomain(
                score=current.score if patch.score is None else clamp_score(patch.score),
                assessment=current.assessment if patch.assessment is None else patch.assessment,
            )
        return life_map.model_copy(update=changes)
