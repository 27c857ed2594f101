"""Daily check-in codec.

Parses the daily review template into a :class:`DailyReviewRecord` and
renders records back into the same canonical layout.
"""

from __future__ import annotations

import re
from pathlib import Path

from reflectctl.domain.frontmatter import extract_frontmatter
from reflectctl.domain.records import DailyReviewRecord, DomainRatings
from reflectctl.domain.sections import (
    CaptureMode,
    FieldRule,
    extract_fields,
    find_section,
    parse_date,
    parse_duration,
    parse_int,
    quote_lines,
)
from reflectctl.domain.types import LIFE_MAP_DOMAINS, FrictionAction
from reflectctl.infrastructure.templates import render_document

TEMPLATE_NAME = "daily_review.md.j2"
LIFE_MAP_TEMPLATE_NAME = "life_map_ratings.md.j2"

FRICTION_HEADING = "One Friction Point"
LIFE_MAP_HEADING = "Life Map Ratings"

DAILY_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("date", CaptureMode.INLINE, label="Date"),
    FieldRule("energy_level", CaptureMode.INLINE, label="Energy level (1-10)"),
    FieldRule(
        "energy_factors",
        CaptureMode.SECTION,
        heading="Energy Check",
        label="What's affecting your energy today?",
    ),
    FieldRule("meaningful_win", CaptureMode.BLOCKQUOTE, heading="One Meaningful Win"),
    FieldRule("friction_point", CaptureMode.BLOCKQUOTE, heading=FRICTION_HEADING),
    FieldRule("thing_to_let_go", CaptureMode.BLOCKQUOTE, heading="One Thing to Let Go"),
    FieldRule("tomorrow_priority", CaptureMode.BLOCKQUOTE, heading="One Priority for Tomorrow"),
    FieldRule(
        "notes",
        CaptureMode.SECTION,
        heading="Optional: Brief Notes",
        label="*Anything else worth capturing? Keep it short.*",
    ),
    FieldRule("duration", CaptureMode.INLINE, label="Time to complete"),
)

_NEEDS_ACTION_RE = re.compile(r"\[x\]\s*Needs action", re.IGNORECASE)
_ACKNOWLEDGMENT_RE = re.compile(r"\[x\]\s*Just needs acknowledgment", re.IGNORECASE)


def _friction_action(body: str) -> FrictionAction | None:
    section = find_section(body, FRICTION_HEADING)
    if section is None:
        return None
    if _NEEDS_ACTION_RE.search(section):
        return FrictionAction.NEEDS_ACTION
    if _ACKNOWLEDGMENT_RE.search(section):
        return FrictionAction.ACKNOWLEDGMENT
    return None


def _domain_ratings(body: str) -> DomainRatings | None:
    section = find_section(body, LIFE_MAP_HEADING)
    if section is None:
        return None

    ratings: dict[str, int] = {}
    for domain in LIFE_MAP_DOMAINS:
        m = re.search(rf"{domain}:\s*(\d+)", section, re.IGNORECASE)
        if m:
            value = int(m.group(1))
            if 0 <= value <= 10:
                ratings[domain] = value

    result = DomainRatings(**ratings)
    return result if result.any_rated() else None


def parse_daily_review(raw: str, file_path: str) -> DailyReviewRecord:
    """Parse a daily review document.

    Missing, malformed, or placeholder fields come back as None; this
    function never raises on document content.
    """
    _fm, body = extract_frontmatter(raw)
    fields = extract_fields(body, DAILY_FIELDS)

    return DailyReviewRecord(
        date=parse_date(fields["date"]),
        energy_level=parse_int(fields["energy_level"]),
        energy_factors=fields["energy_factors"],
        meaningful_win=fields["meaningful_win"],
        friction_point=fields["friction_point"],
        friction_action=_friction_action(body),
        thing_to_let_go=fields["thing_to_let_go"],
        tomorrow_priority=fields["tomorrow_priority"],
        notes=fields["notes"],
        duration=parse_duration(fields["duration"]),
        domain_ratings=_domain_ratings(body),
        file_path=file_path,
    )


def _text(value: object | None) -> str:
    return "" if value is None else str(value)


def serialize_daily_review(record: DailyReviewRecord, *, data_root: Path | None = None) -> str:
    """Render *record* in the canonical daily check-in layout."""
    life_map = ""
    if record.domain_ratings is not None and record.domain_ratings.any_rated():
        life_map = render_document(
            LIFE_MAP_TEMPLATE_NAME, data_root=data_root, ratings=record.domain_ratings
        )

    action = record.friction_action
    return render_document(
        TEMPLATE_NAME,
        data_root=data_root,
        date=_text(record.date),
        energy_level=_text(record.energy_level),
        energy_factors=_text(record.energy_factors),
        meaningful_win=quote_lines(_text(record.meaningful_win)),
        friction_point=quote_lines(_text(record.friction_point)),
        needs_action="x" if action is FrictionAction.NEEDS_ACTION else " ",
        acknowledgment="x" if action is FrictionAction.ACKNOWLEDGMENT else " ",
        thing_to_let_go=quote_lines(_text(record.thing_to_let_go)),
        tomorrow_priority=quote_lines(_text(record.tomorrow_priority)),
        notes=_text(record.notes),
        life_map=life_map,
        duration="" if record.duration is None else f"{record.duration} minutes",
    )
