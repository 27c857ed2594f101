"""Weekly review codec.

The five reflection sections are blockquotes under fixed ``##`` headings.
For any record with every required field set, parsing the serialized
text yields an equal record.
"""

from __future__ import annotations

from pathlib import Path

from reflectctl.domain.frontmatter import extract_frontmatter
from reflectctl.domain.records import WeeklyReviewRecord
from reflectctl.domain.sections import (
    CaptureMode,
    FieldRule,
    extract_fields,
    parse_date,
    parse_duration,
    parse_int,
    quote_lines,
)
from reflectctl.infrastructure.templates import render_document

TEMPLATE_NAME = "weekly_review.md.j2"
EMPTY_DURATION = "___ minutes"

# Required reflection sections, in document order.
WEEKLY_SECTIONS: dict[str, str] = {
    "moved_needle": "What Actually Moved the Needle This Week",
    "noise_disguised_as_work": "What Was Noise Disguised as Work",
    "time_leaks": "Where Your Time Leaked",
    "strategic_insight": "One Strategic Insight",
    "adjustment_for_next_week": "One Adjustment for Next Week",
}

WEEKLY_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("date", CaptureMode.INLINE, label="Week Starting"),
    FieldRule("week_number", CaptureMode.INLINE, label="Week Number"),
    *(
        FieldRule(name, CaptureMode.BLOCKQUOTE, heading=heading)
        for name, heading in WEEKLY_SECTIONS.items()
    ),
    FieldRule(
        "notes",
        CaptureMode.SECTION,
        heading="Optional: Notes",
        label="*Anything else worth capturing?*",
    ),
    FieldRule("duration", CaptureMode.INLINE, label="Time to complete"),
)


def _week_number(value: str | None) -> int | None:
    number = parse_int(value)
    if number is None or not 1 <= number <= 53:
        return None
    return number


def parse_weekly_review(raw: str, file_path: str) -> WeeklyReviewRecord:
    """Parse a weekly review document into a (possibly partial) record."""
    _fm, body = extract_frontmatter(raw)
    fields = extract_fields(body, WEEKLY_FIELDS)

    return WeeklyReviewRecord(
        date=parse_date(fields["date"]),
        week_number=_week_number(fields["week_number"]),
        moved_needle=fields["moved_needle"],
        noise_disguised_as_work=fields["noise_disguised_as_work"],
        time_leaks=fields["time_leaks"],
        strategic_insight=fields["strategic_insight"],
        adjustment_for_next_week=fields["adjustment_for_next_week"],
        notes=fields["notes"],
        duration=parse_duration(fields["duration"]),
        file_path=file_path,
    )


def serialize_weekly_review(record: WeeklyReviewRecord, *, data_root: Path | None = None) -> str:
    """Render *record* in the canonical weekly review layout."""
    sections = {
        name: quote_lines(getattr(record, name) or "") for name in WEEKLY_SECTIONS
    }
    return render_document(
        TEMPLATE_NAME,
        data_root=data_root,
        date=record.date or "",
        week_number="" if record.week_number is None else str(record.week_number),
        notes=record.notes or "",
        duration=EMPTY_DURATION if record.duration is None else f"{record.duration} minutes",
        **sections,
    )
