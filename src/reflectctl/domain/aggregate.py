"""Review feed aggregation across the daily and weekly families.

:func:`aggregate_reviews` is pure: callers hand it ``(name, text)`` pairs
already read from storage. Entries that are not markdown, look like
templates, or are dot-files are dropped before parsing. The sort is
stable, so reviews sharing a date keep their input order (daily entries
first, then weekly).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict

from reflectctl.domain.daily import parse_daily_review
from reflectctl.domain.records import DailySummary, ReviewSummaryItem, WeeklySummary
from reflectctl.domain.types import ReviewFilter, ReviewType, SortOrder
from reflectctl.domain.weekly import parse_weekly_review

logger = logging.getLogger(__name__)

RawDocument = tuple[str, str]


class ReviewQuery(BaseModel):
    """Feed query; constructing one validates the enum values."""

    model_config = ConfigDict(frozen=True)

    type: ReviewFilter = ReviewFilter.ALL
    sort: SortOrder = SortOrder.DESC


def is_review_entry(name: str) -> bool:
    """True for ``*.md`` entries that are neither templates nor dot-files."""
    filename = PurePath(name).name
    if filename.startswith("."):
        return False
    if not filename.lower().endswith(".md"):
        return False
    return "template" not in filename.lower()


def _stem(name: str) -> str:
    return PurePath(name).stem


def summarize_daily(name: str, text: str) -> DailySummary:
    record = parse_daily_review(text, name)
    return DailySummary(
        date=record.date or _stem(name),
        energy_level=record.energy_level or 0,
        tomorrow_priority=record.tomorrow_priority or "",
        file_path=name,
    )


def summarize_weekly(name: str, text: str) -> WeeklySummary:
    record = parse_weekly_review(text, name)
    return WeeklySummary(
        date=record.date or _stem(name),
        week_number=record.week_number or 0,
        moved_needle=record.moved_needle or "",
        file_path=name,
    )


def _summaries(
    entries: Iterable[RawDocument], review_type: ReviewType
) -> list[ReviewSummaryItem]:
    summarize = summarize_daily if review_type is ReviewType.DAILY else summarize_weekly
    items: list[ReviewSummaryItem] = []
    for name, text in entries:
        if not is_review_entry(name):
            logger.debug("Skipping non-review entry %s", name)
            continue
        items.append(summarize(name, text))
    return items


def aggregate_reviews(
    daily_raw: Sequence[RawDocument],
    weekly_raw: Sequence[RawDocument],
    query: ReviewQuery | None = None,
) -> list[ReviewSummaryItem]:
    """Merge, filter, and sort review summaries.

    Args:
        daily_raw: ``(name, text)`` pairs from the daily directory.
        weekly_raw: ``(name, text)`` pairs from the weekly directory.
        query: Type filter and sort order; defaults to all, descending.
    """
    query = query or ReviewQuery()

    items: list[ReviewSummaryItem] = []
    if query.type in (ReviewFilter.ALL, ReviewFilter.DAILY):
        items.extend(_summaries(daily_raw, ReviewType.DAILY))
    if query.type in (ReviewFilter.ALL, ReviewFilter.WEEKLY):
        items.extend(_summaries(weekly_raw, ReviewType.WEEKLY))

    return sorted(items, key=lambda item: item.date, reverse=query.sort is SortOrder.DESC)
