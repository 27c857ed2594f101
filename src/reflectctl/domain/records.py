"""Typed records produced by the document codecs.

Records are frozen Pydantic models. Attributes are snake_case in Python
and camelCase in JSON (``model_dump(by_alias=True)``), matching the
response shapes consumed by dashboards.

Parsed records are deliberately permissive: every content field may be
None because codecs never reject a document. Required-ness is enforced
only on input, by the ``*Form`` models at the bottom of this module.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from reflectctl.domain.status import DEFAULT_STATUS, CanonicalStatus
from reflectctl.domain.types import FrictionAction

_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class Record(BaseModel):
    """Base for all records: frozen, camelCase aliases, name population."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json(self) -> dict[str, Any]:
        """JSON-mode dump with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


class DomainRatings(Record):
    """Life Map satisfaction ratings from 1 to 10, 0 meaning not rated."""

    career: int = Field(default=0, ge=0, le=10)
    relationships: int = Field(default=0, ge=0, le=10)
    health: int = Field(default=0, ge=0, le=10)
    meaning: int = Field(default=0, ge=0, le=10)
    finances: int = Field(default=0, ge=0, le=10)
    fun: int = Field(default=0, ge=0, le=10)

    def any_rated(self) -> bool:
        return any(v > 0 for v in self.model_dump().values())


class DailyReviewRecord(Record):
    """A parsed daily check-in."""

    date: str | None = None
    energy_level: int | None = None
    energy_factors: str | None = None
    meaningful_win: str | None = None
    friction_point: str | None = None
    friction_action: FrictionAction | None = None
    thing_to_let_go: str | None = None
    tomorrow_priority: str | None = None
    notes: str | None = None
    duration: int | None = None
    domain_ratings: DomainRatings | None = None
    file_path: str = ""


class WeeklyReviewRecord(Record):
    """A parsed weekly review."""

    date: str | None = None
    week_number: int | None = None
    moved_needle: str | None = None
    noise_disguised_as_work: str | None = None
    time_leaks: str | None = None
    strategic_insight: str | None = None
    adjustment_for_next_week: str | None = None
    notes: str | None = None
    duration: int | None = None
    file_path: str = ""


class DailySummary(Record):
    """Feed entry for a daily review."""

    type: Literal["daily"] = "daily"
    date: str
    energy_level: int = 0
    tomorrow_priority: str = ""
    file_path: str


class WeeklySummary(Record):
    """Feed entry for a weekly review."""

    type: Literal["weekly"] = "weekly"
    date: str
    week_number: int = 0
    moved_needle: str = ""
    file_path: str


ReviewSummaryItem = Annotated[DailySummary | WeeklySummary, Field(discriminator="type")]


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------


class GoalRecord(Record):
    """One ``**Goal N:**`` block of a goals document."""

    number: int
    title: str
    domain: str | None = None
    description: str = ""
    why_matters: str | None = None
    success_criteria: str | None = None
    status: CanonicalStatus = DEFAULT_STATUS

    def snapshot(self) -> dict[str, str]:
        """The ``{title, description, status}`` shape used by snapshots."""
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
        }


class GoalsDocument(Record):
    """A parsed goals document for one timeframe."""

    frontmatter: dict[str, str] = Field(default_factory=dict)
    status: CanonicalStatus = DEFAULT_STATUS
    last_updated: str | None = None
    goals: list[GoalRecord] = Field(default_factory=list)
    file_path: str = ""


# ---------------------------------------------------------------------------
# Input forms
# ---------------------------------------------------------------------------


class DailyReviewForm(Record):
    """Validated input for creating or updating a daily review."""

    date: str = Field(pattern=_DATE_PATTERN)
    energy_level: int = Field(ge=1, le=10)
    energy_factors: str | None = None
    meaningful_win: str = Field(min_length=1)
    friction_point: str | None = None
    friction_action: FrictionAction | None = None
    thing_to_let_go: str | None = None
    tomorrow_priority: str = Field(min_length=1)
    notes: str | None = None
    duration: int | None = Field(default=None, ge=0)
    domain_ratings: DomainRatings | None = None

    def to_record(self, file_path: str) -> DailyReviewRecord:
        return DailyReviewRecord(**self.model_dump(), file_path=file_path)


class WeeklyReviewForm(Record):
    """Validated input for creating or updating a weekly review."""

    date: str = Field(pattern=_DATE_PATTERN)
    week_number: int = Field(ge=1, le=53)
    moved_needle: str = Field(min_length=1)
    noise_disguised_as_work: str = Field(min_length=1)
    time_leaks: str = Field(min_length=1)
    strategic_insight: str = Field(min_length=1)
    adjustment_for_next_week: str = Field(min_length=1)
    notes: str | None = None
    duration: int | None = Field(default=None, ge=0)

    def to_record(self, file_path: str) -> WeeklyReviewRecord:
        return WeeklyReviewRecord(**self.model_dump(), file_path=file_path)
