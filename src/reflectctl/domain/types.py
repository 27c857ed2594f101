"""Document families and classification enums.

These enums define the review kinds, feed query vocabulary, goal
timeframes, and the framework and document allowlists.
"""

from __future__ import annotations

from enum import StrEnum


class ReviewType(StrEnum):
    """Review families that can appear in the aggregated feed."""

    DAILY = "daily"
    WEEKLY = "weekly"


class ReviewFilter(StrEnum):
    """The ``type`` filter accepted by the review feed."""

    ALL = "all"
    DAILY = "daily"
    WEEKLY = "weekly"


class SortOrder(StrEnum):
    """Date ordering of the review feed."""

    DESC = "desc"
    ASC = "asc"


class FrictionAction(StrEnum):
    """Checkbox choice under a daily review's friction point."""

    NEEDS_ACTION = "needs-action"
    ACKNOWLEDGMENT = "acknowledgment"


class Timeframe(StrEnum):
    """Goal horizons, each stored in its own document."""

    ONE_YEAR = "1-year"
    THREE_YEAR = "3-year"
    TEN_YEAR = "10-year"

    @property
    def filename(self) -> str:
        """``1-year`` -> ``1_year.md``."""
        return f"{self.value.replace('-', '_')}.md"


class FrameworkName(StrEnum):
    """Framework documents reachable by name."""

    ANNUAL_REVIEW = "annual-review"
    VIVID_VISION = "vivid-vision"
    IDEAL_LIFE_COSTING = "ideal-life-costing"

    @property
    def filename(self) -> str:
        """``annual-review`` -> ``annual_review.md``."""
        return f"{self.value.replace('-', '_')}.md"


class DocumentName(StrEnum):
    """Single free-form documents kept at the top of the data root."""

    MEMORY = "memory"
    NORTH_STAR = "north-star"
    PRINCIPLES = "principles"

    @property
    def filename(self) -> str:
        """``north-star`` -> ``north_star.md``."""
        return f"{self.value.replace('-', '_')}.md"


# Life Map domains, rated in daily reviews and scored in the Life Map table.
LIFE_MAP_DOMAINS: tuple[str, ...] = (
    "career",
    "relationships",
    "health",
    "meaning",
    "finances",
    "fun",
)
