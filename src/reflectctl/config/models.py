"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, reflectctl.toml only contains
overrides. An empty data directory works with no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from reflectctl.domain.types import SortOrder, Timeframe


class PathsConfig(BaseModel):
    """[paths] section: directories relative to the data root."""

    model_config = {"frozen": True}

    daily: str = "reviews/daily"
    weekly: str = "reviews/weekly"
    goals: str = "goals"
    drafts: str = "goals/.drafts"
    frameworks: str = "frameworks"
    # memory, north-star and principles; empty means the data root itself
    documents: str = ""


class GoalsConfig(BaseModel):
    """[goals] section."""

    model_config = {"frozen": True}

    snapshot_limit: int = Field(default=5, ge=1)
    description_limit: int = Field(default=100, ge=1)
    snapshot_timeframe: Timeframe = Timeframe.ONE_YEAR


class ReviewsConfig(BaseModel):
    """[reviews] section."""

    model_config = {"frozen": True}

    default_sort: SortOrder = SortOrder.DESC
