"""Shared pytest fixtures and test helpers for reflectctl tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from reflectctl.config.settings import ReflectSettings
from reflectctl.infrastructure.workspace import Workspace

WEEKLY_SAMPLE = """\
# Weekly Review

**Week Starting:** 2025-12-29
**Week Number:** 1

---

## What Actually Moved the Needle This Week

*Not tasks completed. The outcomes that truly mattered.*

> Shipped the onboarding flow
> and closed two hires

---

## What Was Noise Disguised as Work

*Busy work that felt productive but didn't advance key goals.*

> Reorganizing the task board

---

## Where Your Time Leaked

*Where did hours disappear without meaningful output?*

> Slack threads after 9pm

---

## One Strategic Insight

*What did this week teach you about your work, priorities, or approach?*

> Hiring is the bottleneck

---

## One Adjustment for Next Week

*What one change will you make based on this week's learning?*

> Block mornings for deep work

---

## Optional: Notes

*Anything else worth capturing?*

Felt good overall.

---

**Time to complete:** 18 minutes

*Target: under 20 minutes*
"""

DAILY_SAMPLE = """\
# Daily Check-In

**Date:** 2026-01-05

---

## Energy Check

**Energy level (1-10):** 7

*1 = depleted, 5 = functional, 10 = fully charged*

What's affecting your energy today?

Slept well, long walk at lunch

---

## One Meaningful Win

*Not the biggest task completed. The thing that actually mattered.*

> Finished the quarterly plan

---

## One Friction Point

*What's creating resistance? Where are you stuck?*

> Waiting on legal review

- [x] Needs action
- [ ] Just needs acknowledgment

---

## One Thing to Let Go

*What expectation, worry, or 'should' can you release?*

> Answering every email today

---

## One Priority for Tomorrow

*If you only accomplish one thing, what would make tomorrow a success?*

> Draft the hiring plan

---

## Optional: Brief Notes

*Anything else worth capturing? Keep it short.*

Short day.

---

**Time to complete:** 4 minutes
"""

GOALS_SAMPLE = """\
---
status: needs-attention
last_updated: 2026-01-02
---

# 1-Year Goals

### Career

**Goal 1:**

*What:*
Lead the platform migration

*Why this matters:*
It unblocks three teams

*Success criteria:*
All services on the new stack

### Health

**Goal 2:**

*What:*
Run a half marathon
"""


def daily_payload(**overrides: Any) -> dict[str, Any]:
    """A valid daily review form payload."""
    payload: dict[str, Any] = {
        "date": "2026-01-05",
        "energy_level": 7,
        "meaningful_win": "Finished the quarterly plan",
        "tomorrow_priority": "Draft the hiring plan",
    }
    payload.update(overrides)
    return payload


def weekly_payload(**overrides: Any) -> dict[str, Any]:
    """A valid weekly review form payload."""
    payload: dict[str, Any] = {
        "date": "2025-12-29",
        "week_number": 1,
        "moved_needle": "Shipped the onboarding flow",
        "noise_disguised_as_work": "Reorganizing the task board",
        "time_leaks": "Slack threads",
        "strategic_insight": "Hiring is the bottleneck",
        "adjustment_for_next_week": "Block mornings",
    }
    payload.update(overrides)
    return payload


def write_doc(root: Path, relative: str, text: str) -> Path:
    """Write *text* under *root*, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Temporary data directory with the default review layout."""
    (tmp_path / "reviews" / "daily").mkdir(parents=True)
    (tmp_path / "reviews" / "weekly").mkdir(parents=True)
    (tmp_path / "goals").mkdir()
    (tmp_path / "frameworks").mkdir()
    return tmp_path


@pytest.fixture
def workspace(data_root: Path, monkeypatch: pytest.MonkeyPatch) -> Workspace:
    """Workspace over the temp data root with default settings."""
    monkeypatch.delenv("REFLECTCTL_CONFIG", raising=False)
    return Workspace(ReflectSettings.from_cli(data_root=data_root))


@pytest.fixture
def _isolated_root(data_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp data root so the CLI reads and writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("REFLECTCTL_CONFIG", raising=False)
    monkeypatch.chdir(data_root)
