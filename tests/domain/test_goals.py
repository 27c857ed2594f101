"""Tests for the goals document codec and snapshots."""

from reflectctl.domain.goals import (
    DESCRIPTION_LIMIT,
    goal_snapshot,
    parse_goals,
    truncate_description,
)
from reflectctl.domain.status import CanonicalStatus
from tests.conftest import GOALS_SAMPLE


def _goals_doc(count: int, status: str = "On Track") -> str:
    blocks = "\n".join(f"**Goal {n}:**\n\n*What:*\nGoal number {n}\n" for n in range(1, count + 1))
    return f"---\nstatus: {status}\n---\n\n{blocks}"


class TestTruncateDescription:
    def test_short_text_unchanged(self) -> None:
        assert truncate_description("Run a marathon") == "Run a marathon"

    def test_exactly_at_limit_unchanged(self) -> None:
        text = "x" * DESCRIPTION_LIMIT
        assert truncate_description(text) == text

    def test_long_text_cut_with_ellipsis(self) -> None:
        text = "y" * 150
        result = truncate_description(text)
        assert result == "y" * 100 + "..."
        assert len(result) == 103

    def test_custom_limit(self) -> None:
        assert truncate_description("abcdef", 3) == "abc..."


class TestParseGoals:
    def test_canonical_document(self) -> None:
        doc = parse_goals(GOALS_SAMPLE, "goals/1_year.md")
        assert doc.status is CanonicalStatus.NEEDS_ATTENTION
        assert doc.last_updated == "2026-01-02"
        assert [g.number for g in doc.goals] == [1, 2]

        first, second = doc.goals
        assert first.title == "Goal 1"
        assert first.domain == "Career"
        assert first.description == "Lead the platform migration"
        assert first.why_matters == "It unblocks three teams"
        assert first.success_criteria == "All services on the new stack"
        assert second.domain == "Health"
        assert second.description == "Run a half marathon"
        assert second.why_matters is None

    def test_every_goal_inherits_document_status(self) -> None:
        doc = parse_goals(_goals_doc(3, status="behind"))
        assert {g.status for g in doc.goals} == {CanonicalStatus.BEHIND}

    def test_invalid_status_defaults_to_on_track(self) -> None:
        doc = parse_goals(_goals_doc(2, status="invalid-status-value"))
        assert all(g.status is CanonicalStatus.ON_TRACK for g in doc.goals)

    def test_missing_frontmatter(self) -> None:
        doc = parse_goals("**Goal 1:**\n\n*What:*\nLearn piano\n")
        assert doc.status is CanonicalStatus.ON_TRACK
        assert doc.goals[0].description == "Learn piano"

    def test_no_goal_markers(self) -> None:
        doc = parse_goals("---\nstatus: On Track\n---\n\n# Goals\n\nNothing yet.\n")
        assert doc.goals == []

    def test_bracketed_what_is_kept(self) -> None:
        doc = parse_goals("**Goal 1:**\n\n*What:*\n[Describe your goal]\n")
        assert doc.goals[0].description == "[Describe your goal]"

    def test_bracketed_why_is_unset(self) -> None:
        doc = parse_goals("**Goal 1:**\n\n*What:*\nA\n\n*Why this matters:*\n[Reason]\n")
        assert doc.goals[0].why_matters is None

    def test_long_description_truncated(self) -> None:
        doc = parse_goals(f"**Goal 1:**\n\n*What:*\n{'z' * 120}\n")
        assert doc.goals[0].description == "z" * 100 + "..."

    def test_missing_what_is_empty_description(self) -> None:
        doc = parse_goals("**Goal 4:**\n\n*Why this matters:*\nBecause\n")
        assert doc.goals[0].description == ""
        assert doc.goals[0].number == 4


class TestGoalSnapshot:
    def test_caps_at_five(self) -> None:
        snapshot = goal_snapshot(parse_goals(_goals_doc(8)))
        assert len(snapshot) == 5
        assert snapshot[0] == {
            "title": "Goal 1",
            "description": "Goal number 1",
            "status": "On Track",
        }

    def test_fewer_than_limit(self) -> None:
        assert len(goal_snapshot(parse_goals(_goals_doc(2)))) == 2

    def test_custom_limit(self) -> None:
        assert len(goal_snapshot(parse_goals(_goals_doc(4)), limit=3)) == 3

    def test_empty(self) -> None:
        assert goal_snapshot(parse_goals("")) == []
