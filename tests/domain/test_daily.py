"""Tests for the daily check-in codec."""

from reflectctl.domain.daily import parse_daily_review, serialize_daily_review
from reflectctl.domain.records import DailyReviewRecord, DomainRatings
from reflectctl.domain.types import FrictionAction
from tests.conftest import DAILY_SAMPLE


class TestParseDailyReview:
    def test_canonical_document(self) -> None:
        record = parse_daily_review(DAILY_SAMPLE, "reviews/daily/2026-01-05.md")
        assert record.date == "2026-01-05"
        assert record.energy_level == 7
        assert record.energy_factors == "Slept well, long walk at lunch"
        assert record.meaningful_win == "Finished the quarterly plan"
        assert record.friction_point == "Waiting on legal review"
        assert record.friction_action is FrictionAction.NEEDS_ACTION
        assert record.thing_to_let_go == "Answering every email today"
        assert record.tomorrow_priority == "Draft the hiring plan"
        assert record.notes == "Short day."
        assert record.duration == 4
        assert record.domain_ratings is None

    def test_acknowledgment_checkbox(self) -> None:
        raw = DAILY_SAMPLE.replace("- [x] Needs action", "- [ ] Needs action").replace(
            "- [ ] Just needs acknowledgment", "- [X] Just needs acknowledgment"
        )
        assert parse_daily_review(raw, "x.md").friction_action is FrictionAction.ACKNOWLEDGMENT

    def test_no_checkbox_ticked(self) -> None:
        raw = DAILY_SAMPLE.replace("- [x] Needs action", "- [ ] Needs action")
        assert parse_daily_review(raw, "x.md").friction_action is None

    def test_placeholders_are_unset(self) -> None:
        raw = (
            "**Date:** [YYYY-MM-DD]\n\n## Energy Check\n\n**Energy level (1-10):** [N]\n\n"
            "---\n\n## One Meaningful Win\n\n> [What mattered?]\n"
        )
        record = parse_daily_review(raw, "x.md")
        assert record.date is None
        assert record.energy_level is None
        assert record.meaningful_win is None

    def test_energy_level_not_range_checked(self) -> None:
        raw = "**Energy level (1-10):** 12\n"
        assert parse_daily_review(raw, "x.md").energy_level == 12

    def test_empty_document(self) -> None:
        record = parse_daily_review("", "x.md")
        assert record.date is None
        assert record.tomorrow_priority is None
        assert record.file_path == "x.md"


class TestSerializeDailyReview:
    def test_reproduces_canonical_document(self) -> None:
        record = parse_daily_review(DAILY_SAMPLE, "x.md")
        assert serialize_daily_review(record) == DAILY_SAMPLE

    def test_round_trip_with_ratings(self) -> None:
        record = DailyReviewRecord(
            date="2026-01-06",
            energy_level=4,
            meaningful_win="Called an old friend",
            friction_point="Too many meetings",
            friction_action=FrictionAction.ACKNOWLEDGMENT,
            thing_to_let_go="Inbox zero",
            tomorrow_priority="Write the proposal\nbefore noon",
            duration=6,
            domain_ratings=DomainRatings(career=7, fun=3),
            file_path="reviews/daily/2026-01-06.md",
        )
        text = serialize_daily_review(record)
        assert "## Life Map Ratings" in text
        assert "- Career: 7" in text
        assert parse_daily_review(text, record.file_path) == record

    def test_unrated_life_map_omitted(self) -> None:
        record = DailyReviewRecord(date="2026-01-06", domain_ratings=DomainRatings())
        assert "Life Map" not in serialize_daily_review(record)

    def test_missing_duration_renders_empty(self) -> None:
        text = serialize_daily_review(DailyReviewRecord(date="2026-01-06"))
        assert text.endswith("**Time to complete:** \n")

    def test_round_trip_free_form_text(self) -> None:
        record = DailyReviewRecord(
            date="2026-01-07",
            energy_level=5,
            energy_factors="Short sleep\n\n*Coffee helped*",
            meaningful_win="Paired on the migration",
            tomorrow_priority="Review the RFC",
            notes="First thought\n\nSecond thought",
            file_path="x.md",
        )
        parsed = parse_daily_review(serialize_daily_review(record), "x.md")
        assert parsed.energy_factors == "Short sleep\n\n*Coffee helped*"
        assert parsed.notes == "First thought\n\nSecond thought"
        assert parsed == record
