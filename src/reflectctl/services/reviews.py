"""ReviewService: daily and weekly reviews, singly and as a feed.

Five surfaces:
- get_review: parse one review by family and date
- create_review: validate a form, serialize, refuse to overwrite
- update_review: validate a form and replace an existing review
- list_reviews: the aggregated daily + weekly feed
- validate_query: enum validation for the feed parameters
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from reflectctl.domain.aggregate import ReviewQuery, aggregate_reviews
from reflectctl.domain.daily import parse_daily_review, serialize_daily_review
from reflectctl.domain.records import DailyReviewForm, WeeklyReviewForm
from reflectctl.domain.types import ReviewFilter, ReviewType, SortOrder
from reflectctl.domain.weekly import parse_weekly_review, serialize_weekly_review
from reflectctl.infrastructure.filestore import StoreError
from reflectctl.services.base import BaseService
from reflectctl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_PARSERS = {
    ReviewType.DAILY: parse_daily_review,
    ReviewType.WEEKLY: parse_weekly_review,
}
_FORMS: dict[ReviewType, type[DailyReviewForm] | type[WeeklyReviewForm]] = {
    ReviewType.DAILY: DailyReviewForm,
    ReviewType.WEEKLY: WeeklyReviewForm,
}


class ReviewService(BaseService):
    """Reads, writes, and aggregates review documents."""

    # ------------------------------------------------------------------
    # single reviews
    # ------------------------------------------------------------------

    def _bad_date(self, op: str, date: str) -> ServiceResult | None:
        if _DATE_RE.match(date):
            return None
        return self._fail(
            op,
            ErrorCode.VALIDATION_ERROR,
            "Invalid date format. Expected YYYY-MM-DD",
            field="date",
        )

    def get_review(self, review_type: ReviewType, date: str) -> ServiceResult:
        """Parse the review stored for *date*."""
        op = f"get_{review_type}_review"
        if (bad := self._bad_date(op, date)) is not None:
            return bad

        path = self._workspace.review_path(review_type, date)
        try:
            raw = self._store.read(path)
        except StoreError as exc:
            return self._store_failure(op, exc, not_found=f"Review for {date} not found")

        record = _PARSERS[review_type](raw, path)
        return self._ok(op, record.to_json())

    def _render(self, review_type: ReviewType, form: Any, path: str) -> str:
        root = self._workspace.root
        if review_type is ReviewType.DAILY:
            return serialize_daily_review(form.to_record(path), data_root=root)
        return serialize_weekly_review(form.to_record(path), data_root=root)

    def create_review(self, review_type: ReviewType, payload: dict[str, Any]) -> ServiceResult:
        """Create a new review from *payload*; an existing one is a conflict."""
        op = f"create_{review_type}_review"
        try:
            form = _FORMS[review_type].model_validate(payload)
        except ValidationError as exc:
            return self._validation_failure(op, exc)

        path = self._workspace.review_path(review_type, form.date)
        if self._store.exists(path):
            return self._fail(
                op,
                ErrorCode.CONFLICT,
                f"Review for {form.date} already exists",
                path=path,
            )

        try:
            self._store.write(path, self._render(review_type, form, path))
        except StoreError as exc:
            return self._store_failure(op, exc)

        logger.info("Created %s review %s", review_type, path)
        return self._ok(op, {"filePath": path, "date": form.date})

    def update_review(
        self, review_type: ReviewType, date: str, payload: dict[str, Any]
    ) -> ServiceResult:
        """Replace the review stored for *date*; it must already exist."""
        op = f"update_{review_type}_review"
        if (bad := self._bad_date(op, date)) is not None:
            return bad

        path = self._workspace.review_path(review_type, date)
        if not self._store.exists(path):
            return self._fail(op, ErrorCode.NOT_FOUND, f"Review for {date} not found", path=path)

        try:
            form = _FORMS[review_type].model_validate(payload)
        except ValidationError as exc:
            return self._validation_failure(op, exc)

        try:
            self._store.write(path, self._render(review_type, form, path))
        except StoreError as exc:
            return self._store_failure(op, exc)

        return self._ok(op, {"filePath": path, "date": date})

    # ------------------------------------------------------------------
    # feed
    # ------------------------------------------------------------------

    def validate_query(self, review_type: str, sort: str) -> ReviewQuery | ServiceResult:
        """Build a :class:`ReviewQuery`, or a failed result naming the bad parameter."""
        op = "list_reviews"
        if review_type not in {t.value for t in ReviewFilter}:
            allowed = ", ".join(t.value for t in ReviewFilter)
            return self._fail(
                op,
                ErrorCode.VALIDATION_ERROR,
                f"Invalid type parameter. Must be one of: {allowed}",
                field="type",
            )
        if sort not in {s.value for s in SortOrder}:
            allowed = ", ".join(s.value for s in SortOrder)
            return self._fail(
                op,
                ErrorCode.VALIDATION_ERROR,
                f"Invalid sort parameter. Must be one of: {allowed}",
                field="sort",
            )
        return ReviewQuery(type=ReviewFilter(review_type), sort=SortOrder(sort))

    def list_reviews(self, review_type: str = "all", sort: str | None = None) -> ServiceResult:
        """The aggregated review feed as ``{reviews, count}``."""
        sort = sort or self._workspace.settings.reviews.default_sort.value
        query = self.validate_query(review_type, sort)
        if isinstance(query, ServiceResult):
            return query

        daily: list[tuple[str, str]] = []
        weekly: list[tuple[str, str]] = []
        if query.type in (ReviewFilter.ALL, ReviewFilter.DAILY):
            daily = self._workspace.read_reviews(ReviewType.DAILY)
        if query.type in (ReviewFilter.ALL, ReviewFilter.WEEKLY):
            weekly = self._workspace.read_reviews(ReviewType.WEEKLY)

        items = aggregate_reviews(daily, weekly, query)
        return self._ok(
            "list_reviews",
            {"reviews": [item.to_json() for item in items], "count": len(items)},
        )
