"""Goals document codec.

A goals document carries a single document-level ``status`` in its
frontmatter and a sequence of ``**Goal N:**`` blocks, each with italic
``*What:*``, ``*Why this matters:*`` and ``*Success criteria:*`` fields,
optionally grouped under ``### Domain`` headings::

    ---
    status: On Track
    last_updated: 2026-01-02
    ---

    ### Health

    **Goal 3:**

    *What:*
    Run a full marathon

Bracketed text in the ``*What:*`` field is kept as content, unlike the
review codecs where bracketed template text counts as unset.
"""

from __future__ import annotations

import re

from reflectctl.domain.frontmatter import extract_frontmatter
from reflectctl.domain.records import GoalRecord, GoalsDocument
from reflectctl.domain.sections import CaptureMode, FieldRule, extract_fields
from reflectctl.domain.status import normalize_status

DESCRIPTION_LIMIT = 100
SNAPSHOT_LIMIT = 5
ELLIPSIS = "..."

_GOAL_MARKER_RE = re.compile(r"\*\*Goal\s+(\d+):\*\*")
_DOMAIN_HEADING_RE = re.compile(r"^###\s+(.+?)\s*$", re.MULTILINE)

GOAL_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("what", CaptureMode.FIELD, label="*What:*", placeholder_guard=False),
    FieldRule("why_matters", CaptureMode.FIELD, label="*Why this matters:*"),
    FieldRule("success_criteria", CaptureMode.FIELD, label="*Success criteria:*"),
)


def truncate_description(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    """Cut *text* at *limit* characters and append ``...`` when longer.

    The ellipsis is not counted toward the limit.
    """
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def _domain_before(body: str, offset: int) -> str | None:
    domain: str | None = None
    for m in _DOMAIN_HEADING_RE.finditer(body, 0, offset):
        domain = m.group(1)
    return domain


def parse_goals(
    raw: str,
    file_path: str = "",
    *,
    description_limit: int = DESCRIPTION_LIMIT,
) -> GoalsDocument:
    """Parse a goals document.

    Every goal inherits the normalized document-level status. A body
    without goal markers yields an empty ``goals`` list.
    """
    fm, body = extract_frontmatter(raw)
    status = normalize_status(fm.get("status"))

    markers = list(_GOAL_MARKER_RE.finditer(body))
    goals: list[GoalRecord] = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(body)
        block = body[marker.end() : end]
        fields = extract_fields(block, GOAL_FIELDS)
        number = int(marker.group(1))
        goals.append(
            GoalRecord(
                number=number,
                title=f"Goal {number}",
                domain=_domain_before(body, marker.start()),
                description=truncate_description(fields["what"] or "", description_limit),
                why_matters=fields["why_matters"],
                success_criteria=fields["success_criteria"],
                status=status,
            )
        )

    return GoalsDocument(
        frontmatter=fm,
        status=status,
        last_updated=fm.get("last_updated") or None,
        goals=goals,
        file_path=file_path,
    )


def goal_snapshot(document: GoalsDocument, limit: int = SNAPSHOT_LIMIT) -> list[dict[str, str]]:
    """The first ``min(limit, len(goals))`` goals as snapshot dicts."""
    return [goal.snapshot() for goal in document.goals[:limit]]
