"""Canonical status vocabulary shared by goals documents."""

from __future__ import annotations

from enum import StrEnum


class CanonicalStatus(StrEnum):
    """The closed three-value status vocabulary."""

    ON_TRACK = "On Track"
    NEEDS_ATTENTION = "Needs Attention"
    BEHIND = "Behind"


DEFAULT_STATUS = CanonicalStatus.ON_TRACK

_BY_KEY: dict[str, CanonicalStatus] = {s.value.lower(): s for s in CanonicalStatus}


def normalize_status(raw: str | None) -> CanonicalStatus:
    """Map a loosely-typed status string onto :class:`CanonicalStatus`.

    Matching is case-insensitive and treats hyphens as spaces, so
    ``on-track``, ``ON TRACK`` and ``On Track`` are equivalent. Anything
    unrecognised, including ``None``, resolves to ``On Track``.

    Examples:
        >>> normalize_status("needs-attention")
        <CanonicalStatus.NEEDS_ATTENTION: 'Needs Attention'>
        >>> normalize_status("bogus")
        <CanonicalStatus.ON_TRACK: 'On Track'>
    """
    if raw is None:
        return DEFAULT_STATUS
    key = " ".join(str(raw).strip().lower().replace("-", " ").split())
    return _BY_KEY.get(key, DEFAULT_STATUS)
