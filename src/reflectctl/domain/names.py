"""Allowlisted document names.

Goal timeframes, framework names and document names arrive from user
input and become filenames, so each is resolved through a closed enum
before any file access. Anything else, including path-traversal
sequences, is rejected.
"""

from __future__ import annotations

from reflectctl.domain.types import DocumentName, FrameworkName, Timeframe


class InvalidDocumentName(ValueError):
    """A document name outside its allowlist."""

    def __init__(self, kind: str, name: str, allowed: list[str]) -> None:
        self.kind = kind
        self.name = name
        self.allowed = allowed
        super().__init__(f"Invalid {kind} {name!r}. Must be one of: {', '.join(allowed)}")


def resolve_framework(name: str) -> FrameworkName:
    """Look up *name* in the framework allowlist.

    Only exact kebab-case matches are accepted, so ``../secrets`` and
    ``annual_review`` are both rejected.

    Raises:
        InvalidDocumentName: If *name* is not allowlisted.
    """
    try:
        return FrameworkName(name)
    except ValueError:
        raise InvalidDocumentName("framework", name, [f.value for f in FrameworkName]) from None


def resolve_timeframe(name: str) -> Timeframe:
    """Look up *name* in the goal timeframe allowlist.

    Raises:
        InvalidDocumentName: If *name* is not ``1-year``, ``3-year`` or ``10-year``.
    """
    try:
        return Timeframe(name)
    except ValueError:
        raise InvalidDocumentName("timeframe", name, [t.value for t in Timeframe]) from None


def resolve_document(name: str) -> DocumentName:
    """Look up *name* in the single-document allowlist.

    Raises:
        InvalidDocumentName: If *name* is not ``memory``, ``north-star`` or ``principles``.
    """
    try:
        return DocumentName(name)
    except ValueError:
        raise InvalidDocumentName("document", name, [d.value for d in DocumentName]) from None
