"""Section grammar for human-authored review documents.

Every document family is read with the same small set of capture
primitives, configured per field by a :class:`FieldRule` table:

- ``INLINE``: ``**Label:** value`` on a single line.
- ``FIELD``: the paragraph following a label or italic caption, ending at
  a blank line, ``---`` divider, heading, or the next italic label.
- ``BLOCKQUOTE``: consecutive ``>`` lines joined with their line breaks
  preserved.
- ``SECTION``: free text filling the rest of a ``## Heading`` section after
  an exact caption line, blank lines and italics included.

A rule may be scoped to a ``## Heading`` section, in which case capture
never runs past the next divider or ``##`` heading.

Bracketed template text such as ``[Your key outcomes]`` counts as
unfilled and resolves to ``None`` unless the rule opts out.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

DIVIDER = "---"

_PLACEHOLDER_RE = re.compile(r"\[.*\]")
_ITALIC_LABEL_RE = re.compile(r"^\*[^*\s][^*]*:\*")
_CAPTION_RE = re.compile(r"^\*[^*].*\*$")


class CaptureMode(StrEnum):
    """How a field's value is laid out in the document."""

    INLINE = "inline"
    FIELD = "field"
    BLOCKQUOTE = "blockquote"
    SECTION = "section"


@dataclass(frozen=True)
class FieldRule:
    """Where and how to capture one field.

    Attributes:
        name: Key in the dict returned by :func:`extract_fields`.
        mode: Capture primitive to apply.
        heading: ``##`` section that bounds the capture, or None for the
            whole body.
        label: Bold label (INLINE) or caption line (FIELD, SECTION) that
            precedes the value.
        placeholder_guard: Treat bracketed template text as unset.
    """

    name: str
    mode: CaptureMode
    heading: str | None = None
    label: str | None = None
    placeholder_guard: bool = True


def is_placeholder(value: str) -> bool:
    """True when *value* is an unfilled template placeholder like ``[N]``."""
    return _PLACEHOLDER_RE.fullmatch(value.strip()) is not None


def _is_divider(line: str) -> bool:
    return line.strip() == DIVIDER


def _is_heading(line: str) -> bool:
    return line.lstrip().startswith("#")


def _lines(text: str) -> list[str]:
    return text.replace("\r\n", "\n").split("\n")


def find_section(body: str, heading: str) -> str | None:
    """Return the text under ``## <heading>``, or None if absent.

    The heading match is case-insensitive. The section ends at the next
    ``---`` divider, the next ``## `` heading, or the end of the document.
    """
    target = heading.strip().lower()
    lines = _lines(body)
    start: int | None = None
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("## ") and stripped[3:].strip().lower() == target:
            start = i + 1
            break
    if start is None:
        return None

    captured: list[str] = []
    for line in lines[start:]:
        if _is_divider(line) or line.lstrip().startswith("## "):
            break
        captured.append(line)
    return "\n".join(captured)


def capture_inline(text: str, label: str) -> str | None:
    """Return the trimmed value after ``**<label>:**`` on the same line."""
    pattern = re.compile(rf"\*\*{re.escape(label)}:\*\*[ \t]*(.*)$", re.MULTILINE)
    m = pattern.search(text.replace("\r\n", "\n"))
    if m is None:
        return None
    return m.group(1).strip()


def capture_field(text: str, label: str | None = None) -> str | None:
    """Capture the paragraph following *label* (or the leading captions).

    With a label, capture starts right after it; any text sharing the
    label's line is the first captured line. Without one, leading italic
    caption lines are skipped. Blank lines before the value are skipped and
    the value runs until a blank line, divider, heading, or italic label.
    Returns None when nothing is captured.
    """
    lines = _lines(text)
    captured: list[str] = []
    idx = 0

    if label is not None:
        needle = label.strip()
        for i, line in enumerate(lines):
            pos = line.find(needle)
            if pos == -1:
                continue
            rest = line[pos + len(needle) :].strip()
            if rest.strip("*"):
                captured.append(rest)
            idx = i + 1
            break
        else:
            return None
    else:
        while idx < len(lines) and (
            not lines[idx].strip() or _CAPTION_RE.match(lines[idx].strip())
        ):
            idx += 1

    if not captured:
        while idx < len(lines) and not lines[idx].strip():
            idx += 1

    for line in lines[idx:]:
        stripped = line.strip()
        if not stripped or _is_divider(line) or _is_heading(line):
            break
        if _ITALIC_LABEL_RE.match(stripped):
            break
        captured.append(stripped)

    value = "\n".join(captured).strip()
    return value or None


def capture_section(text: str, caption: str | None = None) -> str | None:
    """Capture everything in *text* after the *caption* line.

    Only a line equal to the caption (ignoring surrounding whitespace) is
    skipped, so paragraphs and italic text in the value survive. Without a
    caption the whole text is the value; a caption that never appears
    yields None. Leading and trailing blank lines are dropped.
    """
    lines = _lines(text)
    if caption is not None:
        needle = caption.strip()
        for i, line in enumerate(lines):
            if line.strip() == needle:
                lines = lines[i + 1 :]
                break
        else:
            return None

    value = "\n".join(line.rstrip() for line in lines).strip("\n")
    return value if value.strip() else None


def capture_blockquote(text: str) -> str | None:
    """Join the first run of ``>`` lines, keeping internal line breaks.

    The marker and one following space are removed from each line; the
    joined text is trimmed. Returns None if there is no blockquote or it is
    empty.
    """
    quoted: list[str] = []
    for line in _lines(text):
        if line.startswith(">"):
            content = line[1:]
            if content.startswith(" "):
                content = content[1:]
            quoted.append(content.rstrip())
        elif quoted:
            break

    value = "\n".join(quoted).strip()
    return value or None


def quote_lines(value: str) -> str:
    """Render *value* as blockquote lines, the inverse of :func:`capture_blockquote`."""
    return "\n".join(f"> {line}".rstrip() for line in _lines(value))


def extract_field(body: str, rule: FieldRule) -> str | None:
    """Apply one :class:`FieldRule` to *body*."""
    scope: str | None = body
    if rule.heading is not None:
        scope = find_section(body, rule.heading)
    if scope is None:
        return None

    if rule.mode is CaptureMode.INLINE:
        if rule.label is None:
            msg = f"Inline rule {rule.name!r} requires a label"
            raise ValueError(msg)
        value = capture_inline(scope, rule.label)
    elif rule.mode is CaptureMode.BLOCKQUOTE:
        value = capture_blockquote(scope)
    elif rule.mode is CaptureMode.SECTION:
        value = capture_section(scope, rule.label)
    else:
        value = capture_field(scope, rule.label)

    if not value:
        return None
    if rule.placeholder_guard and is_placeholder(value):
        return None
    return value


def extract_fields(body: str, rules: Iterable[FieldRule]) -> dict[str, str | None]:
    """Apply a table of rules, returning ``{rule.name: value}``."""
    return {rule.name: extract_field(body, rule) for rule in rules}


# ---------------------------------------------------------------------------
# Scalar values
# ---------------------------------------------------------------------------

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_INT_RE = re.compile(r"^-?\d+")
_DURATION_RE = re.compile(r"^(\d+)\s*minutes?\b", re.IGNORECASE)


def parse_date(value: str | None) -> str | None:
    """First token of *value* if it is a ``YYYY-MM-DD`` date, else None."""
    if not value:
        return None
    token = value.split()[0]
    return token if _DATE_RE.match(token) else None


def parse_int(value: str | None) -> int | None:
    """Leading integer of *value*, or None for placeholders and text."""
    if not value:
        return None
    m = _INT_RE.match(value.strip())
    return int(m.group(0)) if m else None


def parse_duration(value: str | None) -> int | None:
    """``18 minutes`` -> 18; ``___ minutes`` and blanks -> None."""
    if not value:
        return None
    m = _DURATION_RE.match(value.strip())
    return int(m.group(1)) if m else None
