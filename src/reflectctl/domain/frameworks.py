"""Framework documents (annual review, vivid vision, ideal life costing).

Framework content is free-form markdown; the codec only surfaces its
frontmatter metadata and top-level title alongside the raw text.
"""

from __future__ import annotations

import re
from typing import Any

from reflectctl.domain.frontmatter import extract_frontmatter, load_metadata

_TITLE_RE = re.compile(r"^#\s+(.+?)\s*$", re.MULTILINE)


def parse_framework(raw: str) -> dict[str, Any]:
    """Return ``{content, metadata, title}`` for a framework document."""
    _fm, body = extract_frontmatter(raw)
    m = _TITLE_RE.search(body)
    return {
        "content": raw,
        "metadata": load_metadata(raw),
        "title": m.group(1) if m else None,
    }
