"""Search query sanitizing."""

from __future__ import annotations

import re
from typing import Any


DEFAULT_MAX_QUERY_LENGTH = 100


def sanitize_search_query(query: Any, max_length: int = DEFAULT_MAX_QUERY_LENGTH) -> str:
    """Make a raw search box value safe to forward to a LIKE query.

    - truncated to ``max_length``
    - LIKE wildcards ``%`` and ``_`` escaped with a backslash
    - ``<`` / ``>`` removed
    - trimmed

    Examples:
        "  %50 indirim " -> "\\%50 indirim"
        "<b>süt</b>" -> "bsüt/b"
    """
    if not query or not isinstance(query, str):
        return ""

    sanitized = query[:max_length]
    sanitized = re.sub(r"[%_]", lambda m: "\\" + m.group(0), sanitized)
    sanitized = re.sub(r"[<>]", "", sanitized)
    return sanitized.strip()
