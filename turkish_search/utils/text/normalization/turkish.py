"""Turkish character folding.

Only the twelve code points below are special-cased. Other accented
characters (é, â, ß, ...) pass through unchanged, and no locale-aware
case mapping is involved, so results are identical on every platform.
"""

from __future__ import annotations

import re
from typing import Any


TURKISH_CHAR_MAP: dict[str, str] = {
    "ı": "i",
    "İ": "I",
    "ğ": "g",
    "Ğ": "G",
    "ü": "u",
    "Ü": "U",
    "ş": "s",
    "Ş": "S",
    "ö": "o",
    "Ö": "O",
    "ç": "c",
    "Ç": "C",
}

_TR_TABLE = str.maketrans(TURKISH_CHAR_MAP)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_turkish_chars(text: Any) -> str:
    """Fold Turkish letters to their Latin equivalents.

    Case is preserved ("İçecek" -> "Icecek"). Anything that is not a
    non-empty string yields "".
    """
    if not text or not isinstance(text, str):
        return ""
    return text.translate(_TR_TABLE)


def normalize_search_query(text: Any) -> str:
    """Comparison form used by the scorers: folded, lower-cased, trimmed."""
    return normalize_turkish_chars(text).lower().strip()


def compact(text: str) -> str:
    """Drop all whitespace so substrings can span word boundaries."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub("", text)
