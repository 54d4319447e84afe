"""Normalization package."""

from .turkish import TURKISH_CHAR_MAP, compact, normalize_search_query, normalize_turkish_chars

__all__ = [
    "TURKISH_CHAR_MAP",
    "compact",
    "normalize_search_query",
    "normalize_turkish_chars",
]
