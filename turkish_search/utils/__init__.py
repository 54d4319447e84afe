"""Utilities package"""

from .text import (
    ScoredItem,
    calculate_match_score,
    calculate_multi_word_match_score,
    filter_and_sort,
    filter_and_sort_by_match,
    filter_and_sort_by_multi_word_match,
    normalize_search_query,
    normalize_turkish_chars,
    sanitize_search_query,
)

__all__ = [
    "ScoredItem",
    "calculate_match_score",
    "calculate_multi_word_match_score",
    "filter_and_sort",
    "filter_and_sort_by_match",
    "filter_and_sort_by_multi_word_match",
    "normalize_search_query",
    "normalize_turkish_chars",
    "sanitize_search_query",
]
