"""Text utilities (modularized).

Public API is kept stable while implementation is organized under:
- normalization/
- matching/
"""

from .matching import (
    ScoredItem,
    calculate_match_score,
    calculate_multi_word_match_score,
    filter_and_sort,
    filter_and_sort_by_match,
    filter_and_sort_by_multi_word_match,
    rank_scored,
)
from .normalization import normalize_search_query, normalize_turkish_chars
from .sanitize import sanitize_search_query

__all__ = [
    # normalization
    "normalize_turkish_chars",
    "normalize_search_query",
    # scoring
    "calculate_match_score",
    "calculate_multi_word_match_score",
    # ranking
    "ScoredItem",
    "filter_and_sort",
    "filter_and_sort_by_match",
    "filter_and_sort_by_multi_word_match",
    "rank_scored",
    # sanitize
    "sanitize_search_query",
]
