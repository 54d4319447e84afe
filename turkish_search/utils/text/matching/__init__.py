"""Matching package.

Scoring ladders and the generic ranked filter built on top of them.
"""

from .multi_word import calculate_multi_word_match_score
from .ranking import (
    DEFAULT_MIN_SCORE,
    DEFAULT_MULTI_WORD_MIN_SCORE,
    ScoredItem,
    filter_and_sort,
    filter_and_sort_by_match,
    filter_and_sort_by_multi_word_match,
    rank_scored,
)
from .scoring import calculate_match_score

__all__ = [
    "calculate_match_score",
    "calculate_multi_word_match_score",
    "DEFAULT_MIN_SCORE",
    "DEFAULT_MULTI_WORD_MIN_SCORE",
    "ScoredItem",
    "filter_and_sort",
    "filter_and_sort_by_match",
    "filter_and_sort_by_multi_word_match",
    "rank_scored",
]
