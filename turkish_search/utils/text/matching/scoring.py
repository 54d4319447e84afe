"""Single-term match scoring."""

from __future__ import annotations

from typing import Any

from ..normalization.turkish import compact, normalize_search_query


SCORE_EXACT = 100
SCORE_PREFIX = 90
SCORE_WORD_EXACT = 85
SCORE_WORD_PREFIX = 75
SCORE_WORD_CONTAINS = 60
SCORE_LOOSE_CONTAINS = 50
SCORE_NONE = 0


def calculate_match_score(term: Any, target: Any) -> int:
    """How well ``term`` matches ``target`` (0~100).

    Both sides are compared Turkish-insensitively (ı/i, ş/s, ...) and
    case-insensitively. The first satisfied tier wins:

    - 100: exact match
    - 85: a word of the target equals the term
    - 90: target starts with the term
    - 75: a word of the target starts with the term
    - 60: a word of the target contains the term
    - 50: the term appears with whitespace ignored ("selBak" in "Kişisel Bakım")
    - 0: no match

    Examples:
        calculate_match_score("bakım", "Kişisel Bakım") -> 85
        calculate_match_score("bak", "Kişisel Bakım") -> 75
    """
    if not term or not target:
        return SCORE_NONE
    if not isinstance(term, str) or not isinstance(target, str):
        return SCORE_NONE

    q = normalize_search_query(term)
    t = normalize_search_query(target)

    if q == t:
        return SCORE_EXACT

    # Whitespace-only term would otherwise prefix-match everything
    if not q:
        return SCORE_NONE

    words = t.split()

    # A whole word beats a bare prefix: "kişisel" in "Kişisel Bakım" is 85, not 90
    if any(w == q for w in words):
        return SCORE_WORD_EXACT

    if t.startswith(q):
        return SCORE_PREFIX

    if any(w.startswith(q) for w in words):
        return SCORE_WORD_PREFIX

    if any(q in w for w in words):
        return SCORE_WORD_CONTAINS

    if compact(q) in compact(t):
        return SCORE_LOOSE_CONTAINS

    return SCORE_NONE
