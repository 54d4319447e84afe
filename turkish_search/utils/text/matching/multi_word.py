"""Multi-word match scoring.

Product names are long ("Bebek Şampuanı 750 ml") while queries are short
and often out of order ("şampuan bebek"). Each query word is scored on its
own against the target's words and the per-word results are aggregated.

The ladders here are tuned separately from ``scoring.calculate_match_score``;
changing either one changes ranking results.
"""

from __future__ import annotations

from typing import Any

from ..normalization.turkish import compact, normalize_search_query


# Whole-string tiers
EXACT = 100.0
PREFIX = 95.0

# One-word query
SINGLE_WORD_EXACT = 90.0
SINGLE_WORD_PREFIX = 80.0
SINGLE_WORD_CONTAINS = 70.0
SINGLE_LOOSE_CONTAINS = 60.0

# Per word of a multi-word query
WORD_EXACT = 100.0
WORD_PREFIX = 85.0
WORD_CONTAINS = 70.0
WORD_LOOSE_CONTAINS = 50.0
WORD_FINGERPRINT = 40.0

COMPLETENESS_BONUS = 1.1


def _single_word_score(word: str, target_words: list[str], target_compact: str) -> float:
    if any(tw == word for tw in target_words):
        return SINGLE_WORD_EXACT
    if any(tw.startswith(word) for tw in target_words):
        return SINGLE_WORD_PREFIX
    if any(word in tw for tw in target_words):
        return SINGLE_WORD_CONTAINS
    if word in target_compact:
        return SINGLE_LOOSE_CONTAINS
    return 0.0


def _best_word_score(word: str, target_words: list[str], target_compact: str) -> float:
    best = 0.0
    for tw in target_words:
        if tw == word:
            score = WORD_EXACT
        elif tw.startswith(word):
            score = WORD_PREFIX
        elif word in tw:
            score = WORD_CONTAINS
        elif len(word) >= 2 and word[:2] in tw:
            score = WORD_FINGERPRINT
        else:
            score = 0.0
        if score > best:
            best = score

    # Straddles a word boundary in the target
    if best == 0.0 and word in target_compact:
        best = WORD_LOOSE_CONTAINS

    return best


def calculate_multi_word_match_score(term: Any, target: Any) -> float:
    """Score a possibly multi-word ``term`` against ``target`` (0~100).

    - exact match: 100, target starts with the term: 95
    - one query word: 90 / 80 / 70 / 60 for word exact / word prefix /
      word contains / whitespace-insensitive contains
    - several query words: each word takes its best score over the target
      words (100 / 85 / 70 / 40 for the first two letters, 50 when it only
      appears across a word boundary). The sum is averaged over *all* query
      words. A full match gets a 10% bonus (capped at 100), a partial match
      is multiplied by the matched ratio.

    The result is not rounded.
    """
    if not term or not target:
        return 0.0
    if not isinstance(term, str) or not isinstance(target, str):
        return 0.0

    q = normalize_search_query(term)
    t = normalize_search_query(target)

    if q == t:
        return EXACT

    if not q:
        return 0.0

    if t.startswith(q):
        return PREFIX

    search_words = q.split()
    target_words = t.split()
    target_compact = compact(t)

    if len(search_words) == 1:
        return _single_word_score(search_words[0], target_words, target_compact)

    total_score = 0.0
    matched_words = 0
    for word in search_words:
        best = _best_word_score(word, target_words, target_compact)
        if best > 0:
            matched_words += 1
            total_score += best

    if matched_words == 0:
        return 0.0

    average_score = total_score / len(search_words)
    match_ratio = matched_words / len(search_words)

    if match_ratio == 1.0:
        return min(100.0, average_score * COMPLETENESS_BONUS)

    return average_score * match_ratio
