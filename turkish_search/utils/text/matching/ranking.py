"""Generic filter-and-rank helpers.

Works over any item type: the caller supplies a projector that extracts
the text to match (category name, product name, ...).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar, Union

from turkish_search.core.logging import logger, sanitize_for_log

from .multi_word import calculate_multi_word_match_score
from .scoring import calculate_match_score


T = TypeVar("T")

Score = Union[int, float]
Scorer = Callable[[Any, Any], Score]

DEFAULT_MIN_SCORE = 50
DEFAULT_MULTI_WORD_MIN_SCORE = 40


@dataclass(frozen=True)
class ScoredItem(Generic[T]):
    """An item paired with its match score. The item itself is never modified."""

    item: T
    match_score: Score

    def to_dict(self) -> dict[str, Any]:
        """Item fields plus ``match_score`` as a new dict."""
        item: Any = self.item
        if isinstance(item, Mapping):
            fields = dict(item)
        elif dataclasses.is_dataclass(item) and not isinstance(item, type):
            fields = dataclasses.asdict(item)
        elif hasattr(item, "model_dump"):
            fields = item.model_dump()
        else:
            fields = {"item": item}
        fields["match_score"] = self.match_score
        return fields


def _project(projector: Callable[[T], str], item: T) -> str:
    try:
        text = projector(item)
    except Exception as e:
        logger.debug(f"Projector failed for {type(item).__name__}: {e}")
        return ""
    return text if isinstance(text, str) else ""


def rank_scored(scored: Iterable[ScoredItem[T]], min_score: Score) -> list[ScoredItem[T]]:
    """Keep items at or above ``min_score``, best first.

    ``sorted`` is stable, so items with equal scores keep their input order.
    """
    kept = [s for s in scored if s.match_score >= min_score]
    return sorted(kept, key=lambda s: s.match_score, reverse=True)


def filter_and_sort(
    term: Any,
    items: Iterable[T],
    projector: Callable[[T], str],
    min_score: Score,
    scorer: Scorer,
) -> list[ScoredItem[T]]:
    """Score ``projector(item)`` against ``term`` for every item and rank the results."""
    if items is None:
        return []

    scored = [ScoredItem(item, scorer(term, _project(projector, item))) for item in items]
    kept = rank_scored(scored, min_score)

    logger.debug(
        f"Ranked '{sanitize_for_log(term if isinstance(term, str) else '')}': "
        f"{len(kept)}/{len(scored)} items >= {min_score}"
    )
    return kept


def filter_and_sort_by_match(
    term: Any,
    items: Iterable[T],
    projector: Callable[[T], str],
    min_score: Score = DEFAULT_MIN_SCORE,
) -> list[ScoredItem[T]]:
    """Rank with the single-term ladder (category filters)."""
    return filter_and_sort(term, items, projector, min_score, calculate_match_score)


def filter_and_sort_by_multi_word_match(
    term: Any,
    items: Iterable[T],
    projector: Callable[[T], str],
    min_score: Score = DEFAULT_MULTI_WORD_MIN_SCORE,
) -> list[ScoredItem[T]]:
    """Rank with the multi-word ladder (product search)."""
    return filter_and_sort(term, items, projector, min_score, calculate_multi_word_match_score)
