"""Category and product search over caller-supplied records.

Fetching the records is not this service's job; it only ranks them.
"""

from __future__ import annotations

from typing import Iterable, Optional

from turkish_search.core.config import settings
from turkish_search.core.logging import logger
from turkish_search.schemas.search_schema import Category, Product
from turkish_search.utils.text import (
    ScoredItem,
    calculate_multi_word_match_score,
    filter_and_sort_by_match,
    normalize_search_query,
    normalize_turkish_chars,
    rank_scored,
    sanitize_search_query,
)


class SearchService:
    """Ranks categories and products for a search query"""

    def __init__(
        self,
        category_min_score: Optional[float] = None,
        product_min_score: Optional[float] = None,
        barcode_match_score: Optional[float] = None,
        query_max_length: Optional[int] = None,
    ):
        self.category_min_score = (
            settings.search_min_score if category_min_score is None else category_min_score
        )
        self.product_min_score = (
            settings.search_multi_word_min_score if product_min_score is None else product_min_score
        )
        self.barcode_match_score = (
            settings.search_barcode_match_score if barcode_match_score is None else barcode_match_score
        )
        self.query_max_length = (
            settings.search_query_max_length if query_max_length is None else query_max_length
        )

    def search_categories(
        self,
        query: str,
        categories: Iterable[Category],
        min_score: Optional[float] = None,
    ) -> list[ScoredItem[Category]]:
        """Category filter: single-term ladder over the category name."""
        threshold = self.category_min_score if min_score is None else min_score
        return filter_and_sort_by_match(query, categories, lambda c: c.name, threshold)

    def score_product(self, query: str, product: Product) -> float:
        """Best of the multi-word name score and the barcode score."""
        score = calculate_multi_word_match_score(query, product.name or "")

        if product.barcode:
            normalized_query = normalize_search_query(query)
            normalized_barcode = normalize_turkish_chars(product.barcode.lower())
            if normalized_query and normalized_query in normalized_barcode:
                score = max(score, float(self.barcode_match_score))

        return score

    def search_products(
        self,
        query: str,
        products: Iterable[Product],
        min_score: Optional[float] = None,
    ) -> list[ScoredItem[Product]]:
        """Product search: multi-word name ladder plus barcode substring hits."""
        if not sanitize_search_query(query, self.query_max_length):
            return []

        threshold = self.product_min_score if min_score is None else min_score
        results = rank_scored(
            (ScoredItem(p, self.score_product(query, p)) for p in products),
            threshold,
        )
        logger.info(f"[Search] products matched: {len(results)}")
        return results
