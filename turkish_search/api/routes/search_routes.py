"""Search routes

The HTTP layer only validates input and translates between schemas and
the SearchService.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from turkish_search.core.exceptions import ValidationException
from turkish_search.core.logging import logger, sanitize_for_log
from turkish_search.core.security import SecurityValidator
from turkish_search.schemas.search_schema import (
    CategorySearchRequest,
    MatchScoreData,
    MatchScoreRequest,
    ProductSearchRequest,
    ScoredCategory,
    ScoredProduct,
    SearchResponse,
)
from turkish_search.services.search_service import SearchService
from turkish_search.utils.text import calculate_match_score, calculate_multi_word_match_score

router = APIRouter(prefix="/api/v1", tags=["search"])

_search_service: Optional[SearchService] = None


def get_search_service() -> SearchService:
    """SearchService singleton"""
    global _search_service
    if _search_service is None:
        _search_service = SearchService()
    return _search_service


def _validation_error(e: ValidationException) -> SearchResponse:
    logger.warning(f"[API] Input validation failed: {e}")
    return SearchResponse(
        status="error",
        data=None,
        message=e.message,
        error_code=e.error_code,
    )


@router.post("/search/score", response_model=SearchResponse)
async def score_match(request: MatchScoreRequest):
    """Score one term against one candidate text"""
    try:
        SecurityValidator.validate_query(request.term)
    except ValidationException as e:
        return _validation_error(e)

    if request.multi_word:
        score = calculate_multi_word_match_score(request.term, request.target)
    else:
        score = calculate_match_score(request.term, request.target)

    return SearchResponse(
        status="success",
        data=MatchScoreData(
            term=request.term,
            target=request.target,
            multi_word=request.multi_word,
            match_score=score,
        ),
    )


@router.post("/search/categories", response_model=SearchResponse)
async def search_categories(
    request: CategorySearchRequest,
    service: SearchService = Depends(get_search_service),
):
    """Category filter (single-term ranking)"""
    try:
        SecurityValidator.validate_query(request.query)
    except ValidationException as e:
        return _validation_error(e)

    logger.info(
        f"[API] Category search: '{sanitize_for_log(request.query)}' over {len(request.categories)} categories"
    )
    results = service.search_categories(request.query, request.categories, request.min_score)
    data = [ScoredCategory(**r.to_dict()) for r in results]

    return SearchResponse(
        status="success",
        data=data,
        message="" if data else "No results",
    )


@router.post("/search/products", response_model=SearchResponse)
async def search_products(
    request: ProductSearchRequest,
    service: SearchService = Depends(get_search_service),
):
    """Product search (multi-word ranking plus barcode)"""
    try:
        SecurityValidator.validate_query(request.query)
    except ValidationException as e:
        return _validation_error(e)

    logger.info(
        f"[API] Product search: '{sanitize_for_log(request.query)}' over {len(request.products)} products"
    )
    results = service.search_products(request.query, request.products, request.min_score)
    data = [ScoredProduct(**r.to_dict()) for r in results]

    return SearchResponse(
        status="success",
        data=data,
        message="" if data else "No results",
    )
