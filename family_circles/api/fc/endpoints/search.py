"""Search API: free-text search over individuals and families of a tree."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from family_circles.api.fc.dependencies import (
    TreeContext,
    get_search_service,
    get_search_terms,
)
from family_circles.application.use_cases.search import SearchService
from family_circles.core.limiter import limit_search
from family_circles.schemas.error import ErrorResponse
from family_circles.schemas.search import SearchResultItemResponse

router = APIRouter()


@router.get(
    "/{tree}/search",
    response_model=list[SearchResultItemResponse],
    responses={
        400: {"model": ErrorResponse, "description": "No search term"},
        404: {"model": ErrorResponse, "description": "Unknown tree"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    },
)
@limit_search
async def search_records(
    terms: Annotated[list[str], Depends(get_search_terms)],
    request: Request,
    current_tree: TreeContext,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
) -> list[SearchResultItemResponse]:
    """Individuals matching any term, then families (by member and by family name)."""
    items = await search_svc.search_terms(current_tree, terms)
    return [SearchResultItemResponse(id=i.id, text=i.text) for i in items]
