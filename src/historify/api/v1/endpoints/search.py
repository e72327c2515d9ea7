"""Search endpoints: full-text search, autocomplete suggestions and highlighting.

Handlers are plain ``def`` functions: the search core is synchronous and
CPU-bound, so FastAPI runs them in its worker threadpool.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from historify.api.deps import get_library
from historify.library import DocumentLibrary
from historify.models.query import HighlightRequest, SearchRequest
from historify.models.response import HighlightResponse, SearchResponse, SuggestionResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search Documents",
    description=(
        "Search the document collection.\n\n"
        "**Strategies** (exactly one runs, first match wins):\n"
        "- `exactPhrase: true`: the whole query as a case-insensitive literal substring\n"
        "- `fuzzy: true`: any query term within edit distance 2 of a document term\n"
        "- otherwise: documents sharing at least one term with the query\n\n"
        "Matches are filtered, scored with TF-IDF, sorted (`sortBy`: relevance, date, "
        "name, size; `sortOrder`: asc, desc) and paginated with `limit` / `offset`."
    ),
    responses={
        422: {"description": "Validation error: invalid request body"},
        500: {"description": "Internal server error: search processing failed"},
    },
)
def search(
    request: SearchRequest,
    library: DocumentLibrary = Depends(get_library),
) -> SearchResponse:
    """Execute a search and record it in the query history."""
    try:
        return library.search(request.query, request.options)
    except Exception as e:
        logger.error("Search failed: %s", e, exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Search processing failed: {e!s}",
        ) from e


@router.get(
    "/suggestions",
    response_model=SuggestionResponse,
    summary="Autocomplete Suggestions",
    description=(
        "Complete a partially typed query from indexed terms and document words. "
        "Prefixes shorter than 2 characters return no suggestions."
    ),
)
def suggestions(
    q: str = Query(default="", max_length=200, description="Partial query"),
    limit: int | None = Query(default=None, ge=1, le=50, description="Maximum suggestions"),
    library: DocumentLibrary = Depends(get_library),
) -> SuggestionResponse:
    return SuggestionResponse(query=q, suggestions=library.suggestions(q, limit))


@router.post(
    "/highlight",
    response_model=HighlightResponse,
    summary="Highlight Query Terms",
    description="Wrap whole-word occurrences of the query terms in `<span class=...>` markers.",
)
def highlight(
    request: HighlightRequest,
    library: DocumentLibrary = Depends(get_library),
) -> HighlightResponse:
    return HighlightResponse(text=library.highlight(request.text, request.query, request.class_name))
