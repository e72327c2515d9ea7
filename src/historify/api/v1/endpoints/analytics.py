"""Search analytics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from historify.api.deps import get_library
from historify.library import DocumentLibrary
from historify.models.analytics import QueryHistoryEntry, SearchAnalytics

router = APIRouter()


@router.get(
    "/analytics",
    response_model=SearchAnalytics,
    summary="Search Analytics",
    description=(
        "Totals, top queries and daily search counts for the last 30 days, "
        "computed from the searches this server has executed."
    ),
)
def recorded_analytics(library: DocumentLibrary = Depends(get_library)) -> SearchAnalytics:
    return library.analytics()


@router.post(
    "/analytics",
    response_model=SearchAnalytics,
    summary="Analyze a Search History",
    description="Compute the same statistics over a history supplied by the caller.",
)
def supplied_analytics(
    history: list[QueryHistoryEntry],
    library: DocumentLibrary = Depends(get_library),
) -> SearchAnalytics:
    return library.analytics(history)
