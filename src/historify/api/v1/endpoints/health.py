"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from historify import __version__
from historify.api.deps import get_library
from historify.library import DocumentLibrary

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="Historify server version")
    service: str = Field(description="Service name ('historify')")
    document_count: int = Field(description="Documents in the collection")
    indexed_terms: int = Field(description="Distinct terms in the search index")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
    description="Returns server health, version and the size of the document collection and index.",
)
def health_check(library: DocumentLibrary = Depends(get_library)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="historify",
        document_count=len(library.store),
        indexed_terms=len(library.index),
    )
