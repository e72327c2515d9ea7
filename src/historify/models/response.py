"""Search response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from historify.models.document import Document
from historify.models.query import SearchFilters


class SearchResult(BaseModel):
    """A matched document with its computed relevance.

    Created per search call and discarded after the response is returned.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    document: Document = Field(description="The matched document")
    relevance_score: float = Field(default=0.0, description="TF-IDF relevance; 0 means no match signal")


class Pagination(BaseModel):
    """Paging window applied to the sorted results."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    limit: int = Field(description="Page size")
    offset: int = Field(description="Number of results skipped")
    has_more: bool = Field(description="Whether results exist beyond this page")


class SearchResponse(BaseModel):
    """Result of a search call.

    ``total`` counts every filtered match; ``results`` holds only the
    requested page.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    request_id: str = Field(description="Unique request identifier")
    query: str = Field(description="Original query")
    strategy: str = Field(description="Candidate selection strategy: standard, phrase or fuzzy")
    results: list[SearchResult] = Field(default_factory=list, description="Page of scored, sorted results")
    total: int = Field(default=0, description="Number of matches before pagination")
    filters: SearchFilters = Field(default_factory=SearchFilters, description="Filters that were applied")
    pagination: Pagination = Field(description="Paging window")
    processing_time_ms: int = Field(default=0, description="Processing time in ms")


class SuggestionResponse(BaseModel):
    """Autocomplete candidates for a partial query."""

    query: str = Field(description="Partial query as typed")
    suggestions: list[str] = Field(default_factory=list, description="Candidates, shortest first")


class HighlightResponse(BaseModel):
    """Text with query terms wrapped in marker spans."""

    text: str = Field(description="Highlighted text")
