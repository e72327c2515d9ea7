"""Query and search request models."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from historify.models.types import UTCDateTime

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)


class SortField(str, Enum):
    """Key used to order search results."""

    RELEVANCE = "relevance"
    DATE = "date"
    NAME = "name"
    SIZE = "size"


class SortOrder(str, Enum):
    """Direction of the result ordering."""

    ASC = "asc"
    DESC = "desc"


class SearchFilters(BaseModel):
    """Structured filters applied to the candidate set.

    Every filter is optional; an unset filter does not constrain results.
    Active filters are combined with AND.  A date bound that cannot be
    parsed is treated as unset rather than rejecting the request.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date_from: UTCDateTime | None = Field(default=None, description="Earliest upload date (inclusive)")
    date_to: UTCDateTime | None = Field(default=None, description="Latest upload date (inclusive)")
    file_types: list[str] = Field(default_factory=list, description="Accepted file types (substring match)")
    sources: list[str] = Field(default_factory=list, description="Accepted metadata sources (exact match)")
    tags: list[str] = Field(default_factory=list, description="Documents must carry at least one of these tags")
    min_size: int | None = Field(default=None, ge=0, description="Minimum file size in bytes")
    max_size: int | None = Field(default=None, ge=0, description="Maximum file size in bytes")

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _unparseable_date_as_unset(cls, v: Any) -> Any:
        if v is None or isinstance(v, datetime):
            return v
        if isinstance(v, str) and not v.strip():
            return None
        try:
            return _DATETIME.validate_python(v)
        except ValidationError:
            logger.warning("Ignoring unparseable date bound %r", v)
            return None


class SearchOptions(BaseModel):
    """Options controlling candidate selection, ordering and paging."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    filters: SearchFilters = Field(default_factory=SearchFilters, description="Structured filters")
    sort_by: SortField = Field(default=SortField.RELEVANCE, description="Sort key")
    sort_order: SortOrder = Field(default=SortOrder.DESC, description="Sort direction")
    limit: int | None = Field(default=None, ge=0, description="Page size (None = configured default, 50)")
    offset: int = Field(default=0, ge=0, description="Number of results to skip")
    fuzzy: bool = Field(default=False, description="Match query terms within a small edit distance")
    exact_phrase: bool = Field(default=False, description="Match the whole query as a literal substring")


class SearchRequest(BaseModel):
    """Incoming search request from the API."""

    query: str = Field(default="", max_length=2000, description="Free-text query; empty matches everything")
    options: SearchOptions = Field(default_factory=SearchOptions, description="Search behavior options")


class HighlightRequest(BaseModel):
    """Request to mark query terms inside a piece of text."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str = Field(default="", description="Text to highlight")
    query: str = Field(default="", description="Query whose terms are highlighted")
    class_name: str | None = Field(default=None, description="CSS class for the marker span")
