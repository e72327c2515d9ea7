"""Query history and search analytics models."""

from __future__ import annotations

from datetime import UTC, datetime
from datetime import date as _date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from historify.models.types import UTCDateTime


class QueryHistoryEntry(BaseModel):
    """One recorded search."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    query: str = Field(description="Query as submitted")
    result_count: int = Field(default=0, ge=0, description="Number of matches the search returned")
    timestamp: UTCDateTime = Field(default_factory=lambda: datetime.now(UTC), description="When the search ran")

    @field_validator("result_count", mode="before")
    @classmethod
    def _missing_count_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class QueryCount(BaseModel):
    """How often a query was submitted."""

    query: str
    count: int


class DailySearchCount(BaseModel):
    """Number of searches on one calendar day (UTC)."""

    date: _date
    count: int


class SearchAnalytics(BaseModel):
    """Aggregate statistics over a search history."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_searches: int = Field(default=0, description="Number of history entries")
    unique_queries: int = Field(default=0, description="Number of distinct query strings")
    average_results_per_search: float = Field(default=0.0, description="Mean result count")
    top_queries: list[QueryCount] = Field(default_factory=list, description="Most frequent queries")
    search_trends: list[DailySearchCount] = Field(default_factory=list, description="Searches per day, oldest first")
