"""Historify search engine: composes the search pipeline.

A search call runs:
  1. Candidate selection: standard, phrase or fuzzy strategy
  2. Filtering: structured filters (date, type, source, tags, size)
  3. Scoring: TF-IDF relevance against the full collection
  4. Sorting: by relevance, date, name or size
  5. Pagination: slice ``[offset, offset + limit)``

The engine owns the inverted index.  Callers rebuild it with
:meth:`SearchEngine.build_index` whenever their document collection
changes; the engine does not detect changes on its own.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Sequence

from historify.config.settings import AnalyticsSettings, SearchSettings
from historify.core.analytics import analyze
from historify.core.filters import apply_filters
from historify.core.highlight import highlight
from historify.core.index import InvertedIndex
from historify.core.scorer import RelevanceScorer
from historify.core.sorting import sort_results
from historify.core.strategies import SearchStrategy, select_candidates
from historify.core.suggestions import get_suggestions
from historify.models.analytics import QueryHistoryEntry, SearchAnalytics
from historify.models.document import Document
from historify.models.query import SearchOptions
from historify.models.response import Pagination, SearchResponse, SearchResult

logger = logging.getLogger(__name__)


class SearchEngine:
    """Search component owned by the host application.

    The current index is an immutable snapshot.  :meth:`build_index`
    replaces it with a new one in a single assignment, and :meth:`search`
    reads it once per call, so a query never sees a half-built index.

    Attributes:
        settings: Search behavior configuration.
        analytics_settings: Analytics configuration.
    """

    def __init__(
        self,
        settings: SearchSettings | None = None,
        analytics_settings: AnalyticsSettings | None = None,
    ) -> None:
        self.settings = settings or SearchSettings()
        self.analytics_settings = analytics_settings or AnalyticsSettings()
        self._index = InvertedIndex()

    @property
    def index(self) -> InvertedIndex:
        """The current index snapshot."""
        return self._index

    def build_index(self, documents: Sequence[Document]) -> InvertedIndex:
        """Rebuild the index from the full document collection.

        Args:
            documents: Every document that searches should see.

        Returns:
            The new index snapshot.
        """
        start_time = time.monotonic()
        index = InvertedIndex.build(documents)
        self._index = index
        logger.info(
            "Index rebuilt: %d terms over %d documents in %d ms",
            len(index),
            index.document_count,
            int((time.monotonic() - start_time) * 1000),
        )
        return index

    def search(
        self,
        query: str,
        documents: Sequence[Document],
        options: SearchOptions | None = None,
        *,
        index: InvertedIndex | None = None,
    ) -> SearchResponse:
        """Search a document collection.

        Args:
            query: Free-text query.
            documents: The collection to search; also the statistics base
                for relevance scoring.
            options: Strategy, filters, sorting and paging options.
            index: Index to use for standard search instead of the engine's
                current snapshot.

        Returns:
            The requested page of scored results plus the total match count.
        """
        start_time = time.monotonic()
        request_id = f"srch_{uuid.uuid4().hex[:12]}"
        options = options or SearchOptions()
        if index is None:
            index = self._index
        query = query or ""

        limit = self._effective_limit(options.limit)
        offset = options.offset

        # ── Stage 1: candidate selection ──
        strategy = SearchStrategy.from_options(options)
        candidates = select_candidates(
            strategy,
            query,
            documents,
            index,
            fuzzy_max_distance=self.settings.fuzzy_max_distance,
        )
        logger.debug("[%s] %s strategy selected %d candidates", request_id, strategy.value, len(candidates))

        # ── Stage 2: filters ──
        filtered = apply_filters(candidates, options.filters)

        # ── Stage 3: relevance ──
        scorer = RelevanceScorer(
            documents,
            filename_boost=self.settings.filename_boost,
            phrase_boost=self.settings.phrase_boost,
        )
        scored = [SearchResult(document=doc, relevance_score=scorer.score(query, doc)) for doc in filtered]

        # ── Stage 4 + 5: sort and paginate ──
        ordered = sort_results(scored, options.sort_by, options.sort_order)
        total = len(ordered)
        page = ordered[offset : offset + limit]

        processing_time_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            "[%s] Search %r (%s): %d candidates, %d after filters, returning %d in %d ms",
            request_id,
            query,
            strategy.value,
            len(candidates),
            total,
            len(page),
            processing_time_ms,
        )

        return SearchResponse(
            request_id=request_id,
            query=query,
            strategy=strategy.value,
            results=page,
            total=total,
            filters=options.filters,
            pagination=Pagination(limit=limit, offset=offset, has_more=offset + limit < total),
            processing_time_ms=processing_time_ms,
        )

    def get_suggestions(
        self,
        partial_query: str,
        documents: Sequence[Document],
        limit: int | None = None,
        *,
        index: InvertedIndex | None = None,
    ) -> list[str]:
        """Autocomplete candidates from the index and ``documents``."""
        return get_suggestions(
            partial_query,
            documents,
            index if index is not None else self._index,
            limit=limit if limit is not None else self.settings.suggestion_limit,
        )

    def highlight(self, text: str, query: str, class_name: str | None = None) -> str:
        """Wrap the query terms found in ``text`` in marker spans."""
        return highlight(text, query, class_name or self.settings.highlight_class)

    def analyze(self, history: Sequence[QueryHistoryEntry]) -> SearchAnalytics:
        """Summarize a query history with the configured window and top-N."""
        return analyze(
            history,
            top_n=self.analytics_settings.top_queries,
            window_days=self.analytics_settings.trend_window_days,
        )

    def _effective_limit(self, requested: int | None) -> int:
        if requested is None:
            return self.settings.default_limit
        if requested > self.settings.max_limit:
            logger.warning(
                "Requested limit %d exceeds max_limit %d, clamping",
                requested,
                self.settings.max_limit,
            )
            return self.settings.max_limit
        return requested
