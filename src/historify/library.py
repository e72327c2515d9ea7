"""Document library: the host-side owner of documents, index and history.

The library keeps the search engine's index in step with the document
collection: every change to the collection rebuilds the index while holding
the library lock, and every query snapshots (documents, index) under the same
lock.  A query therefore always sees an index built from exactly the
documents it searches.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path

from historify.config.settings import Settings
from historify.core.engine import SearchEngine
from historify.core.index import InvertedIndex
from historify.models.analytics import QueryHistoryEntry, SearchAnalytics
from historify.models.document import Document
from historify.models.query import SearchOptions
from historify.models.response import SearchResponse
from historify.store.documents import DocumentStore, load_documents
from historify.store.history import QueryHistory

logger = logging.getLogger(__name__)


class DocumentLibrary:
    """A searchable document collection.

    One library is created per application; API handlers receive it through
    dependency injection.

    Attributes:
        settings: Application configuration.
        engine: The search engine owning the index.
        store: The document collection.
        history: Log of executed searches.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.engine = SearchEngine(self.settings.search, self.settings.analytics)
        self.store = DocumentStore()
        self.history = QueryHistory(max_size=self.settings.analytics.history_size)
        self._lock = threading.RLock()

    # ──────────────────────────────────────────────────────────────────────
    # Collection management
    # ──────────────────────────────────────────────────────────────────────

    def load(self, path: str | Path) -> int:
        """Replace the collection with the documents of a JSON file.

        Returns:
            Number of documents loaded.
        """
        documents = load_documents(path)
        self.replace_documents(documents)
        return len(documents)

    def replace_documents(self, documents: Iterable[Document]) -> None:
        """Swap the whole collection and rebuild the index."""
        with self._lock:
            self.store.replace(documents)
            self.engine.build_index(self.store.all())

    def add_document(self, document: Document) -> bool:
        """Add or replace one document and rebuild the index.

        Returns:
            True if the document was new.
        """
        with self._lock:
            created = self.store.upsert(document)
            self.engine.build_index(self.store.all())
        logger.info("Document %s %s", document.document_id, "added" if created else "replaced")
        return created

    def remove_document(self, document_id: str) -> Document:
        """Remove one document and rebuild the index."""
        with self._lock:
            removed = self.store.remove(document_id)
            self.engine.build_index(self.store.all())
        logger.info("Document %s removed", document_id)
        return removed

    def get_document(self, document_id: str) -> Document:
        with self._lock:
            return self.store.get(document_id)

    def list_documents(self) -> tuple[Document, ...]:
        with self._lock:
            return self.store.all()

    @property
    def index(self) -> InvertedIndex:
        return self.engine.index

    # ──────────────────────────────────────────────────────────────────────
    # Queries
    # ──────────────────────────────────────────────────────────────────────

    def _snapshot(self) -> tuple[tuple[Document, ...], InvertedIndex]:
        with self._lock:
            return self.store.all(), self.engine.index

    def search(self, query: str, options: SearchOptions | None = None) -> SearchResponse:
        """Search the collection and record the search in the history."""
        documents, index = self._snapshot()
        response = self.engine.search(query, documents, options, index=index)
        self.history.record(query, response.total)
        return response

    def suggestions(self, partial_query: str, limit: int | None = None) -> list[str]:
        documents, index = self._snapshot()
        return self.engine.get_suggestions(partial_query, documents, limit, index=index)

    def highlight(self, text: str, query: str, class_name: str | None = None) -> str:
        return self.engine.highlight(text, query, class_name)

    def analytics(self, history: Sequence[QueryHistoryEntry] | None = None) -> SearchAnalytics:
        """Analytics over ``history``, or over the recorded searches when omitted."""
        return self.engine.analyze(self.history.entries() if history is None else history)
