"""Inverted index: term to document-id postings.

An :class:`InvertedIndex` is an immutable snapshot of one document
collection.  Rebuilding after the collection changes produces a new snapshot;
holders of the old one keep a consistent, complete view until they drop it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from historify.core.tokenizer import tokenize
from historify.models.document import Document

logger = logging.getLogger(__name__)

_EMPTY: frozenset[str] = frozenset()


class InvertedIndex:
    """Maps each term to the set of ids of the documents containing it.

    Terms are kept in the order they were first seen while building, which
    is the order :meth:`terms` yields them in.

    Example:
        >>> index = InvertedIndex.build(documents)
        >>> index.lookup("census")
        frozenset({'d1'})
    """

    def __init__(self, postings: Mapping[str, frozenset[str]] | None = None, document_count: int = 0) -> None:
        self._postings: Mapping[str, frozenset[str]] = MappingProxyType(dict(postings or {}))
        self._document_count = document_count

    @classmethod
    def build(cls, documents: Iterable[Document]) -> InvertedIndex:
        """Build a fresh index from the full document collection.

        Each document contributes the terms of its OCR text and file name.
        Nothing from any earlier index is carried over.
        """
        postings: dict[str, set[str]] = {}
        document_count = 0
        for doc in documents:
            document_count += 1
            for term in tokenize(doc.combined_text):
                postings.setdefault(term, set()).add(doc.document_id)

        logger.debug("Built inverted index: %d terms over %d documents", len(postings), document_count)
        return cls({term: frozenset(ids) for term, ids in postings.items()}, document_count)

    @property
    def document_count(self) -> int:
        """Number of documents the index was built from."""
        return self._document_count

    def lookup(self, term: str) -> frozenset[str]:
        """Ids of the documents containing ``term`` (empty when unknown)."""
        return self._postings.get(term, _EMPTY)

    def lookup_any(self, terms: Iterable[str]) -> set[str]:
        """Union of the postings of every term (OR semantics)."""
        matched: set[str] = set()
        for term in terms:
            matched.update(self.lookup(term))
        return matched

    def terms(self) -> Iterator[str]:
        """Iterate over indexed terms in first-seen order."""
        return iter(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def __repr__(self) -> str:
        return f"InvertedIndex(terms={len(self)}, documents={self._document_count})"
