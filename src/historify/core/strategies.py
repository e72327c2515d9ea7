"""Candidate selection strategies.

Exactly one strategy runs per search call:

- **standard**: token overlap through the inverted index (OR across terms)
- **phrase**: the whole query as a case-insensitive literal substring
- **fuzzy**: any query term within a small edit distance of any document term

Every strategy returns the matching documents in their input order; final
ordering is applied later by the sort step.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import assert_never

from historify.core.index import InvertedIndex
from historify.core.tokenizer import tokenize
from historify.models.document import Document
from historify.models.query import SearchOptions

DEFAULT_FUZZY_DISTANCE = 2


class SearchStrategy(str, Enum):
    """Candidate selection strategy."""

    STANDARD = "standard"
    PHRASE = "phrase"
    FUZZY = "fuzzy"

    @classmethod
    def from_options(cls, options: SearchOptions) -> SearchStrategy:
        """Pick the strategy for a call; exact phrase beats fuzzy beats standard."""
        if options.exact_phrase:
            return cls.PHRASE
        if options.fuzzy:
            return cls.FUZZY
        return cls.STANDARD


def edit_distance(source: str, target: str) -> int:
    """Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1.  Uses two rolling
    rows, so memory is linear in ``len(target)``.
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            if source_char == target_char:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def standard_search(query: str, documents: Sequence[Document], index: InvertedIndex) -> list[Document]:
    """Documents sharing at least one term with the query.

    A query without any indexable term (empty, or only stop words and short
    tokens) places no constraint and returns every document.

    Args:
        query: Raw query text.
        documents: The collection to select from.
        index: Index built from ``documents``.
    """
    query_terms = tokenize(query)
    if not query_terms:
        return list(documents)

    matching_ids = index.lookup_any(query_terms)
    return [doc for doc in documents if doc.document_id in matching_ids]


def phrase_search(query: str, documents: Sequence[Document]) -> list[Document]:
    """Documents whose text contains the whole query verbatim, ignoring case."""
    needle = (query or "").lower()
    return [doc for doc in documents if needle in doc.combined_text.lower()]


def fuzzy_search(
    query: str,
    documents: Sequence[Document],
    max_distance: int = DEFAULT_FUZZY_DISTANCE,
) -> list[Document]:
    """Documents with a term close to some query term.

    A document matches when any (query term, document term) pair is within
    ``max_distance`` edits.  Cost grows with query terms × document terms ×
    term length, which makes this the slowest strategy on large collections.
    """
    query_terms = set(tokenize(query))
    if not query_terms:
        return []

    matches: list[Document] = []
    for doc in documents:
        doc_terms = set(tokenize(doc.combined_text))
        if query_terms & doc_terms or any(
            edit_distance(query_term, doc_term) <= max_distance for query_term in query_terms for doc_term in doc_terms
        ):
            matches.append(doc)
    return matches


def select_candidates(
    strategy: SearchStrategy,
    query: str,
    documents: Sequence[Document],
    index: InvertedIndex,
    *,
    fuzzy_max_distance: int = DEFAULT_FUZZY_DISTANCE,
) -> list[Document]:
    """Run the given strategy and return its candidate set."""
    if strategy is SearchStrategy.STANDARD:
        return standard_search(query, documents, index)
    elif strategy is SearchStrategy.PHRASE:
        return phrase_search(query, documents)
    elif strategy is SearchStrategy.FUZZY:
        return fuzzy_search(query, documents, max_distance=fuzzy_max_distance)
    else:
        assert_never(strategy)
