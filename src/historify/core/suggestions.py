"""Autocomplete suggestions from index terms and raw document words."""

from __future__ import annotations

import re
from collections.abc import Sequence

from historify.core.index import InvertedIndex
from historify.models.document import Document

MIN_PREFIX_LENGTH = 2

_WORD = re.compile(r"\b\w{3,}\b")


def get_suggestions(
    partial_query: str,
    documents: Sequence[Document],
    index: InvertedIndex,
    limit: int = 5,
) -> list[str]:
    """Complete a partially typed query.

    Candidates are index terms (stemmed) followed by unstemmed words of at
    least three characters taken straight from the documents, both matched
    on the lowercased prefix.  Collection stops at ``2 * limit`` distinct
    candidates; the first ``limit`` are returned, shortest first.

    Args:
        partial_query: What the user has typed so far.
        documents: Collection to draw raw words from.
        index: Index built from ``documents``.
        limit: Maximum number of suggestions.

    Returns:
        Suggestions ordered by length; empty for prefixes shorter than 2.
    """
    if not partial_query or len(partial_query) < MIN_PREFIX_LENGTH or limit <= 0:
        return []

    prefix = partial_query.lower()
    cap = limit * 2
    # dict keeps insertion order, which decides what survives truncation
    candidates: dict[str, None] = {}

    for term in index.terms():
        if len(candidates) >= cap:
            break
        if term.startswith(prefix):
            candidates[term] = None

    for doc in documents:
        if len(candidates) >= cap:
            break
        for word in _WORD.findall(doc.combined_text.lower()):
            if len(candidates) >= cap:
                break
            if word.startswith(prefix):
                candidates[word] = None

    return sorted(list(candidates)[:limit], key=len)
