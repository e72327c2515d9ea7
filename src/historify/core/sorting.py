"""Result ordering."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Any, assert_never

from historify.models.query import SortField, SortOrder
from historify.models.response import SearchResult

_UNDATED = datetime.min.replace(tzinfo=UTC)


def _name_key(name: str) -> tuple[str, str, str]:
    """Accent-folded, case-folded name first, so "École" sorts beside "Ellis"."""
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(char for char in decomposed if not unicodedata.combining(char))
    return folded.casefold(), name.casefold(), name


def _sort_key(sort_by: SortField) -> Callable[[SearchResult], Any]:
    if sort_by is SortField.RELEVANCE:
        return lambda result: result.relevance_score or 0.0
    elif sort_by is SortField.DATE:
        return lambda result: result.document.upload_date or _UNDATED
    elif sort_by is SortField.NAME:
        return lambda result: _name_key(result.document.file_name)
    elif sort_by is SortField.SIZE:
        return lambda result: result.document.file_size
    else:
        assert_never(sort_by)


def sort_results(
    results: Sequence[SearchResult],
    sort_by: SortField = SortField.RELEVANCE,
    sort_order: SortOrder = SortOrder.DESC,
) -> list[SearchResult]:
    """Order results by the requested key.

    Results with equal keys are ordered by ``document_id`` ascending in both
    directions, which keeps pagination stable across calls.
    """
    # Stable sort, also with reverse=True: ties keep the id order of the first pass.
    by_id = sorted(results, key=lambda result: result.document.document_id)
    return sorted(by_id, key=_sort_key(sort_by), reverse=sort_order is SortOrder.DESC)
