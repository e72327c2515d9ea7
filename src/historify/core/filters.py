"""Structured result filters.

Each active filter becomes an independent predicate; a document survives
only if every predicate accepts it.  Filters whose options are unset add no
predicate at all.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from historify.models.document import Document
from historify.models.query import SearchFilters

Predicate = Callable[[Document], bool]

EARLIEST_DATE = datetime(1900, 1, 1, tzinfo=UTC)


def _date_range(date_from: datetime | None, date_to: datetime | None) -> Predicate:
    lower = date_from or EARLIEST_DATE
    upper = date_to or datetime.now(UTC)

    def accept(doc: Document) -> bool:
        # Undated documents cannot be placed in any range.
        return doc.upload_date is not None and lower <= doc.upload_date <= upper

    return accept


def _file_types(file_types: list[str]) -> Predicate:
    def accept(doc: Document) -> bool:
        declared = doc.metadata.file_type if doc.metadata else None
        name = doc.file_name.lower()
        return any((declared is not None and kind in declared) or kind in name for kind in file_types)

    return accept


def _sources(sources: list[str]) -> Predicate:
    accepted = set(sources)

    def accept(doc: Document) -> bool:
        return doc.metadata is not None and doc.metadata.source in accepted

    return accept


def _tags(tags: list[str]) -> Predicate:
    wanted = set(tags)

    def accept(doc: Document) -> bool:
        return not wanted.isdisjoint(doc.tags)

    return accept


def _size_range(min_size: int | None, max_size: int | None) -> Predicate:
    lower = min_size or 0
    upper = max_size or float("inf")

    def accept(doc: Document) -> bool:
        return lower <= doc.file_size <= upper

    return accept


def build_predicates(filters: SearchFilters) -> list[Predicate]:
    """Translate the active filters into predicates.

    A zero size bound counts as unset, so ``max_size=0`` means unbounded.
    """
    predicates: list[Predicate] = []
    if filters.date_from or filters.date_to:
        predicates.append(_date_range(filters.date_from, filters.date_to))
    if filters.file_types:
        predicates.append(_file_types(filters.file_types))
    if filters.sources:
        predicates.append(_sources(filters.sources))
    if filters.tags:
        predicates.append(_tags(filters.tags))
    if filters.min_size or filters.max_size:
        predicates.append(_size_range(filters.min_size, filters.max_size))
    return predicates


def apply_filters(documents: Sequence[Document], filters: SearchFilters | None) -> list[Document]:
    """Keep the documents that pass every active filter, in input order."""
    if filters is None:
        return list(documents)

    predicates = build_predicates(filters)
    if not predicates:
        return list(documents)
    return [doc for doc in documents if all(accept(doc) for accept in predicates)]
