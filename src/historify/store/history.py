"""Query history: a bounded log of past searches."""

from __future__ import annotations

from collections import deque
from datetime import datetime

from historify.models.analytics import QueryHistoryEntry


class QueryHistory:
    """Keeps the most recent searches; the oldest entries drop off first."""

    def __init__(self, max_size: int = 1000) -> None:
        self._entries: deque[QueryHistoryEntry] = deque(maxlen=max_size)

    def record(self, query: str, result_count: int, timestamp: datetime | None = None) -> QueryHistoryEntry:
        """Append a search to the log."""
        if timestamp is None:
            entry = QueryHistoryEntry(query=query, result_count=result_count)
        else:
            entry = QueryHistoryEntry(query=query, result_count=result_count, timestamp=timestamp)
        self._entries.append(entry)
        return entry

    def entries(self) -> list[QueryHistoryEntry]:
        """Recorded searches, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
