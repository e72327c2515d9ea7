"""Search analytics over a query history."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from historify.models.analytics import DailySearchCount, QueryCount, QueryHistoryEntry, SearchAnalytics

DEFAULT_TOP_QUERIES = 10
DEFAULT_TREND_WINDOW_DAYS = 30


def analyze(
    history: Sequence[QueryHistoryEntry],
    *,
    now: datetime | None = None,
    top_n: int = DEFAULT_TOP_QUERIES,
    window_days: int = DEFAULT_TREND_WINDOW_DAYS,
) -> SearchAnalytics:
    """Summarize a search history.

    Args:
        history: Recorded searches, in the order they happened.
        now: Reference time for the trend window (defaults to the current time).
        top_n: Number of most frequent queries to report.
        window_days: Trend window length in days, counted back from ``now``.

    Returns:
        Totals, the most frequent queries (ties in first-seen order) and
        per-day search counts inside the window, oldest day first.
    """
    if not history:
        return SearchAnalytics()

    query_counts = Counter(entry.query for entry in history)
    top_queries = [QueryCount(query=query, count=count) for query, count in query_counts.most_common(top_n)]

    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    window_start = now - timedelta(days=window_days)

    per_day = Counter(entry.timestamp.astimezone(UTC).date() for entry in history if entry.timestamp >= window_start)
    search_trends = [DailySearchCount(date=day, count=count) for day, count in sorted(per_day.items())]

    return SearchAnalytics(
        total_searches=len(history),
        unique_queries=len(query_counts),
        average_results_per_search=sum(entry.result_count for entry in history) / len(history),
        top_queries=top_queries,
        search_trends=search_trends,
    )
