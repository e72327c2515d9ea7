"""Historify Python SDK: Async and sync clients for the Historify REST API.

Usage::

    # Async
    async with AsyncHistorifyClient("http://localhost:8080") as client:
        response = await client.search("census 1920")

    # Sync (wraps async client internally)
    client = HistorifyClient("http://localhost:8080")
    response = client.search("census 1920", fuzzy=True)
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine, Sequence
from typing import Any, TypeVar, cast
from urllib.parse import quote

import httpx

_T = TypeVar("_T")

# Responses are plain dicts mirroring the server's camelCase JSON, so the SDK
# does not depend on the server models.
JSONDict = dict[str, Any]


def _search_payload(query: str, options: dict[str, Any]) -> JSONDict:
    return {"query": query, "options": {key: value for key, value in options.items() if value is not None}}


# ═══════════════════════════════════════════════════════════════════════════════
# Async client
# ═══════════════════════════════════════════════════════════════════════════════


class AsyncHistorifyClient:
    """Async Python client for the Historify API.

    Args:
        base_url: Historify server URL, e.g. ``"http://localhost:8080"``.
        timeout: Request timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.

    Example::

        async with AsyncHistorifyClient("http://localhost:8080") as client:
            resp = await client.search("smith john", exact_phrase=True)
            for r in resp["results"]:
                print(r["document"]["fileName"], r["relevanceScore"])
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        timeout: float = 30.0,
        **httpx_kwargs: Any,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            **httpx_kwargs,
        )

    async def __aenter__(self) -> AsyncHistorifyClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _get(self, path: str, **params: Any) -> Any:
        resp = await self._client.get(path, params={k: v for k, v in params.items() if v is not None})
        resp.raise_for_status()
        return resp.json()

    async def _send(self, method: str, path: str, payload: Any) -> Any:
        resp = await self._client.request(method, path, json=payload)
        resp.raise_for_status()
        return resp.json()

    # ── Health ──

    async def health(self) -> JSONDict:
        """Check server health."""
        return cast(JSONDict, await self._get("/v1/health"))

    # ── Search ──

    async def search(
        self,
        query: str,
        *,
        fuzzy: bool = False,
        exact_phrase: bool = False,
        sort_by: str | None = None,
        sort_order: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        filters: dict[str, Any] | None = None,
    ) -> JSONDict:
        """Search the document collection.

        Args:
            query: Free-text query.
            fuzzy: Match terms within a small edit distance.
            exact_phrase: Match the whole query as a literal substring.
            sort_by: ``relevance``, ``date``, ``name`` or ``size``.
            sort_order: ``asc`` or ``desc``.
            limit: Page size.
            offset: Results to skip.
            filters: Filter dict using the API's camelCase keys
                (``dateFrom``, ``fileTypes``, ``sources``, ``tags``, ...).

        Returns:
            Search response dict with ``results``, ``total`` and ``pagination``.
        """
        payload = _search_payload(
            query,
            {
                "fuzzy": fuzzy,
                "exactPhrase": exact_phrase,
                "sortBy": sort_by,
                "sortOrder": sort_order,
                "limit": limit,
                "offset": offset,
                "filters": filters,
            },
        )
        return cast(JSONDict, await self._send("POST", "/v1/search", payload))

    async def suggestions(self, partial_query: str, *, limit: int | None = None) -> list[str]:
        """Autocomplete a partial query."""
        data = await self._get("/v1/suggestions", q=partial_query, limit=limit)
        return cast(list[str], data["suggestions"])

    async def highlight(self, text: str, query: str, *, class_name: str | None = None) -> str:
        """Return ``text`` with the query terms wrapped in marker spans."""
        payload: JSONDict = {"text": text, "query": query}
        if class_name:
            payload["className"] = class_name
        data = await self._send("POST", "/v1/highlight", payload)
        return cast(str, data["text"])

    # ── Analytics ──

    async def analytics(self, history: Sequence[JSONDict] | None = None) -> JSONDict:
        """Search analytics; over ``history`` if given, else over the server's log."""
        if history is None:
            return cast(JSONDict, await self._get("/v1/analytics"))
        return cast(JSONDict, await self._send("POST", "/v1/analytics", list(history)))

    # ── Documents ──

    async def list_documents(self) -> list[JSONDict]:
        data = await self._get("/v1/documents")
        return cast(list[JSONDict], data["documents"])

    async def get_document(self, document_id: str) -> JSONDict:
        return cast(JSONDict, await self._get(f"/v1/documents/{quote(document_id, safe='')}"))

    async def replace_documents(self, documents: Sequence[JSONDict]) -> int:
        """Replace the server's collection.

        Returns:
            Number of documents now in the collection.
        """
        data = await self._send("PUT", "/v1/documents", list(documents))
        return cast(int, data["total"])

    async def add_document(self, document: JSONDict) -> JSONDict:
        return cast(JSONDict, await self._send("POST", "/v1/documents", document))

    async def delete_document(self, document_id: str) -> None:
        resp = await self._client.delete(f"/v1/documents/{quote(document_id, safe='')}")
        resp.raise_for_status()


# ═══════════════════════════════════════════════════════════════════════════════
# Sync client (wraps AsyncHistorifyClient)
# ═══════════════════════════════════════════════════════════════════════════════


class HistorifyClient:
    """Synchronous Python client for the Historify API.

    Wraps :class:`AsyncHistorifyClient` using ``asyncio.run``; each call
    opens and closes its own connection.

    Example::

        client = HistorifyClient("http://localhost:8080")
        resp = client.search("immigration ireland", sort_by="date")
        print(resp["total"])
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        timeout: float = 30.0,
        **httpx_kwargs: Any,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs

    def _run(self, coro: Coroutine[Any, Any, _T]) -> _T:
        """Run an async coroutine synchronously."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            # Already inside an event loop (e.g. Jupyter): run in a worker thread
            import concurrent.futures

            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
                return pool.submit(asyncio.run, coro).result()
        return asyncio.run(coro)

    def _call(self, method: str, *args: Any, **kwargs: Any) -> Any:
        async def _invoke() -> Any:
            async with AsyncHistorifyClient(self._base_url, timeout=self._timeout, **self._httpx_kwargs) as c:
                return await getattr(c, method)(*args, **kwargs)

        return self._run(_invoke())

    def health(self) -> JSONDict:
        return cast(JSONDict, self._call("health"))

    def search(self, query: str, **options: Any) -> JSONDict:
        """Search the document collection; see :meth:`AsyncHistorifyClient.search`."""
        return cast(JSONDict, self._call("search", query, **options))

    def suggestions(self, partial_query: str, *, limit: int | None = None) -> list[str]:
        return cast(list[str], self._call("suggestions", partial_query, limit=limit))

    def highlight(self, text: str, query: str, *, class_name: str | None = None) -> str:
        return cast(str, self._call("highlight", text, query, class_name=class_name))

    def analytics(self, history: Sequence[JSONDict] | None = None) -> JSONDict:
        return cast(JSONDict, self._call("analytics", history))

    def list_documents(self) -> list[JSONDict]:
        return cast(list[JSONDict], self._call("list_documents"))

    def get_document(self, document_id: str) -> JSONDict:
        return cast(JSONDict, self._call("get_document", document_id))

    def replace_documents(self, documents: Sequence[JSONDict]) -> int:
        return cast(int, self._call("replace_documents", documents))

    def add_document(self, document: JSONDict) -> JSONDict:
        return cast(JSONDict, self._call("add_document", document))

    def delete_document(self, document_id: str) -> None:
        self._call("delete_document", document_id)
