"""Tests for the Historify Python SDK client."""

from __future__ import annotations

from collections.abc import AsyncIterator
from unittest.mock import patch

import httpx
import pytest

from historify.api.app import create_app
from historify.client import AsyncHistorifyClient, HistorifyClient
from historify.client.client import _search_payload
from historify.config.settings import Settings
from historify.library import DocumentLibrary


@pytest.fixture
async def client(settings: Settings, library: DocumentLibrary) -> AsyncIterator[AsyncHistorifyClient]:
    """Async SDK client talking to an in-process app."""
    transport = httpx.ASGITransport(app=create_app(settings, library=library))
    async with AsyncHistorifyClient("http://testserver", transport=transport) as c:
        yield c


class TestSearchPayload:
    def test_drops_unset_options(self) -> None:
        payload = _search_payload("smith", {"fuzzy": True, "sortBy": None, "limit": 0})
        assert payload == {"query": "smith", "options": {"fuzzy": True, "limit": 0}}


class TestAsyncClient:
    async def test_health(self, client: AsyncHistorifyClient) -> None:
        data = await client.health()
        assert data["status"] == "healthy"
        assert data["documentCount"] == 4

    async def test_search(self, client: AsyncHistorifyClient) -> None:
        data = await client.search("smith john", limit=1)
        assert data["total"] == 2
        assert [r["document"]["documentId"] for r in data["results"]] == ["d1"]
        assert data["pagination"]["hasMore"] is True

    async def test_search_with_options(self, client: AsyncHistorifyClient) -> None:
        data = await client.search("", sort_by="name", sort_order="asc", filters={"tags": ["immigration"]})
        assert [r["document"]["documentId"] for r in data["results"]] == ["d2", "d3"]

    async def test_fuzzy_search(self, client: AsyncHistorifyClient) -> None:
        data = await client.search("lusitanai", fuzzy=True)
        assert data["strategy"] == "fuzzy"
        assert data["total"] == 1

    async def test_suggestions(self, client: AsyncHistorifyClient) -> None:
        assert await client.suggestions("lus") == ["lusitania"]

    async def test_highlight(self, client: AsyncHistorifyClient) -> None:
        text = await client.highlight("Smith", "smith", class_name="hit")
        assert text == '<span class="hit">Smith</span>'

    async def test_analytics(self, client: AsyncHistorifyClient) -> None:
        await client.search("smith")
        recorded = await client.analytics()
        supplied = await client.analytics([{"query": "census", "resultCount": 2}])

        assert recorded["totalSearches"] == 1
        assert supplied["topQueries"] == [{"query": "census", "count": 1}]

    async def test_document_lifecycle(self, client: AsyncHistorifyClient) -> None:
        added = await client.add_document({"documentId": "d5", "ocrText": "Zeppelin raid"})
        assert added["documentId"] == "d5"
        assert (await client.get_document("d5"))["ocrText"] == "Zeppelin raid"

        await client.delete_document("d5")
        assert len(await client.list_documents()) == 4

    async def test_replace_documents(self, client: AsyncHistorifyClient) -> None:
        assert await client.replace_documents([{"documentId": "a"}, {"documentId": "b"}]) == 2

    async def test_document_ids_are_escaped_in_paths(self, client: AsyncHistorifyClient) -> None:
        document_id = "box 12/folder 3?page=1#a"
        await client.add_document({"documentId": document_id, "ocrText": "Zeppelin raid"})

        assert (await client.get_document(document_id))["documentId"] == document_id
        await client.delete_document(document_id)
        assert len(await client.list_documents()) == 4

    async def test_missing_document_raises(self, client: AsyncHistorifyClient) -> None:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await client.get_document("nope")
        assert exc_info.value.response.status_code == 404


class TestSyncClient:
    def test_delegates_to_async_client(self) -> None:
        client = HistorifyClient("http://testserver")

        async def fake_search(self: AsyncHistorifyClient, query: str, **options: object) -> dict:
            return {"query": query, "options": options}

        with patch.object(AsyncHistorifyClient, "search", fake_search):
            result = client.search("smith", fuzzy=True)

        assert result == {"query": "smith", "options": {"fuzzy": True}}

    def test_uses_transport(self, settings: Settings, library: DocumentLibrary) -> None:
        transport = httpx.ASGITransport(app=create_app(settings, library=library))
        client = HistorifyClient("http://testserver", transport=transport)

        assert client.health()["status"] == "healthy"
        assert client.suggestions("sm") == ["smith"]
