"""Tests for the document collection endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from historify.api.app import create_app
from historify.config.settings import Settings
from historify.library import DocumentLibrary


@pytest.fixture
def client(settings: Settings, library: DocumentLibrary) -> TestClient:
    return TestClient(create_app(settings, library=library))


def _search_ids(client: TestClient, query: str) -> list[str]:
    resp = client.post("/v1/search", json={"query": query})
    return [r["document"]["documentId"] for r in resp.json()["results"]]


class TestListAndGet:
    def test_list(self, client: TestClient) -> None:
        resp = client.get("/v1/documents")
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 4
        assert [d["documentId"] for d in data["documents"]] == ["d1", "d2", "d3", "d4"]

    def test_get(self, client: TestClient) -> None:
        resp = client.get("/v1/documents/d2")
        assert resp.status_code == 200
        data = resp.json()
        assert data["fileName"] == "Immigration.jpg"
        assert data["metadata"]["source"] == "Ellis Island"

    def test_get_missing_returns_404(self, client: TestClient) -> None:
        resp = client.get("/v1/documents/nope")
        assert resp.status_code == 404
        assert "nope" in resp.json()["detail"]


class TestWrites:
    def test_add_new_document_returns_201(self, client: TestClient) -> None:
        resp = client.post("/v1/documents", json={"documentId": "d5", "ocrText": "Zeppelin raid report"})
        assert resp.status_code == 201
        assert _search_ids(client, "zeppelin") == ["d5"]

    def test_replace_existing_document_returns_200(self, client: TestClient) -> None:
        resp = client.post("/v1/documents", json={"documentId": "d3", "ocrText": "Cargo manifest"})
        assert resp.status_code == 200
        assert _search_ids(client, "lusitania") == []
        assert _search_ids(client, "cargo") == ["d3"]

    def test_add_invalid_document_returns_422(self, client: TestClient) -> None:
        resp = client.post("/v1/documents", json={"documentId": "", "ocrText": "x"})
        assert resp.status_code == 422

    def test_delete(self, client: TestClient) -> None:
        resp = client.delete("/v1/documents/d1")
        assert resp.status_code == 204
        assert client.get("/v1/documents/d1").status_code == 404
        assert _search_ids(client, "smith") == ["d2"]

    def test_delete_missing_returns_404(self, client: TestClient) -> None:
        assert client.delete("/v1/documents/nope").status_code == 404

    def test_replace_collection(self, client: TestClient) -> None:
        resp = client.put(
            "/v1/documents",
            json=[
                {"documentId": "a", "fileName": "Deed.pdf", "ocrText": "land deed"},
                {"documentId": "b", "ocrText": "parish register"},
            ],
        )
        assert resp.status_code == 200
        assert resp.json()["total"] == 2
        assert _search_ids(client, "smith") == []
        assert _search_ids(client, "deed") == ["a"]

    def test_replace_with_duplicates_returns_409(self, client: TestClient) -> None:
        resp = client.put("/v1/documents", json=[{"documentId": "a"}, {"documentId": "a"}])
        assert resp.status_code == 409
        assert client.get("/v1/documents").json()["total"] == 4
