"""Tests for the document store, document loading and the query history."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from historify.exceptions import DocumentLoadError, DocumentNotFoundError, DuplicateDocumentError
from historify.models.document import Document
from historify.store import DocumentStore, QueryHistory, load_documents


class TestDocumentModel:
    def test_camel_case_payload(self) -> None:
        doc = Document.model_validate(
            {
                "documentId": "d9",
                "fileName": "Deed.pdf",
                "ocrText": None,
                "uploadDate": "2024-05-01T10:00:00Z",
                "metadata": {"fileType": "application/pdf", "fileSize": 10, "source": "County Clerk"},
                "tags": None,
            }
        )
        assert doc.ocr_text == ""
        assert doc.tags == []
        assert doc.upload_date == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)
        assert doc.file_size == 10

    def test_combined_text(self, census_record: Document) -> None:
        assert census_record.combined_text == "Smith John factory worker Census_1920.pdf"

    def test_blank_upload_date_is_none(self) -> None:
        assert Document(document_id="x", upload_date="").upload_date is None

    def test_unknown_size_is_zero(self, undated_letter: Document) -> None:
        assert undated_letter.file_size == 0


class TestDocumentStore:
    def test_replace_keeps_order(self, documents: list[Document]) -> None:
        store = DocumentStore(documents)
        assert [doc.document_id for doc in store.all()] == ["d1", "d2", "d3", "d4"]
        assert len(store) == 4

    def test_replace_rejects_duplicate_ids(self, documents: list[Document]) -> None:
        store = DocumentStore(documents[:2])
        with pytest.raises(DuplicateDocumentError):
            store.replace([documents[0], documents[0]])
        assert len(store) == 2

    def test_upsert(self, census_record: Document) -> None:
        store = DocumentStore()
        assert store.upsert(census_record) is True
        updated = census_record.model_copy(update={"ocr_text": "Smith Jane"})
        assert store.upsert(updated) is False
        assert store.get("d1").ocr_text == "Smith Jane"
        assert len(store) == 1

    def test_remove(self, documents: list[Document]) -> None:
        store = DocumentStore(documents)
        removed = store.remove("d2")
        assert removed.document_id == "d2"
        assert "d2" not in store

    def test_missing_document(self) -> None:
        store = DocumentStore()
        with pytest.raises(DocumentNotFoundError):
            store.get("nope")
        with pytest.raises(DocumentNotFoundError):
            store.remove("nope")


class TestLoadDocuments:
    def test_list_file(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text(json.dumps([{"documentId": "a", "ocrText": "census"}, {"documentId": "b"}]))
        assert [doc.document_id for doc in load_documents(path)] == ["a", "b"]

    def test_wrapped_file(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text(json.dumps({"documents": [{"documentId": "a"}]}))
        assert len(load_documents(path)) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError, match="not found"):
            load_documents(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text("{not json")
        with pytest.raises(DocumentLoadError):
            load_documents(path)

    def test_invalid_record(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text(json.dumps([{"fileName": "no-id.pdf"}]))
        with pytest.raises(DocumentLoadError, match="Invalid document records"):
            load_documents(path)


class TestQueryHistory:
    def test_record_and_entries(self) -> None:
        history = QueryHistory()
        history.record("census", 3)
        history.record("smith", 0, timestamp=datetime(2024, 1, 1, tzinfo=UTC))

        entries = history.entries()
        assert [e.query for e in entries] == ["census", "smith"]
        assert entries[1].timestamp == datetime(2024, 1, 1, tzinfo=UTC)

    def test_bounded(self) -> None:
        history = QueryHistory(max_size=2)
        for query in ("a", "b", "c"):
            history.record(query, 0)
        assert [e.query for e in history.entries()] == ["b", "c"]

    def test_clear(self) -> None:
        history = QueryHistory()
        history.record("census", 1)
        history.clear()
        assert len(history) == 0
