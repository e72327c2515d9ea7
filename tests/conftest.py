"""Shared test fixtures and configuration."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from historify.config.settings import Settings
from historify.core.engine import SearchEngine
from historify.core.index import InvertedIndex
from historify.library import DocumentLibrary
from historify.models.document import Document, DocumentMetadata


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        observability={"log_level": "warning", "log_format": "console"},
    )


# ── Document fixtures ──


@pytest.fixture
def census_record() -> Document:
    """1920 census page: 'smith john factory worker'."""
    return Document(
        document_id="d1",
        file_name="Census_1920.pdf",
        ocr_text="Smith John factory worker",
        upload_date=datetime(2024, 3, 1, 9, 30, tzinfo=UTC),
        metadata=DocumentMetadata(file_type="application/pdf", file_size=2048, source="National Archives"),
        tags=["census"],
    )


@pytest.fixture
def immigration_record() -> Document:
    """Immigration photo sharing 'smith john' with the census page."""
    return Document(
        document_id="d2",
        file_name="Immigration.jpg",
        ocr_text="Smith John laborer Ireland",
        upload_date=datetime(2024, 2, 10, 14, 0, tzinfo=UTC),
        metadata=DocumentMetadata(file_type="image/jpeg", file_size=512, source="Ellis Island"),
        tags=["immigration"],
    )


@pytest.fixture
def ship_manifest() -> Document:
    return Document(
        document_id="d3",
        file_name="Ship_Manifest.pdf",
        ocr_text="Passenger list of the steamship Lusitania",
        upload_date=datetime(2024, 1, 5, 8, 0, tzinfo=UTC),
        metadata=DocumentMetadata(file_type="application/pdf", file_size=4096, source="National Archives"),
        tags=["immigration", "shipping"],
    )


@pytest.fixture
def undated_letter() -> Document:
    """A document with no upload date and no metadata."""
    return Document(
        document_id="d4",
        file_name="note.txt",
        ocr_text="Handwritten letter from a factory owner",
    )


@pytest.fixture
def documents(
    census_record: Document,
    immigration_record: Document,
    ship_manifest: Document,
    undated_letter: Document,
) -> list[Document]:
    """The four-document sample collection, in insertion order d1..d4."""
    return [census_record, immigration_record, ship_manifest, undated_letter]


@pytest.fixture
def index(documents: list[Document]) -> InvertedIndex:
    return InvertedIndex.build(documents)


@pytest.fixture
def engine(settings: Settings, documents: list[Document]) -> SearchEngine:
    """Search engine with its index built over the sample collection."""
    engine = SearchEngine(settings.search, settings.analytics)
    engine.build_index(documents)
    return engine


@pytest.fixture
def library(settings: Settings, documents: list[Document]) -> DocumentLibrary:
    """Document library seeded with the sample collection."""
    library = DocumentLibrary(settings)
    library.replace_documents(documents)
    return library
