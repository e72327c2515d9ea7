"""Document store: the in-memory collection the search engine indexes.

The store guarantees that ``document_id`` is unique across the collection,
which the search core relies on but does not check.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from historify.exceptions import DocumentLoadError, DocumentNotFoundError, DuplicateDocumentError
from historify.models.document import Document

logger = logging.getLogger(__name__)

_DOCUMENT_LIST = TypeAdapter(list[Document])


def load_documents(path: str | Path) -> list[Document]:
    """Read documents from a JSON file.

    The file holds either a list of document objects or an object with a
    ``documents`` list, as exported by the upload pipeline.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed documents.

    Raises:
        DocumentLoadError: If the file is missing, not JSON, or holds
            records that are not valid documents.
    """
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8") as f:
            data: Any = json.load(f)
    except FileNotFoundError as e:
        raise DocumentLoadError(f"Document file not found: {file_path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise DocumentLoadError(f"Cannot read document file {file_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents", [])

    try:
        documents = _DOCUMENT_LIST.validate_python(data)
    except ValidationError as e:
        raise DocumentLoadError(f"Invalid document records in {file_path}: {e}") from e

    logger.info("Loaded %d documents from %s", len(documents), file_path)
    return documents


class DocumentStore:
    """Ordered, id-unique collection of documents.

    Documents keep the order they were added in; replacing a document keeps
    its position.
    """

    def __init__(self, documents: Iterable[Document] | None = None) -> None:
        self._documents: dict[str, Document] = {}
        if documents is not None:
            self.replace(documents)

    def replace(self, documents: Iterable[Document]) -> None:
        """Swap the whole collection.

        Raises:
            DuplicateDocumentError: If two documents share an id.  The
                current collection is left untouched.
        """
        incoming: dict[str, Document] = {}
        for doc in documents:
            if doc.document_id in incoming:
                raise DuplicateDocumentError(f"Duplicate documentId '{doc.document_id}'")
            incoming[doc.document_id] = doc
        self._documents = incoming
        logger.debug("Document collection replaced: %d documents", len(incoming))

    def upsert(self, document: Document) -> bool:
        """Add a document or replace the one with the same id.

        Returns:
            True if the document was new.
        """
        created = document.document_id not in self._documents
        self._documents[document.document_id] = document
        return created

    def remove(self, document_id: str) -> Document:
        """Remove and return a document.

        Raises:
            DocumentNotFoundError: If no document has this id.
        """
        try:
            return self._documents.pop(document_id)
        except KeyError:
            raise DocumentNotFoundError(f"Document '{document_id}' not found") from None

    def get(self, document_id: str) -> Document:
        """Return a document by id.

        Raises:
            DocumentNotFoundError: If no document has this id.
        """
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(f"Document '{document_id}' not found") from None

    def all(self) -> tuple[Document, ...]:
        """Snapshot of the collection in insertion order."""
        return tuple(self._documents.values())

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
