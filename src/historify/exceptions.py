"""Host-layer exceptions for the document store and library."""


class HistorifyError(Exception):
    """Base exception for Historify errors."""


class DocumentStoreError(HistorifyError):
    """Raised when the document collection cannot be updated."""


class DocumentNotFoundError(DocumentStoreError):
    """Raised when a requested document does not exist."""


class DuplicateDocumentError(DocumentStoreError):
    """Raised when a collection contains the same documentId more than once."""


class DocumentLoadError(DocumentStoreError):
    """Raised when a document seed file cannot be read or parsed."""
