"""In-memory host stores: the document collection and the query history."""

from historify.store.documents import DocumentStore, load_documents
from historify.store.history import QueryHistory

__all__ = ["DocumentStore", "QueryHistory", "load_documents"]
