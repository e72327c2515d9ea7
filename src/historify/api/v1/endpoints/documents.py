"""Document collection endpoints.

Every write rebuilds the search index before responding, so a search issued
after a successful write sees the change.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from historify.api.deps import get_library
from historify.exceptions import DocumentNotFoundError, DuplicateDocumentError
from historify.library import DocumentLibrary
from historify.models.document import Document

router = APIRouter()


class DocumentListResponse(BaseModel):
    """The current document collection."""

    total: int = Field(description="Number of documents")
    documents: list[Document] = Field(description="Documents in insertion order")


@router.get(
    "/documents",
    response_model=DocumentListResponse,
    summary="List Documents",
)
def list_documents(library: DocumentLibrary = Depends(get_library)) -> DocumentListResponse:
    documents = library.list_documents()
    return DocumentListResponse(total=len(documents), documents=list(documents))


@router.put(
    "/documents",
    response_model=DocumentListResponse,
    summary="Replace Document Collection",
    description="Replace the whole collection and rebuild the search index.",
    responses={409: {"description": "Two documents share a documentId"}},
)
def replace_documents(
    documents: list[Document],
    library: DocumentLibrary = Depends(get_library),
) -> DocumentListResponse:
    try:
        library.replace_documents(documents)
    except DuplicateDocumentError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    current = library.list_documents()
    return DocumentListResponse(total=len(current), documents=list(current))


@router.post(
    "/documents",
    response_model=Document,
    summary="Add or Replace a Document",
    responses={201: {"description": "Document created"}, 200: {"description": "Existing document replaced"}},
)
def add_document(
    document: Document,
    response: Response,
    library: DocumentLibrary = Depends(get_library),
) -> Document:
    created = library.add_document(document)
    response.status_code = 201 if created else 200
    return document


@router.get(
    "/documents/{document_id:path}",
    response_model=Document,
    summary="Get a Document",
    responses={404: {"description": "Document not found"}},
)
def get_document(document_id: str, library: DocumentLibrary = Depends(get_library)) -> Document:
    try:
        return library.get_document(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.delete(
    "/documents/{document_id:path}",
    status_code=204,
    summary="Delete a Document",
    responses={404: {"description": "Document not found"}},
)
def delete_document(document_id: str, library: DocumentLibrary = Depends(get_library)) -> Response:
    try:
        library.remove_document(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return Response(status_code=204)
