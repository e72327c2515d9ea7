"""API dependencies: Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from fastapi import Request

from historify.library import DocumentLibrary


def get_library(request: Request) -> DocumentLibrary:
    """Get the document library owned by the running application.

    Raises:
        RuntimeError: If the application was created without a library.
    """
    library = getattr(request.app.state, "library", None)
    if library is None:
        raise RuntimeError("Document library not initialized. Was the app built with create_app()?")
    return library
