"""Document model: the read-only record the search core operates on.

Documents arrive from the host application already digitized: the OCR text
has been extracted and the upload metadata recorded.  JSON payloads use the
camelCase field names of the upload pipeline (``documentId``, ``ocrText``,
...); Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from historify.models.types import UTCDateTime


class DocumentMetadata(BaseModel):
    """File-level metadata recorded at upload time."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    file_type: str | None = Field(default=None, description="MIME type or extension, e.g. 'application/pdf'")
    file_size: int | None = Field(default=None, ge=0, description="File size in bytes")
    source: str | None = Field(default=None, description="Archive, library or collection the file came from")


class Document(BaseModel):
    """A digitized historical document.

    The search core never mutates a document, so the model is frozen.
    ``combined_text`` is the text every strategy, the index and the scorer
    work on: the OCR body followed by the file name.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    document_id: str = Field(min_length=1, description="Unique document identifier")
    file_name: str = Field(default="", description="Display name of the uploaded file")
    ocr_text: str = Field(default="", description="Text extracted from the document by OCR")
    upload_date: UTCDateTime | None = Field(default=None, description="ISO-8601 upload timestamp")
    metadata: DocumentMetadata | None = Field(default=None, description="File metadata")
    tags: list[str] = Field(default_factory=list, description="Free-form labels")

    @field_validator("file_name", "ocr_text", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("upload_date", mode="before")
    @classmethod
    def _blank_date_as_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def _none_as_no_tags(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def combined_text(self) -> str:
        """OCR text and file name joined by a single space."""
        return f"{self.ocr_text} {self.file_name}"

    @property
    def file_size(self) -> int:
        """File size in bytes, 0 when unknown."""
        if self.metadata is None:
            return 0
        return self.metadata.file_size or 0
