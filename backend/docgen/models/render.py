from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from docgen.config import settings
from docgen.models.document import DocumentStructure


class ParseRequest(BaseModel):
    raw: str
    fallback_title: str | None = None  # when set, unparseable text becomes a fallback document
    metadata: dict[str, Any] | None = None


class DocumentSource(BaseModel):
    document: DocumentStructure | None = None
    raw: str | None = None
    title: str | None = None  # fallback title for unparseable raw text
    metadata: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _one_source(self):
        if (self.document is None) == (self.raw is None):
            raise ValueError("Provide exactly one of 'document' or 'raw'")
        return self


class RenderRequest(DocumentSource):
    format: str = Field(default_factory=lambda: settings.default_format)


class BundleRequest(DocumentSource):
    name: str | None = None
    formats: list[str] = Field(default_factory=list)


class RenderedFile(BaseModel):
    file_name: str
    file_type: str
    content_type: str
    content: str
