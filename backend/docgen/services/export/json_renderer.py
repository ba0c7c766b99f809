from __future__ import annotations

import json

from docgen.models.document import DocumentStructure
from docgen.services.export.base import RendererBase


class JSONRenderer(RendererBase):
    @property
    def format_name(self) -> str:
        return "json"

    @property
    def content_type(self) -> str:
        return "application/json"

    def render(self, doc: DocumentStructure) -> str:
        return json.dumps(doc.model_dump(mode="json", exclude_none=True), indent=2, ensure_ascii=False)
