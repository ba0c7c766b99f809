from __future__ import annotations

import logging

from docgen.models.document import DocumentStructure
from docgen.services.export.base import RendererBase
from docgen.services.export.csv_renderer import CSVRenderer
from docgen.services.export.docx_renderer import DocxRenderer, PdfRenderer
from docgen.services.export.json_renderer import JSONRenderer
from docgen.services.export.markdown_renderer import MarkdownRenderer
from docgen.services.export.text_renderer import PlainTextRenderer

logger = logging.getLogger(__name__)

DEFAULT_RENDERER: type[RendererBase] = MarkdownRenderer

# Normalized format key (names and aliases) -> renderer class
_RENDERERS: dict[str, type[RendererBase]] = {}


def normalize_format(format_name: str) -> str:
    return format_name.strip().lower()


def register_renderer(cls: type[RendererBase]) -> type[RendererBase]:
    instance = cls()
    for key in (instance.format_name, *instance.aliases):
        _RENDERERS[normalize_format(key)] = cls
    return cls


def get_renderer(format_name: str) -> RendererBase:
    """Look up a renderer; unknown formats get the Markdown renderer."""
    cls = _RENDERERS.get(normalize_format(format_name))
    if cls is None:
        logger.debug("Unknown format %r, falling back to %s", format_name, DEFAULT_RENDERER.__name__)
        cls = DEFAULT_RENDERER
    return cls()


def list_formats() -> list[str]:
    """Canonical format names, in registration order."""
    return list(dict.fromkeys(cls().format_name for cls in _RENDERERS.values()))


def format_document(doc: DocumentStructure, format_name: str) -> str:
    return get_renderer(format_name).render(doc)


def output_filename(name: str, format_name: str) -> str:
    return f"{name}.{get_renderer(format_name).file_extension}"


# Register default renderers
register_renderer(MarkdownRenderer)
register_renderer(PlainTextRenderer)
register_renderer(DocxRenderer)
register_renderer(PdfRenderer)
register_renderer(JSONRenderer)
register_renderer(CSVRenderer)
