from docgen.models.document import (
    Callout,
    CalloutType,
    DocumentAppendix,
    DocumentItem,
    DocumentSection,
    DocumentStructure,
    DocumentSubsection,
    DocumentTable,
    StructuredItem,
    TextItem,
)
from docgen.models.render import BundleRequest, DocumentSource, ParseRequest, RenderedFile, RenderRequest

__all__ = [
    "BundleRequest",
    "Callout",
    "CalloutType",
    "DocumentAppendix",
    "DocumentItem",
    "DocumentSection",
    "DocumentSource",
    "DocumentStructure",
    "DocumentSubsection",
    "DocumentTable",
    "ParseRequest",
    "RenderRequest",
    "RenderedFile",
    "StructuredItem",
    "TextItem",
]
