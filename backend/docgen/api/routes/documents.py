from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from docgen.config import settings
from docgen.models.document import DocumentStructure
from docgen.models.render import BundleRequest, DocumentSource, ParseRequest, RenderRequest
from docgen.services.export.bundle import render_bundle
from docgen.services.export.registry import get_renderer, list_formats
from docgen.services.structured.parser import parse_or_fallback, parse_structured_response

router = APIRouter(prefix="/documents", tags=["documents"])
logger = logging.getLogger(__name__)


def _resolve_document(body: DocumentSource) -> DocumentStructure:
    if body.document is not None:
        return body.document
    doc, _ = parse_or_fallback(body.raw, body.title or settings.fallback_title, body.metadata)
    return doc


def _dump(doc: DocumentStructure | None) -> dict | None:
    return doc.model_dump(mode="json", exclude_none=True) if doc is not None else None


@router.get("/formats")
async def formats() -> dict:
    return {"formats": list_formats(), "default": settings.default_format}


@router.post("/parse")
async def parse_document(body: ParseRequest) -> dict:
    if body.fallback_title is None:
        doc = parse_structured_response(body.raw)
        return {"structured": doc is not None, "document": _dump(doc)}

    doc, structured = parse_or_fallback(body.raw, body.fallback_title, body.metadata)
    return {"structured": structured, "document": _dump(doc)}


@router.post("/render")
async def render_document(body: RenderRequest) -> Response:
    doc = _resolve_document(body)
    renderer = get_renderer(body.format)
    logger.debug("Rendering %r as %s", doc.title, renderer.format_name)
    return Response(
        content=renderer.render(doc).encode(),
        media_type=renderer.content_type,
        headers={"X-Document-Format": renderer.format_name},
    )


@router.post("/bundle")
async def render_document_bundle(body: BundleRequest) -> dict:
    doc = _resolve_document(body)
    files = render_bundle(doc, body.formats, body.name)
    return {"files": [f.model_dump() for f in files]}
