from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from docgen.config import settings
from docgen.models.document import DocumentSection, DocumentStructure

logger = logging.getLogger(__name__)

# Fenced block with optional json tag; greedy so nested braces stay inside the capture
_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{.*\})\s*```", re.DOTALL)


def extract_json_source(raw: str) -> str:
    """Return the JSON object inside a fenced code block, or the raw text."""
    match = _FENCED_JSON.search(raw)
    return match.group(1) if match else raw


def parse_structured_response(raw: str) -> DocumentStructure | None:
    """Parse LLM output into a DocumentStructure.

    Returns None when the text is not valid JSON or does not describe a
    document; callers fall back to treating the text as unstructured.
    """
    source = extract_json_source(raw)
    try:
        data = json.loads(source)
    except json.JSONDecodeError:
        logger.warning("Failed to parse structured response", exc_info=True)
        return None

    try:
        return DocumentStructure.model_validate(data)
    except ValidationError as e:
        logger.warning("Structured response is not a document: %d errors", e.error_count(), exc_info=True)
        return None


def fallback_document(
    raw: str,
    title: str,
    metadata: dict[str, Any] | None = None,
) -> DocumentStructure:
    """Wrap unstructured LLM text as a single-section document."""
    return DocumentStructure(
        title=title,
        metadata=metadata,
        summary=raw[: settings.fallback_summary_chars],
        sections=[DocumentSection(heading="Content", content=raw)],
    )


def parse_or_fallback(
    raw: str,
    title: str,
    metadata: dict[str, Any] | None = None,
) -> tuple[DocumentStructure, bool]:
    """Parse structured output, falling back to the unstructured wrapper.

    The second element is True when the text parsed as a document.
    """
    doc = parse_structured_response(raw)
    if doc is not None:
        return doc, True
    logger.info("Using unstructured fallback for document %r", title)
    return fallback_document(raw, title, metadata), False
