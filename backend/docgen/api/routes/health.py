from __future__ import annotations

import logging

from fastapi import APIRouter

from docgen.config import settings
from docgen.services.export.registry import list_formats

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.get("/health/detail")
async def health_detail() -> dict:
    """Detailed health check: renderer registry and active settings."""
    return {
        "backend": {"status": "ok"},
        "renderers": _check_renderers(),
        "settings": {
            "default_format": settings.default_format,
            "fallback_title": settings.fallback_title,
        },
    }


def _check_renderers() -> dict:
    formats = list_formats()
    if not formats:
        logger.warning("No renderers registered")
        return {"status": "empty", "formats": []}
    return {"status": "ready", "formats": formats}
