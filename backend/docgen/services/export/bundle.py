from __future__ import annotations

import logging

from docgen.config import settings
from docgen.models.document import DocumentStructure
from docgen.models.render import RenderedFile
from docgen.services.export.registry import get_renderer

logger = logging.getLogger(__name__)


def render_bundle(
    doc: DocumentStructure,
    formats: list[str],
    name: str | None = None,
) -> list[RenderedFile]:
    """Render one document into several files, one per distinct format.

    Formats resolving to the same renderer (``md`` and ``markdown``, or an
    unknown name and ``markdown``) produce a single file.
    """
    base_name = name or doc.title
    files: list[RenderedFile] = []
    seen: set[str] = set()

    for format_name in formats or [settings.default_format]:
        renderer = get_renderer(format_name)
        if renderer.format_name in seen:
            continue
        seen.add(renderer.format_name)
        files.append(
            RenderedFile(
                file_name=f"{base_name}.{renderer.file_extension}",
                file_type=renderer.format_name,
                content_type=renderer.content_type,
                content=renderer.render(doc),
            )
        )

    logger.info("Rendered %r to %d file(s): %s", base_name, len(files), ", ".join(sorted(seen)))
    return files
