from __future__ import annotations

from docgen.models.document import DocumentSection, DocumentStructure, printable
from docgen.services.export.base import RendererBase

PAGE_WIDTH = 80
TITLE_RULE = "═" * PAGE_WIDTH
SECTION_RULE = "─" * PAGE_WIDTH

_BODY = " " * 3
_NESTED = " " * 7


def _section(out: list[str], number: int, section: DocumentSection) -> None:
    out.append(f"{number}. {section.heading}\n\n")

    if section.summary:
        out.append(f"{_BODY}{section.summary}\n\n")
    if section.content:
        out.append(f"{_BODY}{section.content}\n\n")

    for idx, item in enumerate(section.items or [], start=1):
        if item.kind == "text":
            out.append(f"{_BODY}{number}.{idx} {item.text}\n")
            continue
        if item.title:
            out.append(f"{_BODY}{number}.{idx} {item.title}\n")
        if item.description:
            out.append(f"{_NESTED}{item.description}\n")
        if item.content:
            out.append(f"{_NESTED}{item.content}\n")
        for detail in item.details or []:
            out.append(f"{_NESTED}• {detail}\n")
        out.append("\n")

    # Subsections share the item numbering scheme
    for idx, sub in enumerate(section.subsections or [], start=1):
        out.append(f"{_BODY}{number}.{idx} {sub.title}\n")
        if sub.content:
            out.append(f"{_NESTED}{sub.content}\n")
        for item in sub.items or []:
            label = item.label()
            if label:
                out.append(f"{_NESTED}• {label}\n")
        out.append("\n")

    out.append(SECTION_RULE + "\n\n")


class DocxRenderer(RendererBase):
    """Print-oriented monospace layout with numbered sections.

    Produces text, not an Office Open XML package.
    """

    @property
    def format_name(self) -> str:
        return "docx"

    @property
    def content_type(self) -> str:
        return "text/plain"

    def render(self, doc: DocumentStructure) -> str:
        out = [f"{doc.title}\n", TITLE_RULE + "\n\n"]

        if doc.metadata is not None:
            out.extend(f"{key}: {printable(value)}\n" for key, value in doc.metadata.items())
            out.append("\n" + SECTION_RULE + "\n\n")

        if doc.summary:
            out.append(f"EXECUTIVE SUMMARY\n\n{doc.summary}\n\n")
            out.append(SECTION_RULE + "\n\n")

        for number, section in enumerate(doc.sections, start=1):
            _section(out, number, section)

        return "".join(out)


class PdfRenderer(DocxRenderer):
    """Same layout as DocxRenderer; only the format name differs."""

    @property
    def format_name(self) -> str:
        return "pdf"
