from __future__ import annotations

from docgen.models.document import DocumentSection, DocumentStructure, printable
from docgen.services.export.base import RendererBase

RULE_WIDTH = 60


def _section(out: list[str], section: DocumentSection) -> None:
    out.append(f"\n{section.heading.upper()}\n")
    out.append("-" * len(section.heading) + "\n\n")

    if section.summary:
        out.append(f"{section.summary}\n\n")
    if section.content:
        out.append(f"{section.content}\n\n")

    # Tables and callouts have no plain-text layout
    for item in section.items or []:
        if item.kind == "text":
            out.append(f"• {item.text}\n")
            continue
        out.append(f"\n  {item.title}\n" if item.title else "\n")
        if item.description:
            out.append(f"  {item.description}\n")
        if item.content:
            out.append(f"  {item.content}\n")
        for detail in item.details or []:
            out.append(f"    - {detail}\n")
        out.append("\n")

    for sub in section.subsections or []:
        out.append(f"\n  {sub.title.upper()}\n")
        if sub.content:
            out.append(f"  {sub.content}\n\n")
        if sub.items is not None:
            for item in sub.items:
                label = item.label()
                if label:
                    out.append(f"    • {label}\n")
            out.append("\n")


class PlainTextRenderer(RendererBase):
    @property
    def format_name(self) -> str:
        return "txt"

    @property
    def content_type(self) -> str:
        return "text/plain"

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("text",)

    def render(self, doc: DocumentStructure) -> str:
        out = [f"{doc.title.upper()}\n", "=" * len(doc.title) + "\n\n"]

        if doc.metadata is not None:
            out.extend(f"{key.upper()}: {printable(value)}\n" for key, value in doc.metadata.items())
            out.append("\n" + "-" * RULE_WIDTH + "\n\n")

        if doc.summary:
            out.append(f"EXECUTIVE SUMMARY\n\n{doc.summary}\n\n")
            out.append("-" * RULE_WIDTH + "\n\n")

        for section in doc.sections:
            _section(out, section)

        return "".join(out)
