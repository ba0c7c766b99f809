from __future__ import annotations

from docgen.models.document import (
    CalloutType,
    DocumentSection,
    DocumentStructure,
    DocumentSubsection,
    DocumentTable,
    StructuredItem,
    printable,
)
from docgen.services.export.base import RendererBase

_CALLOUT_EMOJI = {
    CalloutType.INFO: "ℹ️",
    CalloutType.WARNING: "⚠️",
    CalloutType.TIP: "💡",
    CalloutType.NOTE: "📝",
}


def _pipe_table(out: list[str], table: DocumentTable) -> None:
    out.append(f"| {' | '.join(table.headers)} |\n")
    out.append(f"| {' | '.join('---' for _ in table.headers)} |\n")
    for row in table.rows:
        out.append(f"| {' | '.join(row)} |\n")
    out.append("\n")


def _structured_item(out: list[str], item: StructuredItem) -> None:
    if item.title:
        heading = f"### {item.title}"
        if item.priority:
            heading += f" `[{item.priority}]`"
        if item.status:
            heading += f" `{item.status}`"
        out.append(heading + "\n\n")
    if item.description:
        out.append(f"{item.description}\n\n")
    if item.content:
        out.append(f"{item.content}\n\n")
    if item.tags:
        out.append(f"**Tags:** {', '.join(f'`{t}`' for t in item.tags)}\n\n")
    if item.details is not None:
        out.extend(f"- {detail}\n" for detail in item.details)
        out.append("\n")


def _subsection(out: list[str], sub: DocumentSubsection) -> None:
    out.append(f"### {sub.title}\n\n")
    if sub.content:
        out.append(f"{sub.content}\n\n")
    if sub.table:
        _pipe_table(out, sub.table)
    if sub.items is not None:
        for item in sub.items:
            label = item.label()
            if label:
                out.append(f"- {label}\n")
        out.append("\n")


def _section(out: list[str], section: DocumentSection) -> None:
    out.append(f"## {section.heading}\n\n")
    if section.summary:
        out.append(f"{section.summary}\n\n")
    if section.callout:
        callout = section.callout
        emoji = _CALLOUT_EMOJI[callout.type]
        out.append(f"> {emoji} **{callout.type.value.upper()}**: {callout.content}\n\n")
    if section.content:
        out.append(f"{section.content}\n\n")
    if section.table:
        _pipe_table(out, section.table)
    for item in section.items or []:
        if item.kind == "text":
            out.append(f"- {item.text}\n")
        else:
            _structured_item(out, item)
    for sub in section.subsections or []:
        _subsection(out, sub)


class MarkdownRenderer(RendererBase):
    @property
    def format_name(self) -> str:
        return "markdown"

    @property
    def content_type(self) -> str:
        return "text/markdown"

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("md",)

    @property
    def file_extension(self) -> str:
        return "md"

    def render(self, doc: DocumentStructure) -> str:
        out = [f"# {doc.title}\n\n"]

        # Front matter
        if doc.metadata is not None:
            out.append("---\n")
            out.extend(f"{key}: {printable(value)}\n" for key, value in doc.metadata.items())
            out.append("---\n\n")

        if doc.summary:
            out.append(f"## Executive Summary\n\n{doc.summary}\n\n")

        for section in doc.sections:
            _section(out, section)

        if doc.appendix:
            out.append("\n---\n\n## Appendix\n\n")
            for idx, appendix in enumerate(doc.appendix):
                out.append(f"### Appendix {chr(ord('A') + idx)}: {appendix.title}\n\n")
                out.append(f"{appendix.content}\n\n")

        if doc.references:
            out.append("\n## References\n\n")
            out.extend(f"{n}. {ref}\n" for n, ref in enumerate(doc.references, start=1))
            out.append("\n")

        return "".join(out)
