from __future__ import annotations

import csv
import io

from docgen.models.document import DocumentStructure
from docgen.services.export.base import RendererBase

HEADER = ["Section", "Heading", "Content", "Type", "Priority", "Status", "Tags"]


def _tags(tags: list[str] | None) -> str:
    return "; ".join(tags) if tags else ""


class CSVRenderer(RendererBase):
    @property
    def format_name(self) -> str:
        return "csv"

    @property
    def content_type(self) -> str:
        return "text/csv"

    def render(self, doc: DocumentStructure) -> str:
        output = io.StringIO()
        # Every cell quoted, embedded quotes doubled
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(HEADER)

        for section in doc.sections:
            heading = section.heading
            writer.writerow([
                heading, heading, section.summary or section.content or "",
                "section", "", "", "",
            ])

            if section.table:
                table_heading = " | ".join(section.table.headers)
                for row in section.table.rows:
                    writer.writerow([heading, table_heading, " | ".join(row), "table_row", "", "", ""])

            for item in section.items or []:
                if item.kind == "text":
                    writer.writerow([heading, "", item.text, "item", "", "", ""])
                    continue
                writer.writerow([
                    heading,
                    item.title or "",
                    item.description or item.content or "",
                    "item",
                    item.priority or "",
                    item.status or "",
                    _tags(item.tags),
                ])
                for detail in item.details or []:
                    writer.writerow([heading, item.title or "", detail, "detail", "", "", ""])

            for sub in section.subsections or []:
                writer.writerow([heading, sub.title, sub.content or "", "subsection", "", "", ""])
                if sub.table:
                    table_heading = f"{sub.title} | {' | '.join(sub.table.headers)}"
                    for row in sub.table.rows:
                        writer.writerow([heading, table_heading, " | ".join(row), "table_row", "", "", ""])
                for item in sub.items or []:
                    if item.kind == "text":
                        writer.writerow([heading, sub.title, item.text, "subitem", "", "", ""])
                    else:
                        writer.writerow([
                            heading, sub.title, item.label(), "subitem",
                            item.priority or "", item.status or "", _tags(item.tags),
                        ])

        for appendix in doc.appendix or []:
            writer.writerow(["Appendix", appendix.title, appendix.content, "appendix", "", "", ""])

        return output.getvalue()
