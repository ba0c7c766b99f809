from __future__ import annotations

import enum
import json
import logging
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, Field, field_validator, model_serializer

logger = logging.getLogger(__name__)


def printable(value: Any) -> str:
    """Render a scalar or JSON value the way it reads in generated documents."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def _coerce_text(value: Any) -> Any:
    # LLMs emit numbers, nulls and nested JSON in table cells, priorities, details...
    if value is None:
        return ""
    if isinstance(value, (bool, int, float, list, dict)):
        return printable(value)
    return value


def _compact(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [entry for entry in value if entry is not None]
    return value


Text = Annotated[str, BeforeValidator(_coerce_text)]


class CalloutType(str, enum.Enum):
    INFO = "info"
    WARNING = "warning"
    TIP = "tip"
    NOTE = "note"


class Callout(BaseModel):
    type: CalloutType = CalloutType.INFO
    content: Text = ""

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value):
        if value is None:
            return CalloutType.INFO
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in {t.value for t in CalloutType}:
                logger.debug("Unknown callout type %r, rendering as info", value)
                return CalloutType.INFO
        return value


class DocumentTable(BaseModel):
    headers: Annotated[list[Text], BeforeValidator(_compact)] = Field(default_factory=list)
    rows: Annotated[list[list[Text]], BeforeValidator(_compact)] = Field(default_factory=list)  # row length is not checked against headers


class TextItem(BaseModel):
    """A bare string entry in an item list."""

    kind: Literal["text"] = Field(default="text", exclude=True)
    text: Text

    def label(self) -> str:
        return self.text

    @model_serializer
    def _as_string(self) -> str:
        return self.text


class StructuredItem(BaseModel):
    kind: Literal["structured"] = Field(default="structured", exclude=True)
    title: Text | None = None
    description: Text | None = None
    content: Text | None = None
    details: list[Text] | None = None
    value: Text | None = None
    priority: Text | None = None
    status: Text | None = None
    tags: list[Text] | None = None

    def label(self) -> str:
        return self.title or self.description or self.content or ""


DocumentItem = Annotated[Union[TextItem, StructuredItem], Field(discriminator="kind")]


def _tag_items(value):
    """Wrap raw list entries so they validate against the DocumentItem union."""
    if not isinstance(value, list):
        return value
    tagged = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, dict):
            tagged.append({**item, "kind": "structured"})
        elif isinstance(item, BaseModel):
            tagged.append(item)
        else:
            tagged.append({"kind": "text", "text": printable(item)})
    return tagged


ItemList = Annotated[list[DocumentItem], BeforeValidator(_tag_items)]


class DocumentSubsection(BaseModel):
    title: Text
    content: Text | None = None
    items: ItemList | None = None
    table: DocumentTable | None = None


class DocumentSection(BaseModel):
    heading: Text
    summary: Text | None = None
    content: Text | None = None
    callout: Callout | None = None
    table: DocumentTable | None = None
    items: ItemList | None = None
    subsections: Annotated[list[DocumentSubsection], BeforeValidator(_compact)] | None = None


class DocumentAppendix(BaseModel):
    title: Text = ""
    content: Text = ""


class DocumentStructure(BaseModel):
    """A generated document as described by the LLM's JSON output."""

    title: Text
    metadata: dict[str, Any] | None = None
    summary: Text | None = None
    sections: Annotated[list[DocumentSection], BeforeValidator(_compact)] = Field(default_factory=list)
    appendix: list[DocumentAppendix] | None = None
    references: list[Text] | None = None
