import json
import logging

from docgen.models.document import DocumentStructure
from docgen.services.export.json_renderer import JSONRenderer
from docgen.services.export.registry import format_document
from docgen.services.structured.parser import (
    extract_json_source,
    fallback_document,
    parse_or_fallback,
    parse_structured_response,
)


class TestExtractJsonSource:
    def test_bare_text_returned_verbatim(self):
        assert extract_json_source('{"title": "T"}') == '{"title": "T"}'

    def test_fenced_json_block(self):
        raw = 'Here you go:\n```json\n{"title": "T"}\n```\nDone.'
        assert extract_json_source(raw) == '{"title": "T"}'

    def test_fence_without_language_tag(self):
        raw = '```\n{"title": "T", "sections": []}\n```'
        assert extract_json_source(raw) == '{"title": "T", "sections": []}'

    def test_nested_braces_kept(self):
        raw = '```json\n{"title": "T", "metadata": {"a": "b"}}\n```'
        assert json.loads(extract_json_source(raw))["metadata"] == {"a": "b"}


class TestParseStructuredResponse:
    def test_bare_json(self, sample_payload, sample_document):
        assert parse_structured_response(json.dumps(sample_payload)) == sample_document

    def test_prose_around_fence_is_ignored(self, sample_payload, sample_document):
        body = json.dumps(sample_payload)
        fenced = parse_structured_response(f"Here is the doc:\n```json\n{body}\n```\nThanks")
        assert fenced == parse_structured_response(body) == sample_document

    def test_not_json_returns_none(self):
        assert parse_structured_response("not json at all") is None

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="docgen.services.structured.parser"):
            parse_structured_response("{broken")
        assert "Failed to parse structured response" in caplog.text

    def test_json_that_is_not_a_document(self):
        assert parse_structured_response("[1, 2, 3]") is None
        assert parse_structured_response('"just a string"') is None
        assert parse_structured_response('{"sections": []}') is None

    def test_loose_llm_shapes_are_accepted(self):
        raw = json.dumps(
            {
                "title": "Loose",
                "sections": [
                    {
                        "heading": "Data",
                        "table": {"headers": ["Key", "Value"], "rows": [["1", None]]},
                        "items": ["a", None, {"title": "Risk", "details": [{"k": "v"}]}],
                    }
                ],
            }
        )
        doc = parse_structured_response(raw)
        assert doc is not None
        markdown = format_document(doc, "markdown")
        assert "| 1 |  |\n" in markdown
        assert "- a\n### Risk\n\n" in markdown
        assert '- {"k": "v"}\n' in markdown
        assert format_document(doc, "csv").count("\n") == 6

    def test_null_sections_accepted(self):
        doc = parse_structured_response('{"title": "T", "sections": null}')
        assert doc is not None
        assert format_document(doc, "txt").startswith("T\n")

    def test_missing_sections_tolerated(self):
        doc = parse_structured_response('{"title": "Only a title"}')
        assert doc is not None
        assert doc.sections == []

    def test_json_render_round_trip(self, sample_document):
        rendered = JSONRenderer().render(sample_document)
        assert parse_structured_response(rendered) == sample_document

    def test_round_trip_minimal(self, minimal_document):
        rendered = JSONRenderer().render(minimal_document)
        assert parse_structured_response(rendered) == minimal_document


class TestFallback:
    def test_fallback_document_shape(self):
        raw = "x" * 500
        doc = fallback_document(raw, "Custom Document", {"project": "Atlas"})
        assert doc.title == "Custom Document"
        assert doc.metadata == {"project": "Atlas"}
        assert doc.summary == "x" * 200
        assert len(doc.sections) == 1
        assert doc.sections[0].heading == "Content"
        assert doc.sections[0].content == raw

    def test_parse_or_fallback_structured(self, sample_payload):
        doc, structured = parse_or_fallback(json.dumps(sample_payload), "Unused")
        assert structured is True
        assert doc.title == "Sprint 0 Summary"

    def test_parse_or_fallback_unstructured(self):
        doc, structured = parse_or_fallback("Plain prose answer.", "Notes")
        assert structured is False
        assert isinstance(doc, DocumentStructure)
        assert doc.title == "Notes"
        assert doc.summary == "Plain prose answer."
