"""Unit tests for tix.document.serializer — structure dumps."""
from __future__ import annotations

import json

import yaml

from tix.document.parser import parse
from tix.document.serializer import DocumentSerializer


class TestToDict:
    def test_shape(self) -> None:
        data = DocumentSerializer().to_dict(parse("intro\nWork:\nalice - fix\n"))
        assert data["kind"] == "Document"
        assert data["line_count"] == 4
        sections = data["sections"]
        assert [s["title"] for s in sections] == ["", "Work:"]
        assert sections[0]["header"] is None
        item = sections[1]["lines"][0]
        assert item == {
            "kind": "CONTEXT_ITEM",
            "number": 2,
            "raw_text": "alice - fix",
            "indent": 0,
            "ending": "\n",
            "context": "alice",
            "item_text": "fix",
        }

    def test_plain_lines_have_no_context_keys(self) -> None:
        data = DocumentSerializer().to_dict(parse("note"))
        line = data["sections"][0]["lines"][0]
        assert "context" not in line


class TestReadBack:
    def test_json(self, sample_text: str) -> None:
        serializer = DocumentSerializer()
        document = parse(sample_text)
        text = serializer.to_json(document)
        assert json.loads(text)["line_count"] == document.line_count
        assert serializer.from_json(text) == document

    def test_yaml(self, sample_text: str) -> None:
        serializer = DocumentSerializer()
        document = parse(sample_text)
        text = serializer.to_yaml(document)
        assert yaml.safe_load(text)["kind"] == "Document"
        assert serializer.from_yaml(text) == document
