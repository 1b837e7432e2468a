"""Structure dumps of a parsed ``Document``.

Converts a ``Document`` to a plain dict that maps naturally onto JSON
and YAML, for inspection with ``tix parse``.  Lines carry a ``"kind"``
discriminator so the dump can be read back with ``from_dict``.

Usage
-----
::

    from tix.document.serializer import DocumentSerializer

    serializer = DocumentSerializer()
    json_text = serializer.to_json(document)
    document2 = serializer.from_json(json_text)
    assert document == document2
"""
from __future__ import annotations

import json

import yaml

from tix.document.nodes import Document, Line, LineKind, Section


class DocumentSerializer:
    """Converts between ``Document`` objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (Document → dict)
    # ------------------------------------------------------------------

    def to_dict(self, document: Document) -> dict[str, object]:
        return {
            "kind": "Document",
            "line_count": document.line_count,
            "newline": document.newline,
            "sections": [self._section_to_dict(s) for s in document.sections],
        }

    def _section_to_dict(self, section: Section) -> dict[str, object]:
        return {
            "title": section.title,
            "is_done_section": section.is_done_section,
            "header": self._line_to_dict(section.header) if section.header else None,
            "lines": [self._line_to_dict(line) for line in section.lines],
        }

    def _line_to_dict(self, line: Line) -> dict[str, object]:
        data: dict[str, object] = {
            "kind": line.kind.name,
            "number": line.number,
            "raw_text": line.raw_text,
            "indent": line.indent,
            "ending": line.ending,
        }
        if line.kind is LineKind.CONTEXT_ITEM:
            data["context"] = line.context
            data["item_text"] = line.item_text
        return data

    # ------------------------------------------------------------------
    # Deserialization (dict → Document)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Document:
        sections = tuple(
            self._section_from_dict(s)  # type: ignore[arg-type]
            for s in data.get("sections", [])  # type: ignore[union-attr]
        )
        return Document(
            sections=sections,
            line_count=int(data["line_count"]),  # type: ignore[arg-type]
            newline=str(data.get("newline", "\n")),
        )

    def _section_from_dict(self, data: dict[str, object]) -> Section:
        header_data = data.get("header")
        header = self._line_from_dict(header_data) if header_data else None  # type: ignore[arg-type]
        lines = tuple(self._line_from_dict(d) for d in data.get("lines", []))  # type: ignore[union-attr]
        return Section(header=header, lines=lines)

    def _line_from_dict(self, data: dict[str, object]) -> Line:
        return Line(
            number=int(data["number"]),  # type: ignore[arg-type]
            kind=LineKind[str(data["kind"])],
            raw_text=str(data["raw_text"]),
            indent=int(data.get("indent", 0)),  # type: ignore[arg-type]
            context=data.get("context"),  # type: ignore[arg-type]
            item_text=data.get("item_text"),  # type: ignore[arg-type]
            ending=str(data.get("ending", "")),
        )

    # ------------------------------------------------------------------
    # JSON / YAML
    # ------------------------------------------------------------------

    def to_json(self, document: Document, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(document), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Document:
        return self.from_dict(json.loads(text))

    def to_yaml(self, document: Document) -> str:
        return yaml.dump(self.to_dict(document), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> Document:
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
