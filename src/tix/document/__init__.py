"""Document model, line classifier, and parser.

Exports the node types, ``classify_line``, and the ``parse``
convenience function.
"""
from __future__ import annotations

from tix.document.classifier import classify_line, is_project_header, split_context
from tix.document.nodes import DONE_TITLE, Document, Line, LineKind, Section
from tix.document.parser import (
    DocumentParser,
    detect_newline,
    join_lines,
    parse,
    split_line_endings,
    split_lines,
)

__all__ = [
    "DONE_TITLE",
    "Document",
    "DocumentParser",
    "Line",
    "LineKind",
    "Section",
    "classify_line",
    "detect_newline",
    "is_project_header",
    "join_lines",
    "parse",
    "split_context",
    "split_line_endings",
    "split_lines",
]
