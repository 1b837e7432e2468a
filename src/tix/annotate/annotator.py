"""Annotation engine: highlight spans for a rendering layer.

``annotate`` walks a parsed ``Document`` and returns the spans a
renderer needs: project header lines, lines inside the Done section,
and the exact column range of every context label.  Annotations are
recomputed from scratch on every call.

Usage
-----
::

    from tix.annotate import annotate
    from tix.colors import ContextColorMap
    from tix.document import parse

    annotations = annotate(parse(text), ContextColorMap())
    for context, ranges in annotations.contexts.items():
        index = annotations.context_colors[context]
"""
from __future__ import annotations

from dataclasses import dataclass, field

from tix.colors.palette import ContextColorMap
from tix.document.nodes import Document, Line, LineKind


@dataclass(frozen=True, slots=True)
class Range:
    """A half-open column range ``[start, end)`` on one line.

    Parameters
    ----------
    line:
        0-based line index.
    start:
        0-based column of the first character.
    end:
        0-based column past the last character.
    """

    line: int
    start: int
    end: int

    @classmethod
    def whole_line(cls, line: Line) -> "Range":
        return cls(line=line.number, start=0, end=len(line.raw_text))

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Annotations:
    """All spans produced for one document.

    Parameters
    ----------
    project_headers:
        Whole-line ranges of every project header.
    done_items:
        Whole-line ranges of every non-blank line in a Done section.
    contexts:
        Context name to the ranges of its labels, in first-seen order.
    context_colors:
        Context name to palette index; empty when no color map was used.
    """

    project_headers: tuple[Range, ...] = ()
    done_items: tuple[Range, ...] = ()
    contexts: dict[str, tuple[Range, ...]] = field(default_factory=dict)
    context_colors: dict[str, int] = field(default_factory=dict)

    def context_at(self, line: int) -> str | None:
        for context, ranges in self.contexts.items():
            if any(r.line == line for r in ranges):
                return context
        return None


def annotate(document: Document, color_map: ContextColorMap | None = None) -> Annotations:
    """Compute highlight spans for ``document``.

    Parameters
    ----------
    document:
        The parsed document.
    color_map:
        Optional color map; when given, every context found is assigned
        a palette index in document order.

    Returns
    -------
    Annotations
        Spans in the document's own line/column coordinates.
    """
    headers: list[Range] = []
    done_items: list[Range] = []
    contexts: dict[str, list[Range]] = {}

    for section in document.sections:
        if section.header is not None:
            headers.append(Range.whole_line(section.header))
        for line in section.lines:
            if section.is_done_section and not line.is_blank:
                done_items.append(Range.whole_line(line))
            if line.kind is LineKind.CONTEXT_ITEM and line.context is not None:
                label = Range(
                    line=line.number,
                    start=line.indent,
                    end=line.indent + len(line.context),
                )
                contexts.setdefault(line.context, []).append(label)

    colors: dict[str, int] = {}
    if color_map is not None:
        colors = {context: color_map.color_for(context) for context in contexts}

    return Annotations(
        project_headers=tuple(headers),
        done_items=tuple(done_items),
        contexts={context: tuple(ranges) for context, ranges in contexts.items()},
        context_colors=colors,
    )
