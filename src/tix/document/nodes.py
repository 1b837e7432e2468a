"""Document model for the tix todo format.

A ``Document`` is an ordered tuple of ``Section`` objects, each holding
the ``Line`` records that belong to it.  Every node is a frozen
dataclass: documents are rebuilt from text on every request and never
mutated in place.  Transforms produce new text instead.

Line numbers and columns are 0-based, matching the line model of an
editor buffer.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

DONE_TITLE = "Done:"


class LineKind(Enum):
    """Classification of a single line of tix text."""

    PROJECT_HEADER = auto()
    CONTEXT_ITEM = auto()
    BLANK = auto()
    PLAIN = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """One row of raw text plus its derived classification.

    Parameters
    ----------
    number:
        0-based line index within the document.
    kind:
        The line's classification.
    raw_text:
        The original text, without its line break.
    indent:
        Length of the leading whitespace.
    context:
        The context label of a ``CONTEXT_ITEM`` line, else ``None``.
    item_text:
        The text after the ``" - "`` separator of a ``CONTEXT_ITEM``
        line, else ``None``.
    ending:
        The line break that ends this line: ``"\\n"``, ``"\\r\\n"``,
        ``"\\r"``, or ``""`` for the last line.
    """

    number: int
    kind: LineKind
    raw_text: str
    indent: int = 0
    context: str | None = None
    item_text: str | None = None
    ending: str = ""

    @property
    def is_blank(self) -> bool:
        return self.kind is LineKind.BLANK

    @property
    def is_header(self) -> bool:
        return self.kind is LineKind.PROJECT_HEADER

    @property
    def stripped(self) -> str:
        return self.raw_text.strip()


@dataclass(frozen=True, slots=True)
class Section:
    """A header line and the lines up to the next header.

    The preamble (lines before the first header) is a section whose
    ``header`` is ``None``.
    """

    header: Line | None
    lines: tuple[Line, ...] = field(default_factory=tuple)

    @property
    def is_preamble(self) -> bool:
        return self.header is None

    @property
    def title(self) -> str:
        """The header's raw text, or ``""`` for the preamble."""
        return self.header.raw_text if self.header is not None else ""

    @property
    def is_done_section(self) -> bool:
        return self.header is not None and self.header.stripped == DONE_TITLE

    @property
    def start_line(self) -> int:
        """Index of the first line of the section, header included."""
        if self.header is not None:
            return self.header.number
        return self.lines[0].number if self.lines else 0

    @property
    def end_line(self) -> int:
        """Index of the last line of the section, header included."""
        if self.lines:
            return self.lines[-1].number
        return self.start_line

    def last_content_line(self) -> Line | None:
        """Return the last non-blank body line, or ``None`` if all are blank."""
        for line in reversed(self.lines):
            if not line.is_blank:
                return line
        return None

    def all_lines(self) -> Iterator[Line]:
        if self.header is not None:
            yield self.header
        yield from self.lines


@dataclass(frozen=True, slots=True)
class Document:
    """A parsed tix document.

    Parameters
    ----------
    sections:
        Sections in document order; together they cover every line
        exactly once.
    line_count:
        Number of lines in the source text.
    newline:
        Line break used for lines a transform adds: the first break
        found in the source, or ``"\\n"``.
    """

    sections: tuple[Section, ...]
    line_count: int
    newline: str = "\n"

    @property
    def lines(self) -> Iterator[Line]:
        for section in self.sections:
            yield from section.all_lines()

    @property
    def projects(self) -> tuple[Section, ...]:
        """All named sections, the Done section included."""
        return tuple(s for s in self.sections if not s.is_preamble)

    @property
    def preamble(self) -> Section | None:
        if self.sections and self.sections[0].is_preamble:
            return self.sections[0]
        return None

    def done_section(self) -> Section | None:
        """Return the first section titled ``Done:``, if any."""
        for section in self.sections:
            if section.is_done_section:
                return section
        return None

    def line_at(self, number: int) -> Line:
        for line in self.lines:
            if line.number == number:
                return line
        raise IndexError(f"line {number} out of range (document has {self.line_count} lines)")

    def raw_lines(self) -> list[str]:
        return [line.raw_text for line in self.lines]

    def line_pairs(self) -> list[tuple[str, str]]:
        """Every line as ``(raw_text, ending)``, in order."""
        return [(line.raw_text, line.ending) for line in self.lines]

    def text(self) -> str:
        """Re-serialize the document to the exact source text."""
        return "".join(raw + ending for raw, ending in self.line_pairs())
