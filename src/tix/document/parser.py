"""Document parser: tix source text to a ``Document``.

The parser walks the lines in order.  A project header closes the open
section and starts a new one; every other line joins the open section,
or an implicit preamble section when no header has been seen yet.  No
line is dropped or reordered, and parsing never fails: text without any
headers becomes a single preamble section.

Usage
-----
::

    from tix.document import parse

    document = parse(text)
    for section in document.projects:
        print(section.title, len(section.lines))
"""
from __future__ import annotations

import re
from collections.abc import Sequence

from tix.document.classifier import classify_line
from tix.document.nodes import Document, Line, LineKind, Section

_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


def detect_newline(text: str) -> str:
    """Return the first line break in ``text``, or ``"\\n"`` if there is none."""
    match = _LINE_BREAK.search(text)
    return match.group(0) if match else "\n"


def split_line_endings(text: str) -> list[tuple[str, str]]:
    """Split text into ``(line, ending)`` pairs the way an editor buffer does.

    ``"\\r\\n"``, ``"\\r"`` and ``"\\n"`` all end a line, and each pair
    keeps the break it had, so joining the pairs back reproduces
    ``text``.  A trailing line break yields a final empty line, so
    ``"a\\n"`` has two lines.  The empty string is one empty line.  The
    last pair's ending is always ``""``.
    """
    parts = _LINE_BREAK.split(text)
    endings = parts[1::2] + [""]
    return list(zip(parts[::2], endings))


def split_lines(text: str) -> list[str]:
    """Split text into lines, dropping the line breaks."""
    return [line for line, _ in split_line_endings(text)]


def join_lines(pairs: Sequence[tuple[str, str]], newline: str = "\n") -> str:
    """Join ``(line, ending)`` pairs back into text.

    The inverse of ``split_line_endings``.  A pair that is not the last
    one but has no ending (a line moved away from the end of the
    document) is given ``newline``; the last pair's ending is dropped,
    since a trailing line break is represented by a final empty line.
    """
    last = len(pairs) - 1
    return "".join(
        line + ((ending or newline) if index < last else "")
        for index, (line, ending) in enumerate(pairs)
    )


class DocumentParser:
    """Groups classified lines into sections.

    Parameters
    ----------
    newline:
        Line break recorded on the produced document, and the ending
        given to every line but the last when ``parse_lines`` is not
        passed explicit endings.
    """

    def __init__(self, newline: str = "\n") -> None:
        self._newline = newline

    def parse_lines(self, raw_lines: Sequence[str], endings: Sequence[str] | None = None) -> Document:
        """Parse an ordered sequence of raw lines into a ``Document``."""
        if endings is None:
            endings = [self._newline] * (len(raw_lines) - 1) + [""]
        sections: list[Section] = []
        header: Line | None = None
        body: list[Line] = []
        started = False

        for number, (raw, ending) in enumerate(zip(raw_lines, endings)):
            line = classify_line(raw, number, ending)
            if line.kind is LineKind.PROJECT_HEADER:
                if started:
                    sections.append(Section(header=header, lines=tuple(body)))
                header = line
                body = []
            else:
                body.append(line)
            started = True

        if started:
            sections.append(Section(header=header, lines=tuple(body)))

        return Document(
            sections=tuple(sections),
            line_count=len(raw_lines),
            newline=self._newline,
        )


def parse(text: str) -> Document:
    """Parse tix source text into a ``Document``.

    Parameters
    ----------
    text:
        Complete document text.

    Returns
    -------
    Document
        The parsed document; ``document.text()`` reproduces ``text``.
    """
    pairs = split_line_endings(text)
    parser = DocumentParser(newline=detect_newline(text))
    return parser.parse_lines([line for line, _ in pairs], [ending for _, ending in pairs])
