"""Sort-by-context transform.

Within each project section, lines are stable-sorted by their context
label.  Lines without a context (plain text and interior blank lines)
sort under the empty key and therefore move to the front of their
section.  Trailing blank lines of a section are dropped, and sections
are rejoined with exactly one blank line between them.  The preamble is
left as it is, and every line keeps its own line break.
"""
from __future__ import annotations

import logging
import unicodedata

from tix.document.nodes import Line, Section
from tix.document.parser import join_lines, parse

logger = logging.getLogger(__name__)


def collation_key(value: str) -> tuple[str, str, str]:
    """Locale-style sort key for context names.

    Compares base letters first ignoring case and accents, then
    accents, then case with lowercase ahead of uppercase, so that
    ``"alice" < "bob" < "Bob" < "carol"``.
    """
    decomposed = unicodedata.normalize("NFD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), decomposed.casefold(), value.swapcase())


def _sort_key(line: Line) -> tuple[str, str, str]:
    return collation_key(line.context or "")


def _sortable_lines(section: Section) -> list[Line]:
    """Body lines with trailing blank lines removed."""
    items: list[Line] = []
    pending_blanks: list[Line] = []
    for line in section.lines:
        if line.is_blank:
            pending_blanks.append(line)
            continue
        items.extend(pending_blanks)
        pending_blanks = []
        items.append(line)
    return items


def sort_by_context(text: str) -> str:
    """Reorder the items of every project section by context.

    Parameters
    ----------
    text:
        Full document text.

    Returns
    -------
    str
        The rebuilt document.  A trailing line break on ``text`` is kept;
        a document without project headers is returned unchanged.
    """
    document = parse(text)
    projects = document.projects
    if not projects:
        logger.debug("sort_by_context: no project sections; nothing to do")
        return text

    newline = document.newline
    output: list[tuple[str, str]] = []
    if document.preamble is not None:
        output.extend((line.raw_text, line.ending) for line in document.preamble.lines)

    for position, section in enumerate(projects):
        header = section.header
        output.append((header.raw_text, header.ending) if header is not None else ("", newline))
        items = sorted(_sortable_lines(section), key=_sort_key)
        output.extend((line.raw_text, line.ending) for line in items)
        if position < len(projects) - 1:
            output.append(("", newline))

    if text.endswith(("\n", "\r")):
        output.append(("", ""))
    logger.debug("sort_by_context: sorted %d section(s)", len(projects))
    return join_lines(output, newline)
