"""Mark-done transform: move an item into the ``Done:`` section."""
from __future__ import annotations

import logging

from tix.document.nodes import DONE_TITLE
from tix.document.parser import join_lines, parse

logger = logging.getLogger(__name__)


def mark_done(text: str, line: int) -> str:
    """Move the item on ``line`` to the top of the Done section.

    The line and its line break are removed.  If a section titled
    ``Done:`` exists, the line's original text becomes its first entry,
    so completed items stack newest first.  Otherwise trailing blank
    lines are dropped and a ``Done:`` section is appended after exactly
    one blank separator line, ending with a line break.  Every other
    line keeps its own line break.

    Parameters
    ----------
    text:
        Full document text.
    line:
        0-based index of the line to complete.

    Returns
    -------
    str
        The new document text.  When ``line`` is out of range, blank, or
        a project header, ``text`` is returned unchanged.
    """
    document = parse(text)
    if not 0 <= line < document.line_count:
        logger.debug("mark_done: line %d out of range; nothing to do", line)
        return text
    target = document.line_at(line)
    if target.is_blank or target.is_header:
        logger.debug("mark_done: line %d is %s; nothing to do", line, target.kind.name)
        return text

    newline = document.newline
    pairs = document.line_pairs()
    del pairs[line]
    moved = (target.raw_text, target.ending or newline)

    done = document.done_section()
    if done is not None and done.header is not None:
        header_index = done.header.number
        if header_index > line:
            header_index -= 1
        pairs.insert(header_index + 1, moved)
        logger.debug("mark_done: moved line %d under %r", line, DONE_TITLE)
        return join_lines(pairs, newline)

    # Trailing blank lines, the final line break included, collapse into
    # the single separator before the new section.
    while pairs and not pairs[-1][0].strip():
        pairs.pop()
    if pairs:
        pairs.append(("", newline))
    pairs.extend([(DONE_TITLE, newline), moved, ("", "")])
    logger.debug("mark_done: created %r section for line %d", DONE_TITLE, line)
    return join_lines(pairs, newline)
