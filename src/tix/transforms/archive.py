"""Archive extractor: lift completed items out of the ``Done:`` section.

``extract_archive`` returns the dated block to append to the archive
sidecar together with the document text left behind.  It performs no
I/O; appending the block is the caller's job.

Usage
-----
::

    from tix.transforms import extract_archive

    result = extract_archive(text)
    with open(path + ".archive", "a", encoding="utf-8") as fh:
        fh.write(result.block)
    text = result.remaining_text
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone

from tix.document.parser import join_lines, parse
from tix.errors import NoDoneSection, NothingToArchive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveResult:
    """Output of a successful archive extraction.

    Parameters
    ----------
    block:
        Text to append to the archive, ``"\\nArchived <date>:\\n<items>\\n"``.
    remaining_text:
        The document with the Done section's body removed and its
        header kept.
    items:
        The archived lines, in document order.
    """

    block: str
    remaining_text: str
    items: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.items)


def format_archive_block(items: tuple[str, ...] | list[str], day: date) -> str:
    return f"\nArchived {day.isoformat()}:\n" + "\n".join(items) + "\n"


def extract_archive(text: str, today: date | None = None) -> ArchiveResult:
    """Split the Done section's items out of ``text``.

    Parameters
    ----------
    text:
        Full document text.
    today:
        Date stamped on the block; defaults to the current UTC date.

    Returns
    -------
    ArchiveResult
        The archive block and the remaining document text.

    Raises
    ------
    NoDoneSection
        If the document has no ``Done:`` section.
    NothingToArchive
        If the Done section contains only blank lines.
    """
    document = parse(text)
    done = document.done_section()
    if done is None or done.header is None:
        raise NoDoneSection()

    items = tuple(line.raw_text for line in done.lines if not line.is_blank)
    if not items:
        raise NothingToArchive()

    day = today or datetime.now(timezone.utc).date()
    block = format_archive_block(items, day)

    pairs = document.line_pairs()
    header_index = done.header.number
    body_end = done.end_line
    if body_end == document.line_count - 1:
        # Done runs to the end of the document: keep the header's line break.
        kept = pairs[: header_index + 1] + [("", "")]
    else:
        kept = pairs[: header_index + 1] + pairs[body_end + 1:]
    remaining = join_lines(kept, document.newline)

    logger.debug("extract_archive: archived %d item(s) dated %s", len(items), day.isoformat())
    return ArchiveResult(block=block, remaining_text=remaining, items=items)
