"""Folding ranges: one collapsible range per project section."""
from __future__ import annotations

from dataclasses import dataclass

from tix.document.nodes import Document


@dataclass(frozen=True, slots=True)
class FoldingRange:
    """Inclusive 0-based line range ``[start, end]`` that can be collapsed."""

    start: int
    end: int


def folding_ranges(document: Document) -> list[FoldingRange]:
    """Return the folding ranges of ``document`` in document order.

    Each named section (the Done section included) folds from its
    header to its last non-blank line.  Trailing blank lines are left
    out, and a section with no non-blank body line produces no range.
    The preamble never folds.
    """
    ranges: list[FoldingRange] = []
    for section in document.projects:
        last = section.last_content_line()
        if last is None:
            continue
        ranges.append(FoldingRange(start=section.start_line, end=last.number))
    return ranges
