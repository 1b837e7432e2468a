"""tix — plain-text todo format toolkit: parser, annotator, folding, transforms.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import tix

    text = "Work:\\nalice - fix bug\\nbob - review\\n"

    document = tix.parse(text)
    spans = tix.annotate(document)
    folds = tix.folding_ranges(document)

    text = tix.sort_by_context(text)
    text = tix.mark_done(text, 1)

    result = tix.archive(text)
    text = result.remaining_text

    tix.__version__
    '0.1.0'
"""
from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from tix.annotate.annotator import Annotations
    from tix.colors.palette import ContextColorMap
    from tix.document.nodes import Document
    from tix.folding.folding import FoldingRange
    from tix.transforms.archive import ArchiveResult


def parse(text: str) -> "Document":
    """Parse tix text into a ``Document``.

    Parameters
    ----------
    text:
        Complete document text.

    Returns
    -------
    Document
        The parsed document.  Parsing never fails.
    """
    from tix.document.parser import parse as _parse

    return _parse(text)


def annotate(document: "Document", color_map: "ContextColorMap | None" = None) -> "Annotations":
    """Compute header, Done-item, and context spans for ``document``."""
    from tix.annotate.annotator import annotate as _annotate

    return _annotate(document, color_map)


def folding_ranges(document: "Document") -> list["FoldingRange"]:
    """Return one folding range per non-empty project section."""
    from tix.folding.folding import folding_ranges as _folding_ranges

    return _folding_ranges(document)


def mark_done(text: str, line: int) -> str:
    """Move the item on 0-based ``line`` into the Done section.

    Returns ``text`` unchanged when the line is blank, a header, or out
    of range.
    """
    from tix.transforms.mark_done import mark_done as _mark_done

    return _mark_done(text, line)


def sort_by_context(text: str) -> str:
    """Sort the items of every project section by context."""
    from tix.transforms.sort import sort_by_context as _sort_by_context

    return _sort_by_context(text)


def archive(text: str, today: date | None = None) -> "ArchiveResult":
    """Extract the Done section's items as a dated archive block.

    Raises
    ------
    tix.errors.NoDoneSection
        If there is no ``Done:`` section.
    tix.errors.NothingToArchive
        If the Done section is empty.
    """
    from tix.transforms.archive import extract_archive

    return extract_archive(text, today=today)


__all__ = [
    "__version__",
    "parse",
    "annotate",
    "folding_ranges",
    "mark_done",
    "sort_by_context",
    "archive",
]
