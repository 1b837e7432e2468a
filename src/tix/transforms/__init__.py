"""Text-producing transforms: mark done, sort by context, archive.

Each transform takes full document text and returns new text; none of
them touches the file system.
"""
from __future__ import annotations

from tix.transforms.archive import ArchiveResult, extract_archive, format_archive_block
from tix.transforms.mark_done import mark_done
from tix.transforms.sort import collation_key, sort_by_context

__all__ = [
    "ArchiveResult",
    "collation_key",
    "extract_archive",
    "format_archive_block",
    "mark_done",
    "sort_by_context",
]
