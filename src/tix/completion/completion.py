"""Context completion for the start of an item line.

While the cursor is still in the context part of a line (no ``" - "``
before it), every context already used in the document is offered,
in first-seen order, with the separator appended.
"""
from __future__ import annotations

from dataclasses import dataclass

from tix.document.nodes import Document, LineKind

COMPLETION_DETAIL = "Tix context"


@dataclass(frozen=True, slots=True)
class CompletionItem:
    label: str
    insert_text: str
    detail: str = COMPLETION_DETAIL


def known_contexts(document: Document) -> list[str]:
    """Distinct context names in ``document``, in first-seen order."""
    seen: dict[str, None] = {}
    for line in document.lines:
        if line.kind is LineKind.CONTEXT_ITEM and line.context is not None:
            seen.setdefault(line.context, None)
    return list(seen)


def complete_contexts(document: Document, line: int, column: int) -> list[CompletionItem]:
    """Return context completions for the cursor at ``(line, column)``.

    Parameters
    ----------
    document:
        The parsed document.
    line:
        0-based cursor line.
    column:
        0-based cursor column.

    Returns
    -------
    list[CompletionItem]
        Empty when the cursor is past a separator or outside the document.
    """
    if not 0 <= line < document.line_count:
        return []
    before_cursor = document.line_at(line).raw_text[: max(column, 0)]
    if " - " in before_cursor:
        return []
    return [
        CompletionItem(label=context, insert_text=f"{context} - ")
        for context in known_contexts(document)
    ]
