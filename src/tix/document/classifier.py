"""Line classifier: turns one line of tix text into a ``Line`` record.

Rules, applied in order:

- **Blank** if the stripped text is empty.
- **Project header** if the stripped text is longer than one character
  and ends with ``:``.  A lone ``:`` is plain text.
- **Context item** if, after the leading whitespace, the text reads
  ``<context><whitespace>-<whitespace><item>`` with a non-empty
  context.  The context is the shortest prefix that works, so
  ``"a - b - c"`` has context ``"a"`` and item ``"b - c"``.
- **Plain** otherwise.

Classification is done by scanning rather than by regular expression so
that the first-separator semantics hold regardless of regex engine.
"""
from __future__ import annotations

from tix.document.nodes import Line, LineKind


def _leading_whitespace(text: str) -> int:
    pos = 0
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def split_context(rest: str) -> tuple[str, str] | None:
    """Split ``rest`` at its first ``<ws>-<ws>`` separator.

    Parameters
    ----------
    rest:
        Line text with its indentation already removed.

    Returns
    -------
    tuple[str, str] | None
        ``(context, item_text)``, or ``None`` if ``rest`` has no
        separator preceded by at least one character.
    """
    length = len(rest)
    pos = 1
    while pos < length:
        if not rest[pos].isspace():
            pos += 1
            continue
        run_end = pos
        while run_end < length and rest[run_end].isspace():
            run_end += 1
        if (
            run_end + 1 < length
            and rest[run_end] == "-"
            and rest[run_end + 1].isspace()
        ):
            return rest[:pos], rest[run_end + 2:]
        pos = run_end
    return None


def is_project_header(text: str) -> bool:
    stripped = text.strip()
    return len(stripped) > 1 and stripped.endswith(":")


def classify_line(text: str, number: int = 0, ending: str = "") -> Line:
    """Classify a single line of text.

    Parameters
    ----------
    text:
        The raw line, without its line break.
    number:
        0-based index of the line in its document.
    ending:
        The line break that followed ``text`` in the source.

    Returns
    -------
    Line
        The classified line.  Every string is classifiable.
    """
    indent = _leading_whitespace(text)
    if indent == len(text):
        return Line(number=number, kind=LineKind.BLANK, raw_text=text, indent=indent, ending=ending)
    if is_project_header(text):
        return Line(number=number, kind=LineKind.PROJECT_HEADER, raw_text=text, indent=indent, ending=ending)

    parts = split_context(text[indent:])
    if parts is not None:
        context, item_text = parts
        return Line(
            number=number,
            kind=LineKind.CONTEXT_ITEM,
            raw_text=text,
            indent=indent,
            context=context,
            item_text=item_text,
            ending=ending,
        )
    return Line(number=number, kind=LineKind.PLAIN, raw_text=text, indent=indent, ending=ending)
