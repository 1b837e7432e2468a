"""Context color assignment.

Each context label gets a stable index into a fixed palette, assigned
in first-seen order and wrapping once the palette is exhausted.  Maps
are scoped per open document through ``ColorMapRegistry`` so that
colors stay put while a document is edited and reset once it closes.

Maps are not thread-safe; a host must not assign colors for the same
document from two threads at once.
"""
from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from typing import Final

logger = logging.getLogger(__name__)

CONTEXT_COLORS: Final[tuple[str, ...]] = (
    "#F48771",  # coral red
    "#4EC9B0",  # teal
    "#DCDCAA",  # yellow
    "#C586C0",  # purple
    "#6BCB6B",  # green
    "#CE9178",  # orange
    "#9CDCFE",  # light blue
    "#D16969",  # red
    "#4FC1FF",  # cyan
    "#E8AB6D",  # peach
    "#B5CEA8",  # sage green
    "#DA70D6",  # orchid
    "#87CEEB",  # sky blue
    "#F0E68C",  # khaki
    "#FF6B9D",  # pink
    "#20B2AA",  # light sea green
)

PROJECT_HEADER_COLOR: Final[str] = "#6b6b6b"


class ContextColorMap:
    """Stable mapping from context name to palette index.

    Parameters
    ----------
    palette:
        The ordered colors to cycle through.
    """

    def __init__(self, palette: Sequence[str] = CONTEXT_COLORS) -> None:
        if not palette:
            raise ValueError("palette must contain at least one color")
        self._palette = tuple(palette)
        self._indices: dict[str, int] = {}

    @property
    def palette(self) -> tuple[str, ...]:
        return self._palette

    def color_for(self, context: str) -> int:
        """Return the palette index for ``context``, assigning one if new.

        Names are matched exactly and case-sensitively.  The n-th new
        name (0-based) gets ``n % len(palette)``.
        """
        index = self._indices.get(context)
        if index is None:
            index = len(self._indices) % len(self._palette)
            self._indices[context] = index
            logger.debug("Assigned color %d to context %r", index, context)
        return index

    def hex_for(self, context: str) -> str:
        return self._palette[self.color_for(context)]

    def as_dict(self) -> dict[str, int]:
        return dict(self._indices)

    def __contains__(self, context: object) -> bool:
        return context in self._indices

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        return f"ContextColorMap(contexts={len(self._indices)}, palette_size={len(self._palette)})"


class ColorMapRegistry:
    """Per-document table of ``ContextColorMap`` instances.

    A map is created on the first request for a document identity and
    dropped by ``discard`` when the document closes.

    Parameters
    ----------
    palette:
        Palette handed to every map this registry creates.
    """

    def __init__(self, palette: Sequence[str] = CONTEXT_COLORS) -> None:
        self._palette = tuple(palette)
        self._maps: dict[Hashable, ContextColorMap] = {}

    def get(self, doc_id: Hashable) -> ContextColorMap:
        color_map = self._maps.get(doc_id)
        if color_map is None:
            color_map = ContextColorMap(self._palette)
            self._maps[doc_id] = color_map
            logger.debug("Created color map for document %r", doc_id)
        return color_map

    def discard(self, doc_id: Hashable) -> None:
        """Drop the map for ``doc_id``; unknown identities are ignored."""
        if self._maps.pop(doc_id, None) is not None:
            logger.debug("Discarded color map for document %r", doc_id)

    def clear(self) -> None:
        self._maps.clear()

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._maps

    def __len__(self) -> int:
        return len(self._maps)
