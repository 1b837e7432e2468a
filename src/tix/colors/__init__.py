"""Context color palette and per-document color maps."""
from __future__ import annotations

from tix.colors.palette import (
    CONTEXT_COLORS,
    PROJECT_HEADER_COLOR,
    ColorMapRegistry,
    ContextColorMap,
)

__all__ = ["CONTEXT_COLORS", "PROJECT_HEADER_COLOR", "ColorMapRegistry", "ContextColorMap"]
