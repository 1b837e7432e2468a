"""Folding engine."""
from __future__ import annotations

from tix.folding.folding import FoldingRange, folding_ranges

__all__ = ["FoldingRange", "folding_ranges"]
