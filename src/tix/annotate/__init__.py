"""Annotation engine.

Exports ``annotate`` and the ``Annotations`` / ``Range`` result types.
"""
from __future__ import annotations

from tix.annotate.annotator import Annotations, Range, annotate

__all__ = ["Annotations", "Range", "annotate"]
