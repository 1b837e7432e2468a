"""Open-document lifecycle for editor hosts."""
from __future__ import annotations

from tix.session.workspace import DocumentNotOpenError, OpenDocument, Workspace

__all__ = ["DocumentNotOpenError", "OpenDocument", "Workspace"]
