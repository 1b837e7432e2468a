"""Open-document lifecycle for editor hosts.

A ``Workspace`` tracks the text of every open document and owns the
per-document context color maps.  Hosts call ``on_document_changed``
from their own change notifications and pull fresh annotations back;
nothing here runs on its own.

Usage
-----
::

    workspace = Workspace()
    workspace.open("file:///todo.tix", text)
    annotations = workspace.on_document_changed("file:///todo.tix", new_text)
    workspace.close("file:///todo.tix")
"""
from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass

from tix.annotate.annotator import Annotations, annotate
from tix.colors.palette import ColorMapRegistry, ContextColorMap
from tix.completion.completion import CompletionItem, complete_contexts
from tix.config import TixConfig
from tix.document.nodes import Document
from tix.document.parser import parse
from tix.folding.folding import FoldingRange, folding_ranges

logger = logging.getLogger(__name__)


class DocumentNotOpenError(KeyError):
    """Raised when a document identity is not open in the workspace."""

    def __init__(self, doc_id: Hashable) -> None:
        self.doc_id = doc_id
        super().__init__(f"Document {doc_id!r} is not open in this workspace.")


@dataclass
class OpenDocument:
    doc_id: Hashable
    text: str
    language_id: str

    def parse(self) -> Document:
        return parse(self.text)


class Workspace:
    """Registry of open documents and their color maps.

    Parameters
    ----------
    config:
        Palette and language settings; defaults to ``TixConfig()``.
    """

    def __init__(self, config: TixConfig | None = None) -> None:
        self._config = config or TixConfig()
        self._documents: dict[Hashable, OpenDocument] = {}
        self._colors = ColorMapRegistry(self._config.palette)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self, doc_id: Hashable, text: str, language_id: str | None = None) -> OpenDocument:
        document = OpenDocument(
            doc_id=doc_id,
            text=text,
            language_id=language_id or self._config.language_id,
        )
        self._documents[doc_id] = document
        logger.debug("Opened document %r (%s)", doc_id, document.language_id)
        return document

    def on_document_changed(self, doc_id: Hashable, text: str) -> Annotations | None:
        """Record new text for ``doc_id`` and return its recomputed annotations."""
        self._get(doc_id).text = text
        return self.annotations(doc_id)

    def close(self, doc_id: Hashable) -> None:
        """Forget ``doc_id`` and drop its color map."""
        if self._documents.pop(doc_id, None) is None:
            raise DocumentNotOpenError(doc_id)
        self._colors.discard(doc_id)
        logger.debug("Closed document %r", doc_id)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def text(self, doc_id: Hashable) -> str:
        return self._get(doc_id).text

    def is_tix(self, doc_id: Hashable) -> bool:
        return self._get(doc_id).language_id == self._config.language_id

    def color_map(self, doc_id: Hashable) -> ContextColorMap:
        return self._colors.get(doc_id)

    def annotations(self, doc_id: Hashable) -> Annotations | None:
        """Annotations for ``doc_id``, or ``None`` for non-tix documents."""
        if not self.is_tix(doc_id):
            return None
        return annotate(self._get(doc_id).parse(), self._colors.get(doc_id))

    def folding(self, doc_id: Hashable) -> list[FoldingRange]:
        if not self.is_tix(doc_id):
            return []
        return folding_ranges(self._get(doc_id).parse())

    def completions(self, doc_id: Hashable, line: int, column: int) -> list[CompletionItem]:
        if not self.is_tix(doc_id):
            return []
        return complete_contexts(self._get(doc_id).parse(), line, column)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def _get(self, doc_id: Hashable) -> OpenDocument:
        try:
            return self._documents[doc_id]
        except KeyError:
            raise DocumentNotOpenError(doc_id) from None
