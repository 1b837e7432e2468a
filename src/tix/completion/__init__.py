"""Context completion."""
from __future__ import annotations

from tix.completion.completion import CompletionItem, complete_contexts, known_contexts

__all__ = ["CompletionItem", "complete_contexts", "known_contexts"]
