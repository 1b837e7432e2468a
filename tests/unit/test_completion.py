"""Unit tests for tix.completion — context completion."""
from __future__ import annotations

from tix.completion.completion import COMPLETION_DETAIL, CompletionItem, complete_contexts, known_contexts
from tix.document.parser import parse


class TestKnownContexts:
    def test_first_seen_unique(self, sample_text: str) -> None:
        assert known_contexts(parse(sample_text)) == ["bob", "alice", "errands"]

    def test_none(self) -> None:
        assert known_contexts(parse("P:\nnote\n")) == []


class TestCompleteContexts:
    def test_offers_all_contexts_at_line_start(self, sample_text: str) -> None:
        items = complete_contexts(parse(sample_text), 5, 0)
        assert [item.label for item in items] == ["bob", "alice", "errands"]
        assert items[0] == CompletionItem(label="bob", insert_text="bob - ", detail=COMPLETION_DETAIL)

    def test_nothing_after_separator(self) -> None:
        document = parse("P:\nalice - fix bug\n")
        assert complete_contexts(document, 1, 10) == []

    def test_cursor_before_separator(self) -> None:
        document = parse("P:\nalice - fix bug\n")
        assert [i.label for i in complete_contexts(document, 1, 3)] == ["alice"]

    def test_out_of_range_line(self) -> None:
        assert complete_contexts(parse("P:\n"), 10, 0) == []
