"""Unit tests for tix.annotate — header, Done, and context spans."""
from __future__ import annotations

from tix.annotate.annotator import Annotations, Range, annotate
from tix.colors.palette import ContextColorMap
from tix.document.parser import parse


class TestProjectHeaders:
    def test_whole_line_ranges(self, sample_text: str) -> None:
        annotations = annotate(parse(sample_text))
        assert annotations.project_headers == (
            Range(2, 0, 5),
            Range(6, 0, 5),
            Range(11, 0, 5),
        )

    def test_no_headers(self) -> None:
        assert annotate(parse("just text\n")).project_headers == ()


class TestDoneItems:
    def test_non_blank_done_lines(self) -> None:
        text = "Work:\na - b\nDone:\nx - y\n\nplain done\nNext:\nc - d\n"
        annotations = annotate(parse(text))
        assert annotations.done_items == (Range(3, 0, 5), Range(5, 0, 10))

    def test_done_header_is_not_a_done_item(self) -> None:
        annotations = annotate(parse("Done:\n"))
        assert annotations.done_items == ()
        assert annotations.project_headers == (Range(0, 0, 5),)


class TestContextSpans:
    def test_label_columns_exclude_indent_and_separator(self) -> None:
        annotations = annotate(parse("P:\n  errands - buy milk\n"))
        assert annotations.contexts == {"errands": (Range(1, 2, 9),)}

    def test_grouped_by_context_in_first_seen_order(self, sample_text: str) -> None:
        annotations = annotate(parse(sample_text))
        assert list(annotations.contexts) == ["bob", "alice", "errands"]
        assert annotations.contexts["alice"] == (Range(4, 0, 5), Range(12, 0, 5))

    def test_preamble_items_are_annotated(self) -> None:
        annotations = annotate(parse("home - laundry\nP:\n"))
        assert annotations.contexts == {"home": (Range(0, 0, 4),)}

    def test_context_at(self, sample_text: str) -> None:
        annotations = annotate(parse(sample_text))
        assert annotations.context_at(7) == "errands"
        assert annotations.context_at(8) is None


class TestColors:
    def test_no_color_map_means_no_colors(self, sample_text: str) -> None:
        assert annotate(parse(sample_text)).context_colors == {}

    def test_colors_follow_document_order(self, sample_text: str) -> None:
        annotations = annotate(parse(sample_text), ContextColorMap())
        assert annotations.context_colors == {"bob": 0, "alice": 1, "errands": 2}

    def test_colors_stable_across_edits(self) -> None:
        color_map = ContextColorMap()
        annotate(parse("P:\nalice - a\nbob - b\n"), color_map)
        edited = annotate(parse("P:\nbob - b\ncarol - c\nalice - a\n"), color_map)
        assert edited.context_colors == {"bob": 1, "carol": 2, "alice": 0}


class TestPurity:
    def test_idempotent(self, sample_text: str) -> None:
        first = annotate(parse(sample_text))
        second = annotate(parse(sample_text))
        assert first == second
        assert isinstance(first, Annotations)

    def test_range_length(self) -> None:
        assert len(Range(0, 2, 9)) == 7
