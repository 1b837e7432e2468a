"""Test that the quickstart API works for tix."""
from __future__ import annotations

from datetime import date


def test_quickstart_imports(package_name: str) -> None:
    import tix

    assert tix.__name__ == package_name
    assert callable(tix.parse)
    assert callable(tix.annotate)
    assert callable(tix.folding_ranges)


def test_version(expected_version: str) -> None:
    import tix

    assert tix.__version__ == expected_version


def test_quickstart_round_trip(sample_text: str) -> None:
    import tix

    document = tix.parse(sample_text)
    assert document.text() == sample_text


def test_quickstart_edit_flow() -> None:
    import tix

    text = "Work:\nbob - y\nalice - x\n"
    text = tix.sort_by_context(text)
    assert text == "Work:\nalice - x\nbob - y\n"

    text = tix.mark_done(text, 1)
    assert text == "Work:\nbob - y\n\nDone:\nalice - x\n"

    result = tix.archive(text, today=date(2024, 1, 15))
    assert result.block == "\nArchived 2024-01-15:\nalice - x\n"
    assert result.remaining_text == "Work:\nbob - y\n\nDone:\n"


def test_quickstart_annotate_and_fold(sample_text: str) -> None:
    import tix

    document = tix.parse(sample_text)
    annotations = tix.annotate(document)
    assert len(annotations.project_headers) == 3
    assert [(r.start, r.end) for r in tix.folding_ranges(document)] == [(2, 4), (6, 8), (11, 12)]
