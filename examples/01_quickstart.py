#!/usr/bin/env python3
"""Example: Quickstart — tix

Minimal working example: parse a todo list, look at its contexts and
folds, sort it, complete an item, and archive the Done section.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install tix
"""
from __future__ import annotations

import tix
from tix.colors import ContextColorMap

TODO_SOURCE = """\
Work:
bob - review PR
alice - fix login bug
carol - update docs

Home:
errands - buy milk
alice - call the plumber
"""


def main() -> None:
    print(f"tix version: {tix.__version__}")

    # Step 1: Parse into sections
    document = tix.parse(TODO_SOURCE)
    for section in document.projects:
        items = [line for line in section.lines if not line.is_blank]
        print(f"Project {section.title!r}: {len(items)} item(s)")

    # Step 2: Contexts and their palette colors
    color_map = ContextColorMap()
    annotations = tix.annotate(document, color_map)
    for context, ranges in annotations.contexts.items():
        print(f"  {context:<10} {color_map.hex_for(context)}  x{len(ranges)}")

    # Step 3: Folding ranges (0-based, inclusive)
    for fold in tix.folding_ranges(document):
        print(f"Fold lines {fold.start}-{fold.end}")

    # Step 4: Sort each project by context
    text = tix.sort_by_context(TODO_SOURCE)
    print("\nSorted:\n" + text)

    # Step 5: Complete the first Work item (line 1)
    text = tix.mark_done(text, 1)
    print("After marking line 1 done:\n" + text)

    # Step 6: Archive the Done section
    result = tix.archive(text)
    print(f"Archive block ({result.count} item(s)):{result.block}")
    print("Remaining:\n" + result.remaining_text)


if __name__ == "__main__":
    main()
