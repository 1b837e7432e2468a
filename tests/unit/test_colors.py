"""Unit tests for tix.colors.palette — context color assignment."""
from __future__ import annotations

import pytest

from tix.colors.palette import CONTEXT_COLORS, ColorMapRegistry, ContextColorMap


class TestContextColorMap:
    def test_palette_has_sixteen_colors(self) -> None:
        assert len(CONTEXT_COLORS) == 16
        assert CONTEXT_COLORS[0] == "#F48771"

    def test_first_seen_order(self) -> None:
        color_map = ContextColorMap()
        assert [color_map.color_for(c) for c in ["alice", "bob", "carol"]] == [0, 1, 2]

    def test_repeated_calls_are_stable(self) -> None:
        color_map = ContextColorMap()
        first = color_map.color_for("alice")
        color_map.color_for("bob")
        assert color_map.color_for("alice") == first
        assert len(color_map) == 2

    def test_wraps_after_palette_exhausted(self) -> None:
        color_map = ContextColorMap(["red", "green", "blue"])
        indices = [color_map.color_for(f"c{i}") for i in range(7)]
        assert indices == [0, 1, 2, 0, 1, 2, 0]

    def test_full_palette_wrap(self) -> None:
        color_map = ContextColorMap()
        names = [f"ctx{i}" for i in range(40)]
        for i, name in enumerate(names):
            assert color_map.color_for(name) == i % len(CONTEXT_COLORS)

    def test_case_sensitive(self) -> None:
        color_map = ContextColorMap()
        assert color_map.color_for("Home") != color_map.color_for("home")

    def test_hex_for(self) -> None:
        color_map = ContextColorMap()
        color_map.color_for("a")
        assert color_map.hex_for("b") == CONTEXT_COLORS[1]

    def test_empty_palette_rejected(self) -> None:
        with pytest.raises(ValueError):
            ContextColorMap([])

    def test_as_dict_and_contains(self) -> None:
        color_map = ContextColorMap()
        color_map.color_for("x")
        assert "x" in color_map
        assert color_map.as_dict() == {"x": 0}


class TestColorMapRegistry:
    def test_get_creates_once(self) -> None:
        registry = ColorMapRegistry()
        first = registry.get("doc-1")
        assert registry.get("doc-1") is first
        assert "doc-1" in registry

    def test_documents_are_independent(self) -> None:
        registry = ColorMapRegistry()
        registry.get("a").color_for("alice")
        assert registry.get("b").color_for("bob") == 0

    def test_discard_resets_colors(self) -> None:
        registry = ColorMapRegistry()
        registry.get("doc").color_for("alice")
        registry.get("doc").color_for("bob")
        registry.discard("doc")
        assert "doc" not in registry
        assert registry.get("doc").color_for("bob") == 0

    def test_discard_unknown_is_ignored(self) -> None:
        registry = ColorMapRegistry()
        registry.discard("missing")
        assert len(registry) == 0

    def test_clear(self) -> None:
        registry = ColorMapRegistry()
        registry.get("a")
        registry.get("b")
        registry.clear()
        assert len(registry) == 0

    def test_custom_palette_is_used(self) -> None:
        registry = ColorMapRegistry(["#000000"])
        assert registry.get("doc").palette == ("#000000",)
