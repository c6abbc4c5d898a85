"""Tests for stub pruning."""

from __future__ import annotations

from docstruct.postprocess import prune_sections
from docstruct.schemas import Section

LONG = "This body is comfortably longer than twenty characters."


def test_keeps_sections_with_enough_content() -> None:
    sections = [Section(id="a", title="A", content=LONG, level=1)]
    assert prune_sections(sections) == sections


def test_drops_stub_child_and_repairs_parent() -> None:
    sections = [
        Section(id="a", title="A", content=LONG, level=1, children=("b",)),
        Section(id="b", title="B", content="x", level=2, parent="a"),
    ]
    result = prune_sections(sections)
    assert [s.id for s in result] == ["a"]
    assert result[0].children == ()


def test_parent_left_empty_is_dropped_too() -> None:
    sections = [
        Section(id="a", title="A", content="", level=1, children=("b",)),
        Section(id="b", title="B", content="x", level=2, parent="a"),
        Section(id="c", title="C", content=LONG, level=1),
    ]
    assert [s.id for s in prune_sections(sections)] == ["c"]


def test_parent_with_short_content_survives_losing_its_children() -> None:
    sections = [
        Section(id="a", title="A", content="A short note", level=1, children=("b",)),
        Section(id="b", title="B", content="x", level=2, parent="a"),
        Section(id="c", title="C", content=LONG, level=1),
    ]
    result = prune_sections(sections)
    assert [s.id for s in result] == ["a", "c"]
    assert result[0].content == "A short note"
    assert result[0].children == ()


def test_never_empties_a_document_with_content() -> None:
    sections = [
        Section(id="a", title="A", content="Body text.", level=1),
        Section(id="b", title="B", content="", level=1),
        Section(id="c", title="C", content="More text.", level=1),
    ]
    assert [s.id for s in prune_sections(sections)] == ["a", "c"]


def test_all_empty_sections_are_dropped() -> None:
    sections = [Section(id="a", title="A", content="", level=1)]
    assert prune_sections(sections) == []


def test_zero_threshold_only_drops_empty_leaves() -> None:
    sections = [
        Section(id="a", title="A", content="x", level=1, children=("b",)),
        Section(id="b", title="B", content="", level=2, parent="a"),
    ]
    result = prune_sections(sections, min_content_chars=0)
    assert [s.id for s in result] == ["a"]
    assert result[0].children == ()


def test_levels_and_parents_are_untouched() -> None:
    sections = [
        Section(id="a", title="A", content=LONG, level=1, children=("b", "c")),
        Section(id="b", title="B", content=LONG, level=3, parent="a"),
        Section(id="c", title="C", content="", level=2, parent="a"),
    ]
    result = prune_sections(sections)
    assert result[1].level == 3
    assert result[1].parent == "a"
    assert result[0].children == ("b",)
