"""End-to-end tests for heuristic structure inference."""

from __future__ import annotations

from dataclasses import replace

import pytest

from docstruct.config import DEFAULT_HEURISTICS
from docstruct.section_builder import DOCUMENT_CONTENT_ID, INTRODUCTION_ID
from docstruct.sections import forest_errors
from docstruct.structure import infer_sections


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
def test_blank_text_gives_no_sections(text: str) -> None:
    assert infer_sections(text) == []


def test_two_chapters(chapter_text: str) -> None:
    sections = infer_sections(chapter_text)

    assert [s.title for s in sections] == ["Chapter 1", "Chapter 2"]
    assert [s.content for s in sections] == ["Body text.", "More text."]
    assert all(s.parent is None and s.children == () for s in sections)


def test_numbered_outline(numbered_text: str) -> None:
    sections = infer_sections(numbered_text)
    by_title = {s.title: s for s in sections}

    assert list(by_title) == ["Introduction", "Background", "Methods"]
    assert by_title["Background"].level == 2
    assert by_title["Background"].parent == by_title["Introduction"].id
    assert by_title["Introduction"].children == (by_title["Background"].id,)
    assert by_title["Methods"].parent is None
    assert by_title["Introduction"].content == "This introduction explains the purpose of the work in detail."


def test_plain_prose_becomes_document_content() -> None:
    text = "Just a paragraph of plain prose without structure."
    sections = infer_sections(text)

    assert len(sections) == 1
    assert sections[0].id == DOCUMENT_CONTENT_ID
    assert sections[0].content == text


def test_page_numbers_never_become_sections() -> None:
    sections = infer_sections("Page 42")
    assert [s.id for s in sections] == [DOCUMENT_CONTENT_ID]


def test_preamble_becomes_introduction() -> None:
    text = (
        "Lecture notes for the autumn term are collected here.\n"
        "\n"
        "Chapter 1\n"
        "Waves travel through a medium and carry energy from place to place."
    )
    sections = infer_sections(text)

    assert [s.id for s in sections] == [INTRODUCTION_ID, "section-1"]
    assert sections[0].content == "Lecture notes for the autumn term are collected here."
    assert sections[1].title == "Chapter 1"


def test_output_is_deterministic(numbered_text: str) -> None:
    assert infer_sections(numbered_text) == infer_sections(numbered_text)


@pytest.mark.parametrize(
    "text",
    [
        "Chapter 1\nBody text.\n\nChapter 2\nMore text.",
        "1. A\n1.1 B\n1.1.1 C\n2. D\nsome words here that run on for a while\n",
        "INTRODUCTION\n\nIV. Results\nA. Scope\nB. Limits\n\n---\n7\nSummary\nend.",
        "\n".join(f"{i}. Heading number {i}\nShort." for i in range(1, 30)),
    ],
)
def test_result_is_a_valid_forest(text: str) -> None:
    sections = infer_sections(text)
    assert sections
    assert forest_errors(sections) == []
    assert all(s.title for s in sections)


def test_settings_change_the_outcome(chapter_text: str) -> None:
    strict = replace(DEFAULT_HEURISTICS, candidate_threshold=100)
    sections = infer_sections(chapter_text, strict)
    assert [s.id for s in sections] == [DOCUMENT_CONTENT_ID]


def test_body_lines_are_not_dropped(numbered_text: str) -> None:
    sections = infer_sections(numbered_text)
    combined = "\n".join(s.content for s in sections)
    body_lines = [line for i, line in enumerate(numbered_text.split("\n")) if i in (1, 4, 7)]
    assert all(line in combined for line in body_lines)


def test_short_parent_keeps_its_text_when_child_is_pruned() -> None:
    text = (
        "Chapter 1: Forces\n"
        "A short note.\n"
        "\n"
        "1.1 Newton\n"
        "See above.\n"
        "\n"
        "Chapter 2: Energy\n"
        "This chapter body is comfortably long enough to survive pruning."
    )
    sections = infer_sections(text)

    assert [(s.id, s.title) for s in sections] == [
        ("section-1", "Chapter 1: Forces"),
        ("section-3", "Chapter 2: Energy"),
    ]
    assert sections[0].content == "A short note."
    assert sections[0].children == ()
    assert forest_errors(sections) == []
