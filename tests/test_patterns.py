"""Tests for heading patterns and title derivation."""

from __future__ import annotations

import pytest

from docstruct.patterns import derive_title, is_page_marker, match_heading, normalize_title


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Unit 2: Waves", "Unit 2: Waves"),
        ("CHAPTER 3", "Chapter 3"),
        ("Section 4 Methods", "Section 4: Methods"),
        ("2.1 Background.", "Background"),
        ("Introduction:", "Introduction"),
        ("Appendix: Tables", "Appendix: Tables"),
        ("IV. Results", "Results"),
        ("A) Scope", "Scope"),
        ("Plain Heading;", "Plain Heading"),
    ],
)
def test_derive_title(line: str, expected: str) -> None:
    assert derive_title(line) == expected


def test_derive_title_keeps_raw_text_when_nothing_is_left() -> None:
    assert derive_title("...") == "..."


def test_keyword_needs_word_boundary() -> None:
    assert match_heading("Indexing strategies").keyword is None
    assert match_heading("Index of terms").keyword is not None


def test_roman_requires_separator() -> None:
    assert match_heading("Mild rain").roman is None
    assert match_heading("XII. Appendix").roman is not None


def test_structural_flag() -> None:
    assert match_heading("3.2 Data").structural
    assert not match_heading("Just some words").structural


@pytest.mark.parametrize("line", ["42", "Page 7", "page 120"])
def test_page_markers(line: str) -> None:
    assert is_page_marker(line)


def test_normalize_title() -> None:
    assert normalize_title("  Results:.  ") == "Results"
