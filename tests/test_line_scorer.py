"""Tests for per-line heading scores."""

from __future__ import annotations

from dataclasses import replace

from docstruct.config import DEFAULT_HEURISTICS
from docstruct.line_scorer import HeaderCandidate, score_line, score_lines, select_candidates


class TestScoreLine:
    """Tests for score_line on isolated lines."""

    def test_page_number_is_vetoed(self) -> None:
        assert score_line(["Page 42"], 0) == (-10, 1)
        assert score_line(["42"], 0) == (-10, 1)

    def test_numbered_heading(self) -> None:
        # length 8 + numbered 12 + short title 3 + blank before 3 + blank after 1
        assert score_line(["1. Introduction"], 0) == (27, 1)

    def test_numbered_depth_sets_level(self) -> None:
        score, level = score_line(["1.2.3 Evaluation"], 0)
        assert score == 27
        assert level == 3

    def test_chapter_heading(self) -> None:
        lines = ["Chapter 1", "Body text."]
        # length 8 + chapter 15 + capitalized 4 + blank before 3
        assert score_line(lines, 0) == (30, 1)

    def test_chapter_with_title_gets_bonus(self) -> None:
        lines = ["Chapter 1", "x"]
        titled = ["Chapter 1: Waves", "x"]
        assert score_line(titled, 0)[0] - score_line(lines, 0)[0] == 5 + 3  # title + colon

    def test_short_sentence_is_penalized(self) -> None:
        lines = ["Chapter 1", "Body text.", ""]
        # length 8 + capitalized 4 + blank after 1 - sentence 5
        assert score_line(lines, 1) == (8, 1)

    def test_letter_heading_sets_level_two(self) -> None:
        _, level = score_line(["A. Scope"], 0)
        assert level == 2

    def test_prose_starting_with_letter_is_not_lettered(self) -> None:
        _, level = score_line(["A new day"], 0)
        assert level == 1

    def test_all_caps_heading(self) -> None:
        plain = score_line(["Results and more"], 0)[0]
        caps = score_line(["RESULTS AND MORE"], 0)[0]
        # caps bonus 8 replaces capitalized bonus 4
        assert caps - plain == 4

    def test_lowercase_start_is_penalized(self) -> None:
        upper = score_line(["Notes on waves"], 0)[0]
        lower = score_line(["notes on waves"], 0)[0]
        assert upper - lower == 4 + 5

    def test_weights_come_from_settings(self) -> None:
        settings = replace(DEFAULT_HEURISTICS, chapter_bonus=0)
        assert score_line(["Chapter 1", "x"], 0, settings) == (15, 1)


class TestScoreLines:
    """Tests for score_lines and select_candidates."""

    def test_skips_blank_lines_and_keeps_indices(self, chapter_text: str) -> None:
        candidates = score_lines(chapter_text.split("\n"))
        assert [c.index for c in candidates] == [0, 1, 3, 4]
        assert [c.score for c in candidates] == [30, 8, 30, 8]

    def test_text_is_stripped(self) -> None:
        candidates = score_lines(["   Chapter 1   "])
        assert candidates[0].text == "Chapter 1"

    def test_threshold_is_strict(self) -> None:
        candidates = [
            HeaderCandidate(index=0, text="a", score=6, level=1),
            HeaderCandidate(index=1, text="b", score=7, level=1),
        ]
        assert [c.index for c in select_candidates(candidates)] == [1]
