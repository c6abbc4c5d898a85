"""Score every line of a document for how much it looks like a heading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from docstruct.config import DEFAULT_HEURISTICS, HeuristicSettings
from docstruct.patterns import (
    ALL_CAPS_RE,
    BARE_NUMBER_RE,
    CAPITALIZED_RE,
    DIVIDER_RE,
    LOWERCASE_START_RE,
    MID_SENTENCE_RE,
    SENTENCE_BREAK_RE,
    is_page_marker,
    match_heading,
)


@dataclass
class HeaderCandidate:
    """A line provisionally identified as a possible section title."""

    index: int
    text: str
    score: int
    level: int


def score_lines(
    lines: Sequence[str], settings: HeuristicSettings = DEFAULT_HEURISTICS
) -> list[HeaderCandidate]:
    """Score each non-empty line; no filtering is applied.

    Args:
        lines: The document split on newlines, original indices preserved.
        settings: Heuristic weights.

    Returns:
        One candidate per non-empty line, in document order.
    """
    candidates: list[HeaderCandidate] = []
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        score, level = score_line(lines, index, settings)
        candidates.append(HeaderCandidate(index=index, text=line, score=score, level=level))
    return candidates


def select_candidates(
    candidates: Sequence[HeaderCandidate], settings: HeuristicSettings = DEFAULT_HEURISTICS
) -> list[HeaderCandidate]:
    """Keep candidates scoring strictly above the threshold."""
    return [c for c in candidates if c.score > settings.candidate_threshold]


def score_line(
    lines: Sequence[str], index: int, settings: HeuristicSettings = DEFAULT_HEURISTICS
) -> tuple[int, int]:
    """Return ``(score, level_guess)`` for the line at ``index``."""
    line = lines[index].strip()
    level = 1

    if is_page_marker(line):
        return settings.veto_score, level

    score = _length_score(len(line), settings)

    matches = match_heading(line)
    # Later matches overwrite the level guess.
    if matches.chapter:
        score += settings.chapter_bonus
        level = 1
        if matches.chapter.group(3).strip():
            score += settings.chapter_title_bonus
    if matches.numbered:
        score += settings.numbered_bonus
        level = matches.numbered.group(1).count(".") + 1
        if len(matches.numbered.group(2)) < settings.numbered_title_max_chars:
            score += settings.numbered_title_bonus
    if matches.keyword:
        score += settings.keyword_bonus
        level = 1
        if matches.keyword.group(2).strip():
            score += settings.keyword_title_bonus
    if matches.roman:
        score += settings.roman_bonus
        level = 1
    if matches.letter:
        score += settings.letter_bonus
        level = 2

    if ALL_CAPS_RE.match(line) and len(line) < settings.all_caps_max_chars:
        score += settings.all_caps_bonus
        level = 1
    elif CAPITALIZED_RE.match(line) and not MID_SENTENCE_RE.search(line):
        score += settings.capitalized_bonus

    score += _context_score(lines, index, line, settings)

    if LOWERCASE_START_RE.match(line) and not matches.numbered:
        score -= settings.lowercase_penalty
    if SENTENCE_BREAK_RE.search(line) and len(line) > settings.mid_sentence_min_chars:
        score -= settings.mid_sentence_penalty
    if line.endswith(".") and not matches.numbered:
        if len(line) > settings.trailing_period_min_chars:
            score -= settings.trailing_period_penalty
        if not matches.structural:
            score -= settings.sentence_penalty

    return score, level


def _length_score(length: int, settings: HeuristicSettings) -> int:
    if length < settings.short_line_chars:
        return settings.short_line_bonus
    if length < settings.medium_line_chars:
        return settings.medium_line_bonus
    if length < settings.long_line_chars:
        return settings.long_line_bonus
    if length > settings.very_long_line_chars:
        return -settings.very_long_line_penalty
    if length > settings.overlong_line_chars:
        return -settings.overlong_line_penalty
    return 0


def _context_score(lines: Sequence[str], index: int, line: str, settings: HeuristicSettings) -> int:
    prev_line = lines[index - 1].strip() if index > 0 else ""
    next_line = lines[index + 1].strip() if index < len(lines) - 1 else ""
    score = 0

    if not prev_line:
        score += settings.blank_before_bonus
    if not next_line:
        score += settings.blank_after_bonus
    if prev_line and (DIVIDER_RE.match(prev_line) or BARE_NUMBER_RE.match(prev_line)):
        score += settings.divider_before_bonus
    if ":" in line and len(line) < settings.colon_max_chars:
        score += settings.colon_bonus
    if index > 1 and not lines[index - 2].strip() and not prev_line:
        score += settings.double_blank_bonus

    return score
