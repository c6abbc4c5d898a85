"""Resolve competing header candidates into a confirmed header index."""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import NamedTuple, Sequence

from docstruct.config import DEFAULT_HEURISTICS, HeuristicSettings
from docstruct.line_scorer import HeaderCandidate


class HeaderInfo(NamedTuple):
    """Final score and level of a confirmed header line."""

    score: int
    level: int


def disambiguate(
    candidates: Sequence[HeaderCandidate], settings: HeuristicSettings = DEFAULT_HEURISTICS
) -> dict[int, HeaderInfo]:
    """Confirm header lines among the retained candidates.

    Applies the vocabulary frequency boost, then adjacency suppression, then
    re-filters on the candidate threshold.

    Args:
        candidates: Candidates that already passed the first threshold,
            in document order.
        settings: Heuristic weights.

    Returns:
        Mapping from line index to ``HeaderInfo``, ordered by line index.
    """
    boosted = apply_frequency_boost(candidates, settings)
    suppressed = suppress_adjacent(boosted, settings)
    return {
        c.index: HeaderInfo(score=c.score, level=c.level)
        for c in suppressed
        if c.score > settings.candidate_threshold
    }


def apply_frequency_boost(
    candidates: Sequence[HeaderCandidate], settings: HeuristicSettings = DEFAULT_HEURISTICS
) -> list[HeaderCandidate]:
    """Reward candidates whose words recur across other candidates."""
    frequency = Counter(
        word
        for candidate in candidates
        for word in _words(candidate.text)
        if len(word) > settings.frequency_min_word_chars
    )

    boosted: list[HeaderCandidate] = []
    for candidate in candidates:
        bonus = sum(
            min(frequency[word], settings.frequency_cap)
            for word in _words(candidate.text)
            if len(word) > settings.frequency_min_word_chars and frequency[word] > 1
        )
        boosted.append(replace(candidate, score=candidate.score + bonus))
    return boosted


def suppress_adjacent(
    candidates: Sequence[HeaderCandidate], settings: HeuristicSettings = DEFAULT_HEURISTICS
) -> list[HeaderCandidate]:
    """Penalize the weaker of two neighbouring candidates at similar levels.

    Neighbours are consecutive entries of the candidate list whose line
    indices are at most ``adjacency_max_distance`` apart. Penalties carry
    forward, so a candidate already weakened by its predecessor competes
    with its successor at the reduced score. On a tie the later line loses.
    """
    result = [replace(c) for c in candidates]
    for prev, curr in zip(result, result[1:]):
        distance = curr.index - prev.index
        if not 1 <= distance <= settings.adjacency_max_distance:
            continue
        if abs(prev.level - curr.level) > settings.adjacency_max_level_gap:
            continue
        if prev.score < curr.score:
            prev.score -= settings.adjacency_penalty
        else:
            curr.score -= settings.adjacency_penalty
    return result


def _words(text: str) -> list[str]:
    return text.lower().split()
