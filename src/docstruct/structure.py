"""Heuristic document structure inference: text in, sections out."""

from __future__ import annotations

import logging

from docstruct.config import DEFAULT_HEURISTICS, HeuristicSettings
from docstruct.disambiguator import disambiguate
from docstruct.line_scorer import score_lines, select_candidates
from docstruct.postprocess import prune_sections
from docstruct.schemas import Section
from docstruct.section_builder import build_sections, document_content_section

logger = logging.getLogger(__name__)


def infer_sections(text: str, settings: HeuristicSettings = DEFAULT_HEURISTICS) -> list[Section]:
    """Infer a section outline from plain text.

    Pure and synchronous: scores every line, confirms headers, builds the
    section list and prunes stubs. Identical input always yields identical
    output, ids included.

    Args:
        text: Newline-delimited plain text, typically extracted from a PDF.
        settings: Heuristic weights and thresholds.

    Returns:
        Ordered sections; empty for empty or whitespace-only text.
    """
    if not text.strip():
        return []

    lines = text.split("\n")
    candidates = select_candidates(score_lines(lines, settings), settings)
    headers = disambiguate(candidates, settings)
    logger.debug("Confirmed %d headers from %d candidates", len(headers), len(candidates))

    sections = prune_sections(build_sections(lines, headers), min_content_chars=settings.min_content_chars)
    if not sections:
        return [document_content_section(text)]
    return sections
