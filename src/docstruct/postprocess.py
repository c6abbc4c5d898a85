"""Prune stub sections and repair child references."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from docstruct.schemas import Section

logger = logging.getLogger(__name__)


def prune_sections(sections: Sequence[Section], *, min_content_chars: int = 20) -> list[Section]:
    """Drop childless sections whose content is too short to stand alone.

    The stub test runs once, against the children each section had on the
    way in: a section survives when its trimmed content is longer than
    ``min_content_chars`` or when it has children. Child lists are then
    repaired. A parent that loses every child keeps its place as long as it
    has any content; only sections left with neither content nor children
    are removed, repeatedly, until none remain. If every section would go,
    sections with any content at all are kept instead.

    Levels, ids and ``parent`` pointers are never rewritten.
    """
    kept = _prune(sections, lambda s: len(s.content.strip()) > min_content_chars)
    if not kept and min_content_chars > 0:
        kept = _prune(sections, lambda s: bool(s.content.strip()))
    if len(kept) != len(sections):
        logger.debug("Pruned %d of %d sections", len(sections) - len(kept), len(sections))
    return kept


def _prune(sections: Sequence[Section], has_body: Callable[[Section], bool]) -> list[Section]:
    current = _repair_children([s for s in sections if has_body(s) or s.children])
    while True:
        survivors = [s for s in current if s.content.strip() or s.children]
        if len(survivors) == len(current):
            return current
        current = _repair_children(survivors)


def _repair_children(sections: list[Section]) -> list[Section]:
    surviving_ids = {s.id for s in sections}
    return [
        s.model_copy(update={"children": tuple(c for c in s.children if c in surviving_ids)})
        if any(c not in surviving_ids for c in s.children)
        else s
        for s in sections
    ]
