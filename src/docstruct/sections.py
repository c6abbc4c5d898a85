"""Helpers for walking flat section records."""

from __future__ import annotations

from typing import Iterable, Iterator

from docstruct.schemas import Section


def top_level_sections(sections: Iterable[Section]) -> list[Section]:
    """Sections without a parent, in document order."""
    return [section for section in sections if section.parent is None]


def child_sections(sections: Iterable[Section], parent_id: str) -> list[Section]:
    """Direct children of ``parent_id``, in document order."""
    by_id = {section.id: section for section in sections}
    parent = by_id.get(parent_id)
    if parent is None:
        return []
    return [by_id[child] for child in parent.children if child in by_id]


def walk_sections(sections: list[Section]) -> Iterator[tuple[Section, int]]:
    """Depth-first walk yielding ``(section, depth)`` from every root."""
    by_id = {section.id: section for section in sections}

    def _walk(section: Section, depth: int) -> Iterator[tuple[Section, int]]:
        yield section, depth
        for child in section.children:
            if child in by_id:
                yield from _walk(by_id[child], depth + 1)

    for root in top_level_sections(sections):
        yield from _walk(root, 0)


def forest_errors(sections: list[Section]) -> list[str]:
    """Describe every violated link invariant; an empty list means valid.

    Checks that ids are unique, that every child id resolves to a section
    pointing back at its owner, and that parent chains end without cycles.
    """
    errors: list[str] = []
    by_id: dict[str, Section] = {}
    for section in sections:
        if section.id in by_id:
            errors.append(f"duplicate id {section.id!r}")
        by_id[section.id] = section

    for section in sections:
        for child_id in section.children:
            child = by_id.get(child_id)
            if child is None:
                errors.append(f"{section.id!r} lists missing child {child_id!r}")
            elif child.parent != section.id:
                errors.append(f"{child_id!r} does not point back to parent {section.id!r}")

        seen = {section.id}
        parent_id = section.parent
        while parent_id is not None and parent_id in by_id:
            if parent_id in seen:
                errors.append(f"cycle through {section.id!r}")
                break
            seen.add(parent_id)
            parent_id = by_id[parent_id].parent

    return errors
