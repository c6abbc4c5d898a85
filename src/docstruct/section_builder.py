"""Partition document lines into sections around confirmed header lines."""

from __future__ import annotations

from typing import Mapping, Sequence

from docstruct.disambiguator import HeaderInfo
from docstruct.hierarchy import HierarchyLinker
from docstruct.patterns import derive_title
from docstruct.schemas import Section

INTRODUCTION_ID = "section-intro"
INTRODUCTION_TITLE = "Introduction"
DOCUMENT_CONTENT_ID = "section-content"
DOCUMENT_CONTENT_TITLE = "Document Content"


def build_sections(lines: Sequence[str], headers: Mapping[int, HeaderInfo]) -> list[Section]:
    """Walk the lines once and build the raw section list.

    Body lines go to the deepest open section, or to the preamble before the
    first header. A non-empty preamble becomes a leading "Introduction"
    section. With no headers at all the whole text becomes one "Document
    Content" section.

    Args:
        lines: The document split on newlines.
        headers: Confirmed header lines keyed by line index.

    Returns:
        Sections in document order, before any pruning.
    """
    text = "\n".join(lines)
    if not headers:
        return [document_content_section(text)] if text.strip() else []

    linker = HierarchyLinker()
    preamble: list[str] = []
    count = 0

    for index, raw in enumerate(lines):
        line = raw.strip()
        current = linker.current

        if not line:
            if current is not None:
                current.append("\n")
            elif preamble:
                preamble.append("\n")
            continue

        info = headers.get(index)
        if info is None:
            if current is not None:
                current.append(line + "\n")
            else:
                preamble.append(line + "\n")
            continue

        count += 1
        linker.open(section_id=f"section-{count}", title=derive_title(line), level=info.level)

    sections = linker.sections()
    intro = "".join(preamble).strip()
    if intro:
        sections.insert(0, Section(id=INTRODUCTION_ID, title=INTRODUCTION_TITLE, content=intro, level=1))
    return sections


def document_content_section(text: str) -> Section:
    """Catch-all section wrapping the whole text."""
    return Section(id=DOCUMENT_CONTENT_ID, title=DOCUMENT_CONTENT_TITLE, content=text.strip(), level=1)
