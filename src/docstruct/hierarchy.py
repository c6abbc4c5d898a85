"""Level-based parent/child linking with a running ancestor stack."""

from __future__ import annotations

from dataclasses import dataclass, field

from docstruct.schemas import Section


@dataclass
class SectionDraft:
    """Mutable section record used while a document is being walked."""

    id: str
    title: str
    level: int
    parent: str | None = None
    parts: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)

    def append(self, text: str) -> None:
        self.parts.append(text)

    def freeze(self) -> Section:
        return Section(
            id=self.id,
            title=self.title,
            content="".join(self.parts).strip(),
            level=self.level,
            parent=self.parent,
            children=tuple(self.children),
        )


class HierarchyLinker:
    """Link sections to the nearest preceding section of a lower level.

    The ancestor stack holds the open sections, shallowest first. It is not
    reset between calls to ``open``, so one linker can stitch sections that
    arrive in several batches (for example one per text chunk).
    """

    def __init__(self) -> None:
        self._stack: list[SectionDraft] = []
        self._drafts: list[SectionDraft] = []

    @property
    def current(self) -> SectionDraft | None:
        """The deepest open section, if any."""
        return self._stack[-1] if self._stack else None

    def open(self, *, section_id: str, title: str, level: int, content: str = "") -> SectionDraft:
        """Open a new section and link it under the right ancestor."""
        while self._stack and self._stack[-1].level >= level:
            self._stack.pop()

        draft = SectionDraft(id=section_id, title=title, level=level)
        if content:
            draft.append(content)
        if self._stack:
            parent = self._stack[-1]
            draft.parent = parent.id
            parent.children.append(draft.id)

        self._stack.append(draft)
        self._drafts.append(draft)
        return draft

    def sections(self) -> list[Section]:
        """Freeze every opened section, in the order they were opened."""
        return [draft.freeze() for draft in self._drafts]
