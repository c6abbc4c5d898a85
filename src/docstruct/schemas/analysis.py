"""Analysis output models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from docstruct.schemas.sections import Section


class AnalysisResult(BaseModel):
    """Sections inferred for one document.

    Attributes:
        sections: Final ordered section records.
        source: Which strategy produced the sections.
        complete: False when a cancellation cut the analysis short.
        fallback_reason: Why the structuring service was abandoned, if it was.
    """

    sections: list[Section] = Field(default_factory=list)
    source: Literal["heuristic", "llm"]
    complete: bool = True
    fallback_reason: str | None = None


class OutlineResult(BaseModel):
    """Rendered outline output."""

    summary: str
    sections_tree: str
    content: str
