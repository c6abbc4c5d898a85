"""Payload models for the structuring service."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class StructuredSection(BaseModel):
    """One ``{title, content, level}`` triple returned for a chunk."""

    title: str = Field(..., min_length=1)
    content: str = ""
    level: int = Field(..., ge=1, le=5)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Reject titles that are only whitespace."""
        v = v.strip()
        if not v:
            err = "title cannot be blank"
            raise ValueError(err)
        return v

    @field_validator("content", mode="before")
    @classmethod
    def default_content(cls, v: str | None) -> str:
        """Treat a missing or null content as empty text."""
        return v or ""


class DocumentStructure(BaseModel):
    """Structured sections for one chunk of text."""

    sections: list[StructuredSection] = Field(default_factory=list)
