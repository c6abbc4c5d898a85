"""Section models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Section(BaseModel):
    """A titled span of document text linked into a forest by id.

    ``parent`` and ``children`` hold identifiers, never nested objects; any
    tree walking is up to the consumer.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(..., min_length=1)
    content: str = ""
    level: int = Field(..., ge=1)
    parent: str | None = None
    children: tuple[str, ...] = ()
