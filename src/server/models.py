"""Pydantic request and response models for the API."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docstruct.config import DOCSTRUCT_QUIZ_NUM_QUESTIONS
from docstruct.schemas import QuizQuestion, Section, StructuredSection


class AnalysisStrategy(str, Enum):
    """Which structuring strategy to run."""

    AUTO = "auto"
    HEURISTIC = "heuristic"
    LLM = "llm"


class ChunkStructureRequest(BaseModel):
    """Request model for the /api/analyze-structure endpoint.

    Attributes
    ----------
    text : str
        One chunk of document text.
    is_first_chunk : bool
        Whether the chunk opens the document.
    is_last_chunk : bool
        Whether the chunk closes the document.
    chunk_index : int
        Zero-based position of the chunk.

    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Chunk of document text")
    is_first_chunk: bool = Field(default=True, alias="isFirstChunk")
    is_last_chunk: bool = Field(default=True, alias="isLastChunk")
    chunk_index: int = Field(default=0, ge=0, alias="chunkIndex")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate that ``text`` is not blank."""
        if not v.strip():
            err = "No text provided"
            raise ValueError(err)
        return v


class ChunkStructureResponse(BaseModel):
    """Sections the structuring service found in one chunk."""

    sections: list[StructuredSection]


class AnalyzeRequest(BaseModel):
    """Request model for the /api/analyze endpoint.

    Attributes
    ----------
    text : str
        Full plain text of the document.
    title : str | None
        Optional document title for the summary.
    strategy : AnalysisStrategy
        Structuring strategy.
    disable_heuristic_fallback : bool
        Surface service errors instead of falling back to heuristics.

    """

    text: str = Field(..., description="Plain document text")
    title: str | None = Field(default=None, description="Document title")
    strategy: AnalysisStrategy = Field(default=AnalysisStrategy.AUTO)
    disable_heuristic_fallback: bool = Field(default=False)


class AnalyzeSuccessResponse(BaseModel):
    """Success response model for the analysis endpoints.

    Attributes
    ----------
    sections : list[Section]
        Ordered section records, linked by id.
    source : str
        Strategy that produced the sections.
    complete : bool
        False when the analysis was cut short.
    fallback_reason : str | None
        Why the structuring service was abandoned.
    summary : str
        Outline summary including the token estimate.
    sections_tree : str
        Indented section tree.
    text : str | None
        Extracted text, for upload endpoints; cropped for display.

    """

    sections: list[Section]
    source: str
    complete: bool = True
    fallback_reason: str | None = None
    summary: str
    sections_tree: str
    text: str | None = None


class ExtractResponse(BaseModel):
    """Extracted text of an uploaded document."""

    text: str
    characters: int


class QuestionsRequest(BaseModel):
    """Request model for the /api/generate-questions endpoint."""

    title: str = Field(..., min_length=1)
    content: str = Field(default="")
    num_questions: int = Field(default=DOCSTRUCT_QUIZ_NUM_QUESTIONS, ge=1, le=25)


class QuestionsResponse(BaseModel):
    """Generated quiz questions."""

    questions: list[QuizQuestion]


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    sections : list | None
        Empty list on structure endpoints so clients can render nothing.

    """

    error: str = Field(..., description="Error message")
    sections: list[Section] | None = Field(default=None)

