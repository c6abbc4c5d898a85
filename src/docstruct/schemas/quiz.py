"""Quiz models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class QuizQuestion(BaseModel):
    """A multiple-choice question about one section."""

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=4, max_length=4)
    answer: str = Field(..., pattern=r"^[A-D]$")
    explanation: str = ""


class QuizScore(BaseModel):
    """Result of grading a set of answers."""

    correct: int
    total: int
