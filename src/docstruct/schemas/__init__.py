"""Shared schemas for docstruct."""

from docstruct.schemas.analysis import AnalysisResult, OutlineResult
from docstruct.schemas.quiz import QuizQuestion, QuizScore
from docstruct.schemas.sections import Section
from docstruct.schemas.structure import DocumentStructure, StructuredSection

__all__ = [
    "AnalysisResult",
    "DocumentStructure",
    "OutlineResult",
    "QuizQuestion",
    "QuizScore",
    "Section",
    "StructuredSection",
]
