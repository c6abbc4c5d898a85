"""docstruct: infer section outlines from plain document text."""

from docstruct.analysis import AnalysisOptions, analyze_document, analyze_text
from docstruct.config import HeuristicSettings
from docstruct.exceptions import (
    DocstructError,
    ExtractionError,
    InputTooLargeError,
    MalformedResponseError,
    RateLimitError,
    ServiceError,
    ServiceNotConfiguredError,
)
from docstruct.schemas import AnalysisResult, QuizQuestion, Section
from docstruct.structure import infer_sections

__all__ = [
    "AnalysisOptions",
    "AnalysisResult",
    "DocstructError",
    "ExtractionError",
    "HeuristicSettings",
    "InputTooLargeError",
    "MalformedResponseError",
    "QuizQuestion",
    "RateLimitError",
    "Section",
    "ServiceError",
    "ServiceNotConfiguredError",
    "analyze_document",
    "analyze_text",
    "infer_sections",
]
