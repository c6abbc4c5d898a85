"""Run document analysis for the API and shape the responses."""

from __future__ import annotations

import httpx

from docstruct.analysis import AnalysisOptions, analyze_document, analyze_text
from docstruct.output_formatter import format_outline
from docstruct.schemas import AnalysisResult
from docstruct.utils.logging_config import get_logger
from server.models import AnalysisStrategy, AnalyzeSuccessResponse
from server.server_config import MAX_DISPLAY_SIZE

logger = get_logger(__name__)


async def process_text(
    text: str,
    *,
    title: str | None = None,
    strategy: AnalysisStrategy = AnalysisStrategy.AUTO,
    disable_heuristic_fallback: bool = False,
    client: httpx.AsyncClient | None = None,
) -> AnalyzeSuccessResponse:
    """Analyze plain text and build the success response."""
    options = AnalysisOptions(
        strategy=strategy.value,
        disable_heuristic_fallback=disable_heuristic_fallback,
    )
    _log_request(title, len(text), strategy.value)
    try:
        result = await analyze_text(text, options=options, client=client)
    except Exception as exc:
        _log_error(title, exc)
        raise
    return _build_response(result, title=title)


async def process_upload(
    data: bytes,
    *,
    filename: str | None,
    title: str | None = None,
    strategy: AnalysisStrategy = AnalysisStrategy.AUTO,
    disable_heuristic_fallback: bool = False,
    client: httpx.AsyncClient | None = None,
) -> AnalyzeSuccessResponse:
    """Extract an uploaded document, analyze it, and build the success response."""
    options = AnalysisOptions(
        strategy=strategy.value,
        disable_heuristic_fallback=disable_heuristic_fallback,
    )
    _log_request(title or filename, len(data), strategy.value)
    try:
        text, result = await analyze_document(data, filename=filename, options=options, client=client)
    except Exception as exc:
        _log_error(title or filename, exc)
        raise
    return _build_response(result, title=title or filename, text=crop_for_display(text))


def crop_for_display(text: str) -> str:
    """Crop long extracted text, noting that it was cropped."""
    if len(text) <= MAX_DISPLAY_SIZE:
        return text
    return (
        f"(Text cropped to {int(MAX_DISPLAY_SIZE / 1_000)}k characters)\n" + text[:MAX_DISPLAY_SIZE]
    )


def _build_response(
    result: AnalysisResult,
    *,
    title: str | None,
    text: str | None = None,
) -> AnalyzeSuccessResponse:
    outline = format_outline(result, title=title)
    logger.info(
        "Analysis completed",
        extra={
            "document": title,
            "source": result.source,
            "sections": len(result.sections),
            "complete": result.complete,
            "fallback_reason": result.fallback_reason,
        },
    )
    return AnalyzeSuccessResponse(
        sections=result.sections,
        source=result.source,
        complete=result.complete,
        fallback_reason=result.fallback_reason,
        summary=outline.summary,
        sections_tree=outline.sections_tree,
        text=text,
    )


def _log_request(document: str | None, size: int, strategy: str) -> None:
    logger.info(
        "Processing analysis request",
        extra={"document": document, "size": size, "strategy": strategy},
    )


def _log_error(document: str | None, exc: Exception) -> None:
    logger.error(
        "Analysis failed",
        extra={"document": document, "error": str(exc), "error_type": type(exc).__name__},
    )
