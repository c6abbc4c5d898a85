"""Analysis pipeline: document text -> ordered sections."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Literal

import httpx

from docstruct.config import (
    DOCSTRUCT_CHUNK_SIZE,
    DOCSTRUCT_MAX_INPUT_CHARS,
    HeuristicSettings,
)
from docstruct.exceptions import InputTooLargeError, ServiceError
from docstruct.extraction import extract_document_text
from docstruct.llm import is_configured
from docstruct.llm_structure import structure_with_llm
from docstruct.schemas import AnalysisResult
from docstruct.structure import infer_sections

logger = logging.getLogger(__name__)


@dataclass
class AnalysisOptions:
    """Options for document analysis.

    Attributes:
        strategy: "heuristic" skips the language-model service, "llm" always
            tries it first, "auto" tries it only when an API key is configured.
        disable_heuristic_fallback: If True, structuring service errors are
            raised instead of falling back to the heuristic pipeline.
        chunk_size: Characters per structuring request.
        max_input_chars: Texts longer than this are rejected.
        heuristics: Weights and thresholds for the heuristic pipeline.
    """

    strategy: Literal["auto", "heuristic", "llm"] = "auto"
    disable_heuristic_fallback: bool = False
    chunk_size: int = DOCSTRUCT_CHUNK_SIZE
    max_input_chars: int = DOCSTRUCT_MAX_INPUT_CHARS
    heuristics: HeuristicSettings = field(default_factory=HeuristicSettings)


async def analyze_text(
    text: str,
    *,
    options: AnalysisOptions | None = None,
    client: httpx.AsyncClient | None = None,
    cancel_event: asyncio.Event | None = None,
) -> AnalysisResult:
    """Infer the section structure of a document's text.

    Tries the structuring service first when the strategy calls for it and
    falls back to the heuristic pipeline over the full text if the service
    fails for any reason.

    Args:
        text: Plain text of the whole document.
        options: Processing options. Uses defaults if None.
        client: Optional shared httpx.AsyncClient for service calls.
        cancel_event: Set it to stop structuring between chunks.

    Returns:
        The analysis result; empty sections for blank text.

    Raises:
        InputTooLargeError: If the text exceeds ``max_input_chars``.
        ServiceError: If the service fails and fallback is disabled.
    """
    opts = options or AnalysisOptions()

    if not text.strip():
        return AnalysisResult(sections=[], source="heuristic")
    if len(text) > opts.max_input_chars:
        raise InputTooLargeError(
            f"Document text has {len(text)} characters; the limit is {opts.max_input_chars}"
        )

    use_llm = opts.strategy == "llm" or (opts.strategy == "auto" and is_configured())
    fallback_reason: str | None = None

    if use_llm:
        try:
            sections, complete = await structure_with_llm(
                text, chunk_size=opts.chunk_size, client=client, cancel_event=cancel_event
            )
            return AnalysisResult(sections=sections, source="llm", complete=complete)
        except ServiceError as exc:
            if opts.disable_heuristic_fallback:
                raise
            fallback_reason = f"{type(exc).__name__}: {exc}"
            logger.warning("Structuring service failed, using heuristic analysis: %s", fallback_reason)

    # CPU-bound single pass; keep it off the event loop
    sections = await asyncio.to_thread(infer_sections, text, opts.heuristics)
    return AnalysisResult(sections=sections, source="heuristic", fallback_reason=fallback_reason)


async def analyze_document(
    data: bytes,
    *,
    filename: str | None = None,
    options: AnalysisOptions | None = None,
    client: httpx.AsyncClient | None = None,
    cancel_event: asyncio.Event | None = None,
) -> tuple[str, AnalysisResult]:
    """Extract a document's text and analyze its structure.

    Returns:
        Tuple of (extracted text, analysis result).

    Raises:
        ExtractionError: If no text can be extracted; there is no fallback.
    """
    text = await extract_document_text(data, filename)
    result = await analyze_text(text, options=options, client=client, cancel_event=cancel_event)
    return text, result
