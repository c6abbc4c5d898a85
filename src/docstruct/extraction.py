"""Extract plain text from uploaded documents."""

from __future__ import annotations

import asyncio
import logging

import pymupdf

from docstruct.exceptions import ExtractionError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf",)


def extract_pdf_text(data: bytes) -> str:
    """Return the newline-delimited text of a PDF, page by page.

    Raises:
        ExtractionError: If the bytes are empty or not a readable PDF.
    """
    if not data:
        raise ExtractionError("The uploaded document is empty")

    try:
        doc = pymupdf.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        raise ExtractionError(f"Unable to open PDF: {exc}") from exc

    try:
        if doc.needs_pass:
            raise ExtractionError("The PDF is password protected")
        pages = [page.get_text("text") for page in doc]
    finally:
        doc.close()

    logger.debug("Extracted text from %d pages", len(pages))
    return "\n".join(page.rstrip("\n") for page in pages)


async def extract_document_text(data: bytes, filename: str | None = None) -> str:
    """Extract text from an uploaded file off the event loop.

    Raises:
        ExtractionError: If the file type is unsupported or extraction fails.
    """
    if filename and not filename.lower().endswith(SUPPORTED_EXTENSIONS):
        raise ExtractionError("Unsupported file format. Only PDF files are supported.")
    return await asyncio.to_thread(extract_pdf_text, data)
