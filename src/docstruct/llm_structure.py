"""Structure inference through the language-model service."""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import ValidationError

from docstruct.config import DOCSTRUCT_CHUNK_SIZE, DOCSTRUCT_STRUCTURE_MODEL
from docstruct.exceptions import MalformedResponseError
from docstruct.hierarchy import HierarchyLinker
from docstruct.llm import create_chat_completion, extract_json
from docstruct.patterns import normalize_title
from docstruct.postprocess import prune_sections
from docstruct.schemas import DocumentStructure, Section, StructuredSection

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = "You are a document structure analyzer. Be concise and accurate."
_PROMPT_TEMPLATE = """{context}

Analyze this text and identify its structure (chapters, sections, subsections).
- Look for "Chapter X", numbered sections, ALL CAPS headings, etc.
- Level 1 = main chapters, Level 2 = subsections, Level 3+ = deeper (maximum 5)
- Include content between headings
- Reply with a JSON object of the form {{"sections": [{{"title": str, "content": str, "level": int}}]}}

TEXT:
{text}
"""


def split_into_chunks(text: str, chunk_size: int = DOCSTRUCT_CHUNK_SIZE) -> list[str]:
    """Split text into chunks of at most ``chunk_size`` characters.

    Chunks end on a line break when one exists in the second half of the
    window; otherwise the text is cut at the hard limit. Concatenating the
    chunks gives back the original text.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    chunks: list[str] = []
    start = 0
    while start < len(text):
        end = min(start + chunk_size, len(text))
        if end < len(text):
            newline = text.rfind("\n", start + chunk_size // 2, end)
            if newline != -1:
                end = newline + 1
        chunks.append(text[start:end])
        start = end
    return chunks


async def request_chunk_structure(
    text: str,
    *,
    is_first_chunk: bool,
    is_last_chunk: bool,
    chunk_index: int,
    client: httpx.AsyncClient | None = None,
) -> list[StructuredSection]:
    """Ask the service for the ``{title, content, level}`` triples of one chunk.

    Raises:
        MalformedResponseError: If the reply does not match the expected schema.
        ServiceError: For transport, configuration or rate-limit failures.
    """
    context = (
        "This is the beginning of the document."
        if is_first_chunk
        else f"This is chunk {chunk_index} of the document."
    )
    if is_last_chunk and not is_first_chunk:
        context += " It is the last chunk."

    reply = await create_chat_completion(
        [
            {"role": "system", "content": _SYSTEM_PROMPT},
            {"role": "user", "content": _PROMPT_TEMPLATE.format(context=context, text=text)},
        ],
        model=DOCSTRUCT_STRUCTURE_MODEL,
        temperature=0.2,
        json_mode=True,
        client=client,
    )
    payload = extract_json(reply)
    if isinstance(payload, list):
        payload = {"sections": payload}
    try:
        return DocumentStructure.model_validate(payload).sections
    except ValidationError as exc:
        raise MalformedResponseError(f"Chunk {chunk_index} structure is invalid: {exc}") from exc


async def structure_with_llm(
    text: str,
    *,
    chunk_size: int = DOCSTRUCT_CHUNK_SIZE,
    client: httpx.AsyncClient | None = None,
    cancel_event: asyncio.Event | None = None,
) -> tuple[list[Section], bool]:
    """Structure a whole document chunk by chunk.

    Chunks are requested one after another. Sections from every chunk share
    one id space (``section-<chunk>-<index>``) and one running ancestor
    stack, so a chunk's top sections can attach to a parent from an earlier
    chunk. Setting ``cancel_event`` stops before the next request; sections
    gathered so far are kept.

    Returns:
        ``(sections, complete)`` where ``complete`` is False after a cancellation.

    Raises:
        MalformedResponseError: If the service yields no usable section.
        ServiceError: If any chunk request fails.
    """
    chunks = split_into_chunks(text, chunk_size)
    linker = HierarchyLinker()
    complete = True

    for index, chunk in enumerate(chunks):
        if cancel_event is not None and cancel_event.is_set():
            logger.info("Structure analysis cancelled after %d of %d chunks", index, len(chunks))
            complete = False
            break

        logger.debug("Requesting structure for chunk %d/%d", index + 1, len(chunks))
        triples = await request_chunk_structure(
            chunk,
            is_first_chunk=index == 0,
            is_last_chunk=index == len(chunks) - 1,
            chunk_index=index,
            client=client,
        )
        for position, triple in enumerate(triples):
            linker.open(
                section_id=f"section-{index}-{position}",
                title=normalize_title(triple.title) or triple.title,
                level=triple.level,
                content=triple.content,
            )

    sections = prune_sections(linker.sections(), min_content_chars=0)
    if not sections and complete:
        raise MalformedResponseError("Structuring service returned no sections")
    return sections, complete
