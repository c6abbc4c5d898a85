"""Document extraction and structure endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, UploadFile, status
from fastapi.responses import JSONResponse

from docstruct.exceptions import DocstructError, InputTooLargeError
from docstruct.extraction import extract_document_text
from docstruct.llm_structure import request_chunk_structure
from server.form_types import BoolForm, OptStrForm, StrategyForm, UploadForm
from server.models import (
    AnalysisStrategy,
    AnalyzeRequest,
    ChunkStructureRequest,
    ChunkStructureResponse,
    ExtractResponse,
)
from server.processor import crop_for_display, process_text, process_upload
from server.routers_utils import COMMON_RESPONSES, error_response
from server.server_config import MAX_UPLOAD_SIZE

router = APIRouter()


async def _read_upload(file: UploadFile) -> bytes:
    data = await file.read()
    if len(data) > MAX_UPLOAD_SIZE:
        raise InputTooLargeError(
            f"Upload is {len(data)} bytes; the limit is {MAX_UPLOAD_SIZE} bytes"
        )
    return data


@router.post("/api/extract-document", response_model=ExtractResponse, responses=COMMON_RESPONSES)
async def extract_document(file: UploadForm) -> ExtractResponse | JSONResponse:
    """Extract plain text from an uploaded PDF.

    **Returns**

    - **ExtractResponse**: The newline-delimited text and its length
    - **422**: The file is not a readable PDF
    """
    try:
        data = await _read_upload(file)
        text = await extract_document_text(data, file.filename)
    except DocstructError as exc:
        return error_response(exc)
    return ExtractResponse(text=crop_for_display(text), characters=len(text))


@router.post(
    "/api/analyze-structure",
    response_model=ChunkStructureResponse,
    responses=COMMON_RESPONSES,
)
async def analyze_structure(request: Request, chunk: ChunkStructureRequest) -> ChunkStructureResponse | JSONResponse:
    """Run one chunk of text through the structuring service.

    The client drives chunking; the response holds the raw
    ``{title, content, level}`` triples for the chunk. Rate limiting maps to
    **429** with a ``Retry-After`` header; other failures to **500** with an
    empty ``sections`` list.
    """
    try:
        sections = await request_chunk_structure(
            chunk.text,
            is_first_chunk=chunk.is_first_chunk,
            is_last_chunk=chunk.is_last_chunk,
            chunk_index=chunk.chunk_index,
            client=getattr(request.app.state, "http_client", None),
        )
    except DocstructError as exc:
        return error_response(exc, with_sections=True)
    return ChunkStructureResponse(sections=sections)


@router.post("/api/analyze", responses=COMMON_RESPONSES)
async def analyze(request: Request, analyze_request: AnalyzeRequest) -> JSONResponse:
    """Infer the section structure of plain document text."""
    try:
        response = await process_text(
            analyze_request.text,
            title=analyze_request.title,
            strategy=analyze_request.strategy,
            disable_heuristic_fallback=analyze_request.disable_heuristic_fallback,
            client=getattr(request.app.state, "http_client", None),
        )
    except DocstructError as exc:
        return error_response(exc, with_sections=True)
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))


@router.post("/api/documents", responses=COMMON_RESPONSES)
async def analyze_upload(
    request: Request,
    file: UploadForm,
    title: OptStrForm = None,
    strategy: StrategyForm = "auto",
    disable_heuristic_fallback: BoolForm = False,
) -> JSONResponse:
    """Upload a PDF, extract its text, and infer its section structure."""
    try:
        data = await _read_upload(file)
        response = await process_upload(
            data,
            filename=file.filename,
            title=title,
            strategy=AnalysisStrategy(strategy),
            disable_heuristic_fallback=disable_heuristic_fallback,
            client=getattr(request.app.state, "http_client", None),
        )
    except DocstructError as exc:
        return error_response(exc, with_sections=True)
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))
