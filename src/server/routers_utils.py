"""Shared helpers for the API routers."""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from docstruct.exceptions import (
    DocstructError,
    ExtractionError,
    InputTooLargeError,
    RateLimitError,
)
from docstruct.utils.logging_config import get_logger
from server.models import ErrorResponse
from server.server_config import DEFAULT_RETRY_AFTER_S

logger = get_logger(__name__)

# The Starlette constants for 413 and 422 changed name between releases.
HTTP_413_CONTENT_TOO_LARGE = 413
HTTP_422_UNPROCESSABLE = 422

COMMON_RESPONSES: dict[int | str, dict[str, Any]] = {
    HTTP_413_CONTENT_TOO_LARGE: {"model": ErrorResponse},
    HTTP_422_UNPROCESSABLE: {"model": ErrorResponse},
    status.HTTP_429_TOO_MANY_REQUESTS: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def error_response(exc: Exception, *, with_sections: bool = False) -> JSONResponse:
    """Map a docstruct exception onto a JSON error response.

    Parameters
    ----------
    exc : Exception
        The exception raised while serving the request.
    with_sections : bool
        Include an empty ``sections`` list in the body.

    Returns
    -------
    JSONResponse
        The error body with a matching status code.

    """
    headers: dict[str, str] = {}
    message = str(exc)
    if isinstance(exc, RateLimitError):
        code = status.HTTP_429_TOO_MANY_REQUESTS
        headers["Retry-After"] = str(exc.retry_after or DEFAULT_RETRY_AFTER_S)
        message = "Rate limit exceeded. Please try again later."
    elif isinstance(exc, InputTooLargeError):
        code = HTTP_413_CONTENT_TOO_LARGE
    elif isinstance(exc, (ExtractionError, ValueError)):
        code = HTTP_422_UNPROCESSABLE
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
        if not isinstance(exc, DocstructError):
            logger.exception("Unexpected error while serving request")
            message = f"Failed to process request: {exc!s}"

    body = ErrorResponse(error=message, sections=[] if with_sections else None)
    return JSONResponse(
        status_code=code,
        content=body.model_dump(exclude_none=True),
        headers=headers or None,
    )
