"""HTTP utilities for calling the language-model service with retry logic."""

from __future__ import annotations

import asyncio
from typing import Any, Final

import httpx

from docstruct.config import (
    DOCSTRUCT_LLM_BACKOFF_S,
    DOCSTRUCT_LLM_MAX_RETRIES,
    DOCSTRUCT_LLM_TIMEOUT_S,
    DOCSTRUCT_USER_AGENT,
)
from docstruct.exceptions import MalformedResponseError, RateLimitError, ServiceError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({500, 502, 503, 504})


async def post_json_with_retries(
    url: str,
    payload: dict[str, Any],
    *,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """POST a JSON payload and decode the JSON reply, retrying transient failures.

    A 429 is not retried: the service asked us to back off, so the caller
    gets a ``RateLimitError`` and decides what to do instead.

    Args:
        url: The endpoint to call.
        payload: JSON-serializable request body.
        headers: Extra request headers (authorization, typically).
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Returns:
        The decoded JSON object.

    Raises:
        RateLimitError: If the service answers 429.
        MalformedResponseError: If the reply body is not a JSON object.
        ServiceError: If the request fails after all retries or with a
            non-retryable status.
    """
    timeout = httpx.Timeout(DOCSTRUCT_LLM_TIMEOUT_S)
    request_headers = {"User-Agent": DOCSTRUCT_USER_AGENT, **(headers or {})}
    last_exc: Exception | None = None

    async def do_post(http_client: httpx.AsyncClient) -> dict[str, Any]:
        nonlocal last_exc

        for attempt in range(DOCSTRUCT_LLM_MAX_RETRIES + 1):
            try:
                response = await http_client.post(url, json=payload, headers=request_headers)

                if response.status_code == 429:
                    raise RateLimitError(
                        f"Rate limit reached at {url}",
                        retry_after=_parse_retry_after(response.headers.get("Retry-After")),
                    )

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = ServiceError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return _decode_json(response)
            except httpx.HTTPStatusError as exc:
                raise ServiceError(f"HTTP {exc.response.status_code} from {url}") from exc
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < DOCSTRUCT_LLM_MAX_RETRIES:
                backoff = DOCSTRUCT_LLM_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        raise ServiceError(f"Failed to call {url}: {last_exc}")

    if client is not None:
        return await do_post(client)

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as new_client:
        return await do_post(new_client)


def _decode_json(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise MalformedResponseError(f"Response from {response.url} is not JSON") from exc
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Response from {response.url} is not a JSON object")
    return data


def _parse_retry_after(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
