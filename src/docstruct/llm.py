"""Minimal chat-completion client for an OpenAI-compatible endpoint."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import httpx

from docstruct.config import DOCSTRUCT_LLM_API_KEY, DOCSTRUCT_LLM_API_URL
from docstruct.exceptions import MalformedResponseError, ServiceNotConfiguredError
from docstruct.http_utils import post_json_with_retries

logger = logging.getLogger(__name__)

_JSON_BLOCK_RE = re.compile(r"(\{.*\}|\[.*\])", re.DOTALL)
_THINK_RE = re.compile(r"<think>.*?</think>", re.DOTALL)


def is_configured() -> bool:
    """True when an API key for the language-model service is set."""
    return bool(DOCSTRUCT_LLM_API_KEY)


async def create_chat_completion(
    messages: list[dict[str, str]],
    *,
    model: str,
    temperature: float,
    max_tokens: int | None = None,
    json_mode: bool = False,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Send a chat completion request and return the reply text.

    Raises:
        ServiceNotConfiguredError: If no API key is configured.
        RateLimitError: If the service rate-limits the request.
        MalformedResponseError: If the reply has no message content.
        ServiceError: On other transport or HTTP failures.
    """
    if not is_configured():
        raise ServiceNotConfiguredError("No API key configured for the language-model service")

    payload: dict[str, Any] = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
        "stream": False,
    }
    if max_tokens is not None:
        payload["max_completion_tokens"] = max_tokens
    if json_mode:
        payload["response_format"] = {"type": "json_object"}

    data = await post_json_with_retries(
        DOCSTRUCT_LLM_API_URL,
        payload,
        headers={"Authorization": f"Bearer {DOCSTRUCT_LLM_API_KEY}"},
        client=client,
    )
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponseError("Completion response has no message content") from exc
    if not isinstance(content, str):
        raise MalformedResponseError("Completion message content is not text")
    return content


def extract_json(text: str) -> Any:
    """Find and parse the first JSON object or array in a model reply.

    Reasoning blocks (``<think>...</think>``) and markdown fences around the
    JSON are ignored; trailing commas are tolerated.

    Raises:
        MalformedResponseError: If no parseable JSON is found.
    """
    cleaned = _THINK_RE.sub("", text)
    match = _JSON_BLOCK_RE.search(cleaned)
    if not match:
        raise MalformedResponseError("No JSON object or array found in model reply")

    json_str = re.sub(r",\s*([\]}])", r"\1", match.group(0))
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as exc:
        logger.debug("Unparseable JSON in model reply: %s", json_str[:240])
        raise MalformedResponseError(f"Model reply is not valid JSON: {exc}") from exc
