"""FastAPI application."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from docstruct.config import DOCSTRUCT_LLM_TIMEOUT_S, DOCSTRUCT_USER_AGENT
from docstruct.llm import is_configured
from docstruct.utils.logging_config import get_logger
from server.routers import documents_router, questions_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Share one HTTP client across requests to the language-model service."""
    async with httpx.AsyncClient(
        timeout=DOCSTRUCT_LLM_TIMEOUT_S,
        headers={"User-Agent": DOCSTRUCT_USER_AGENT},
    ) as client:
        app.state.http_client = client
        logger.info("Server started", extra={"llm_configured": is_configured()})
        yield
    app.state.http_client = None


app = FastAPI(title="docstruct", lifespan=lifespan)
app.include_router(documents_router)
app.include_router(questions_router)


@app.get("/health")
async def health_check() -> dict[str, object]:
    """Report liveness and whether the structuring service is configured."""
    return {"status": "healthy", "llm_configured": is_configured()}
