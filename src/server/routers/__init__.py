"""API routers."""

from server.routers.documents import router as documents_router
from server.routers.questions import router as questions_router

__all__ = ["documents_router", "questions_router"]
