"""Quiz generation endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from docstruct.exceptions import DocstructError
from docstruct.quiz import generate_questions
from server.models import QuestionsRequest, QuestionsResponse
from server.routers_utils import COMMON_RESPONSES, error_response

router = APIRouter()


@router.post("/api/generate-questions", response_model=QuestionsResponse, responses=COMMON_RESPONSES)
async def api_generate_questions(request: Request, questions_request: QuestionsRequest) -> QuestionsResponse | JSONResponse:
    """Generate multiple-choice questions about one section.

    **Returns**

    - **QuestionsResponse**: Questions with four options, the answer letter and an explanation
    - **422**: The section has no content
    - **429**: The language-model service is rate limiting, see ``Retry-After``
    """
    try:
        questions = await generate_questions(
            questions_request.title,
            questions_request.content,
            num_questions=questions_request.num_questions,
            client=getattr(request.app.state, "http_client", None),
        )
    except (DocstructError, ValueError) as exc:
        return error_response(exc)
    return QuestionsResponse(questions=questions)
