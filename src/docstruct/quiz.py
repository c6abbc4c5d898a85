"""Generate and grade multiple-choice quizzes for a section."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Sequence

import httpx
from pydantic import ValidationError

from docstruct.config import (
    DOCSTRUCT_QUIZ_CONTENT_CHARS,
    DOCSTRUCT_QUIZ_MODEL,
    DOCSTRUCT_QUIZ_NUM_QUESTIONS,
)
from docstruct.exceptions import MalformedResponseError
from docstruct.llm import create_chat_completion, extract_json
from docstruct.schemas import QuizQuestion, QuizScore

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "...(content truncated)"
_ANSWER_LETTER_RE = re.compile(r"[\.\s)]")

_PROMPT_TEMPLATE = """Based on the following content from the section "{title}",
generate {count} multiple choice quiz questions with answers.

For each question:
1. Create a clear question that tests understanding
2. Provide exactly 4 options (A, B, C, D)
3. Clearly indicate which option is correct
4. Include a brief explanation of why that answer is correct

CONTENT:
{content}

Format your response as a JSON array of question objects with these properties:
- question: The question text
- options: Array of 4 possible answers (formatted as "A. option text", "B. option text", etc.)
- answer: The correct answer (just the letter, e.g., "A")
- explanation: Brief explanation of the correct answer

IMPORTANT: Return ONLY valid JSON. Do not include markdown formatting, code blocks, or any other text before or after the JSON.

Ensure the questions cover different aspects of the content and vary in difficulty."""


def truncate_content(content: str, limit: int = DOCSTRUCT_QUIZ_CONTENT_CHARS) -> str:
    """Cut section content to the character budget, marking any cut."""
    if len(content) <= limit:
        return content
    return f"{content[:limit]} {TRUNCATION_MARKER}"


def build_quiz_prompt(title: str, content: str, *, num_questions: int = DOCSTRUCT_QUIZ_NUM_QUESTIONS) -> str:
    return _PROMPT_TEMPLATE.format(title=title, count=num_questions, content=truncate_content(content))


async def generate_questions(
    title: str,
    content: str,
    *,
    num_questions: int = DOCSTRUCT_QUIZ_NUM_QUESTIONS,
    client: httpx.AsyncClient | None = None,
) -> list[QuizQuestion]:
    """Ask the language-model service for quiz questions about a section.

    Raises:
        ValueError: If the section has no content to ask about.
        MalformedResponseError: If the reply holds no usable question.
        ServiceError: For transport, configuration or rate-limit failures.
    """
    if not content.strip():
        raise ValueError("No content available to generate questions from.")

    reply = await create_chat_completion(
        [{"role": "user", "content": build_quiz_prompt(title, content, num_questions=num_questions)}],
        model=DOCSTRUCT_QUIZ_MODEL,
        temperature=0.6,
        max_tokens=2048,
        client=client,
    )
    payload = extract_json(reply)
    if isinstance(payload, dict):
        payload = payload.get("questions", [])
    if not isinstance(payload, list):
        raise MalformedResponseError("Quiz reply is not a list of questions")

    questions = parse_questions(payload)
    if not questions:
        raise MalformedResponseError("Quiz reply contains no usable questions")
    return questions


def parse_questions(items: Sequence[Any]) -> list[QuizQuestion]:
    """Validate raw question objects, dropping the ones that do not fit."""
    questions: list[QuizQuestion] = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        if not (item.get("question") and item.get("options") and item.get("answer")):
            continue
        try:
            questions.append(
                QuizQuestion(
                    question=str(item["question"]).strip(),
                    options=[str(option).strip() for option in item["options"]],
                    answer=normalize_answer(str(item["answer"])),
                    explanation=str(item.get("explanation") or "").strip(),
                )
            )
        except ValidationError as exc:
            logger.debug("Dropping invalid quiz question: %s", exc)
    return questions


def normalize_answer(answer: str) -> str:
    """Reduce "b. Newton" or "B) ..." to its leading letter, upper-cased."""
    return _ANSWER_LETTER_RE.split(answer.strip(), maxsplit=1)[0].upper()


def grade_quiz(questions: Sequence[QuizQuestion], answers: Mapping[int, str]) -> QuizScore:
    """Count answers matching the correct letter; keys are question positions."""
    correct = sum(
        1
        for index, question in enumerate(questions)
        if normalize_answer(answers.get(index, "")) == question.answer
    )
    return QuizScore(correct=correct, total=len(questions))
