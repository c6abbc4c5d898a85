"""Local configuration for docstruct."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LLM_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_STRUCTURE_MODEL = "meta-llama/llama-4-scout-17b-16e-instruct"
DEFAULT_QUIZ_MODEL = "deepseek-r1-distill-llama-70b"
DEFAULT_LLM_TIMEOUT_S = 60.0
DEFAULT_LLM_MAX_RETRIES = 2
DEFAULT_LLM_BACKOFF_S = 0.5
DEFAULT_CHUNK_SIZE = 25_000
DEFAULT_MAX_INPUT_CHARS = 2_000_000
DEFAULT_QUIZ_CONTENT_CHARS = 15_000
DEFAULT_QUIZ_NUM_QUESTIONS = 10
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_USER_AGENT = "docstruct/0.1"

DOCSTRUCT_LLM_API_URL = os.getenv("DOCSTRUCT_LLM_API_URL", DEFAULT_LLM_API_URL)
# An empty key means the language-model collaborator is disabled.
DOCSTRUCT_LLM_API_KEY = os.getenv("DOCSTRUCT_LLM_API_KEY", os.getenv("GROQ_API_KEY", ""))
DOCSTRUCT_STRUCTURE_MODEL = os.getenv("DOCSTRUCT_STRUCTURE_MODEL", DEFAULT_STRUCTURE_MODEL)
DOCSTRUCT_QUIZ_MODEL = os.getenv("DOCSTRUCT_QUIZ_MODEL", DEFAULT_QUIZ_MODEL)
DOCSTRUCT_LLM_TIMEOUT_S = float(os.getenv("DOCSTRUCT_LLM_TIMEOUT_S", str(DEFAULT_LLM_TIMEOUT_S)))
DOCSTRUCT_LLM_MAX_RETRIES = int(os.getenv("DOCSTRUCT_LLM_MAX_RETRIES", str(DEFAULT_LLM_MAX_RETRIES)))
DOCSTRUCT_LLM_BACKOFF_S = float(os.getenv("DOCSTRUCT_LLM_BACKOFF_S", str(DEFAULT_LLM_BACKOFF_S)))
DOCSTRUCT_CHUNK_SIZE = int(os.getenv("DOCSTRUCT_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE)))
DOCSTRUCT_MAX_INPUT_CHARS = int(os.getenv("DOCSTRUCT_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
DOCSTRUCT_QUIZ_CONTENT_CHARS = int(os.getenv("DOCSTRUCT_QUIZ_CONTENT_CHARS", str(DEFAULT_QUIZ_CONTENT_CHARS)))
DOCSTRUCT_QUIZ_NUM_QUESTIONS = int(os.getenv("DOCSTRUCT_QUIZ_NUM_QUESTIONS", str(DEFAULT_QUIZ_NUM_QUESTIONS)))
DOCSTRUCT_LOG_LEVEL = os.getenv("DOCSTRUCT_LOG_LEVEL", DEFAULT_LOG_LEVEL)
DOCSTRUCT_USER_AGENT = os.getenv("DOCSTRUCT_USER_AGENT", DEFAULT_USER_AGENT)


@dataclass(frozen=True)
class HeuristicSettings:
    """Weights and thresholds for heuristic structure inference.

    The values are empirical tuning constants. Every stage of the pipeline
    takes an instance so that callers and tests can move a single knob.

    Attributes:
        short_line_chars: Lines shorter than this get ``short_line_bonus``.
        medium_line_chars: Lines shorter than this get ``medium_line_bonus``.
        long_line_chars: Lines shorter than this get ``long_line_bonus``.
        very_long_line_chars: Lines longer than this get ``very_long_line_penalty``.
        overlong_line_chars: Lines longer than this get ``overlong_line_penalty``.
        chapter_bonus: "Chapter 3", "Unit 2: Waves" and friends.
        numbered_bonus: Outline numbers such as "1.2.3 Title".
        keyword_bonus: Well-known section names ("Introduction", ...).
        roman_bonus: "IV. Results".
        letter_bonus: "A. Scope".
        all_caps_bonus: Short all-caps lines.
        capitalized_bonus: Capitalized lines that are not mid-sentence.
        veto_score: Score forced onto bare page numbers.
        sentence_penalty: Unstructured lines that end like a sentence.
        candidate_threshold: Scores must be strictly greater to survive.
        frequency_min_word_chars: Words must be longer than this to count.
        frequency_cap: Maximum boost contributed by one repeated word.
        adjacency_max_distance: Line distance within which candidates compete.
        adjacency_max_level_gap: Level difference within which they compete.
        adjacency_penalty: Taken off the weaker of two competing candidates.
        min_content_chars: Childless sections at or below this are stubs.
    """

    short_line_chars: int = 30
    short_line_bonus: int = 8
    medium_line_chars: int = 60
    medium_line_bonus: int = 5
    long_line_chars: int = 100
    long_line_bonus: int = 2
    very_long_line_chars: int = 200
    very_long_line_penalty: int = 8
    overlong_line_chars: int = 150
    overlong_line_penalty: int = 5

    chapter_bonus: int = 15
    chapter_title_bonus: int = 5
    numbered_bonus: int = 12
    numbered_title_bonus: int = 3
    numbered_title_max_chars: int = 100
    keyword_bonus: int = 10
    keyword_title_bonus: int = 2
    roman_bonus: int = 8
    letter_bonus: int = 7
    all_caps_bonus: int = 8
    all_caps_max_chars: int = 60
    capitalized_bonus: int = 4

    blank_before_bonus: int = 3
    blank_after_bonus: int = 1
    divider_before_bonus: int = 5
    double_blank_bonus: int = 4
    colon_bonus: int = 3
    colon_max_chars: int = 80

    veto_score: int = -10
    lowercase_penalty: int = 5
    mid_sentence_penalty: int = 5
    mid_sentence_min_chars: int = 60
    trailing_period_penalty: int = 3
    trailing_period_min_chars: int = 50
    sentence_penalty: int = 5

    candidate_threshold: int = 6
    frequency_min_word_chars: int = 3
    frequency_cap: int = 3
    adjacency_max_distance: int = 2
    adjacency_max_level_gap: int = 1
    adjacency_penalty: int = 5

    min_content_chars: int = 20


DEFAULT_HEURISTICS = HeuristicSettings()
