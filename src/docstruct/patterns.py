"""Heading patterns and title derivation for plain-text documents."""

from __future__ import annotations

import re
from dataclasses import dataclass

CHAPTER_RE = re.compile(
    r"^\s*(chapter|unit|part|section|module|lesson)\s+(\d+(?:\.\d+)*|[ivxlcdm]+)\b[.:)\s-]*(.*)$",
    re.IGNORECASE,
)
NUMBERED_RE = re.compile(r"^\s*(\d+(?:\.\d+)*)[.:)\s-]+(.+)$")
KEYWORD_RE = re.compile(
    r"^\s*(introduction|conclusion|abstract|summary|appendix|glossary|references|"
    r"bibliography|index|acknowledgements|preface|foreword|overview|discussion|"
    r"results|methodology|findings|analysis|review|table of contents|contents)\b[\s:.-]*(.*)$",
    re.IGNORECASE,
)
ROMAN_RE = re.compile(
    r"^\s*(?=[ivxlcdm])(m{0,4}(?:cm|cd|d?c{0,3})(?:xc|xl|l?x{0,3})(?:ix|iv|v?i{0,3}))[.:)-]\s*(.+)$",
    re.IGNORECASE,
)
LETTER_RE = re.compile(r"^\s*([A-Z])[.:)-]\s*(.+)$")
ALL_CAPS_RE = re.compile(r"^[A-Z][A-Z\s\d.,;:'\"\-]+$")
CAPITALIZED_RE = re.compile(r"^[A-Z][a-z]")
MID_SENTENCE_RE = re.compile(r"[.,]\s+[a-z]")
SENTENCE_BREAK_RE = re.compile(r"[.]\s+[a-z]")
DIVIDER_RE = re.compile(r"^[-_*=]{3,}$")
BARE_NUMBER_RE = re.compile(r"^\d+$")
PAGE_NUMBER_RE = re.compile(r"^page\s+\d+$", re.IGNORECASE)
LOWERCASE_START_RE = re.compile(r"^[a-z]")
TRAILING_PUNCT_RE = re.compile(r"[.:;,]+$")


@dataclass(frozen=True)
class HeadingMatches:
    """Structural pattern matches for one line; any of them may be None."""

    chapter: re.Match[str] | None
    numbered: re.Match[str] | None
    keyword: re.Match[str] | None
    roman: re.Match[str] | None
    letter: re.Match[str] | None

    @property
    def structural(self) -> bool:
        return any((self.chapter, self.numbered, self.keyword, self.roman, self.letter))


def match_heading(line: str) -> HeadingMatches:
    """Run every structural heading pattern against a stripped line."""
    return HeadingMatches(
        chapter=CHAPTER_RE.match(line),
        numbered=NUMBERED_RE.match(line),
        keyword=KEYWORD_RE.match(line),
        roman=ROMAN_RE.match(line),
        letter=LETTER_RE.match(line),
    )


def is_page_marker(line: str) -> bool:
    """True for bare page numbers such as "42" or "Page 42"."""
    return bool(BARE_NUMBER_RE.match(line) or PAGE_NUMBER_RE.match(line))


def derive_title(line: str) -> str:
    """Turn a heading line into a display title.

    The first matching pattern wins, in the order chapter, numbered, keyword,
    roman, letter. Trailing punctuation is stripped; a line that strips to
    nothing keeps its raw text.
    """
    matches = match_heading(line)
    title = line
    if matches.chapter:
        word, number, rest = matches.chapter.groups()
        word = _capitalize(word.lower())
        title = f"{word} {number}: {rest.strip()}" if rest.strip() else f"{word} {number}"
    elif matches.numbered:
        number, rest = matches.numbered.groups()
        title = rest.strip() or f"Section {number}"
    elif matches.keyword:
        keyword, rest = matches.keyword.groups()
        keyword = _capitalize(keyword)
        title = f"{keyword}: {rest.strip()}" if rest.strip() else keyword
    elif matches.roman:
        title = matches.roman.group(2).strip()
    elif matches.letter:
        title = matches.letter.group(2).strip()

    return normalize_title(title) or line.strip()


def normalize_title(title: str) -> str:
    """Strip whitespace and trailing punctuation from a title."""
    return TRAILING_PUNCT_RE.sub("", title.strip()).strip()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]
