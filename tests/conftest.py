"""Test setup for docstruct."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def chapter_text() -> str:
    """Two short chapters separated by a blank line."""
    return "Chapter 1\nBody text.\n\nChapter 2\nMore text."


@pytest.fixture
def numbered_text() -> str:
    """A numbered outline with one nested subsection."""
    return (
        "1. Introduction\n"
        "This introduction explains the purpose of the work in detail.\n"
        "\n"
        "1.1 Background\n"
        "Background material covers prior results and their limits.\n"
        "\n"
        "2. Methods\n"
        "The methods section describes the experimental setup used."
    )
