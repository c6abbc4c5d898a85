"""Tests for logging helpers."""

from __future__ import annotations

import logging

from docstruct.utils.logging_config import ExtraFormatter, get_logger


def test_extra_fields_are_rendered() -> None:
    record = logging.makeLogRecord({"msg": "Analysis completed", "sections": 3, "source": "llm"})
    assert ExtraFormatter("%(message)s").format(record) == "Analysis completed | sections=3 source='llm'"


def test_plain_record_is_unchanged() -> None:
    record = logging.makeLogRecord({"msg": "hello %s", "args": ("world",)})
    assert ExtraFormatter("%(message)s").format(record) == "hello world"


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("docstruct.test").name == "docstruct.test"
