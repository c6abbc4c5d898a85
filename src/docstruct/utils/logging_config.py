"""Logging setup shared by the server and scripts."""

from __future__ import annotations

import logging
import sys

from docstruct.config import DOCSTRUCT_LOG_LEVEL

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_configured = False


class ExtraFormatter(logging.Formatter):
    """Append ``extra={...}`` fields to the message as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        if not extras:
            return message
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} | {fields}"


def configure_logging(level: str | int | None = None) -> None:
    """Install a single stderr handler on the root logger (idempotent)."""
    global _configured
    root = logging.getLogger()
    root.setLevel(level or DOCSTRUCT_LOG_LEVEL)
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
