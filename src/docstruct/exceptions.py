"""Custom exceptions for docstruct."""

from __future__ import annotations


class DocstructError(Exception):
    """Base exception for docstruct operations."""


class ExtractionError(DocstructError):
    """Error while extracting text from a document."""


class InputTooLargeError(DocstructError):
    """Input text exceeds the configured size cap."""


class ServiceError(DocstructError):
    """Error talking to the language-model service."""


class ServiceNotConfiguredError(ServiceError):
    """No API key is configured for the language-model service."""


class RateLimitError(ServiceError):
    """Rate limited by the language-model service."""

    def __init__(self, message: str, *, retry_after: int | None = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class MalformedResponseError(ServiceError):
    """The language-model service returned a payload we cannot use."""
