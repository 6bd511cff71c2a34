"""Exceptions raised inside the scraper and mapped to pipeline outcomes."""

from __future__ import annotations


class FetchError(Exception):
    """An upstream fetch failed; ``status`` mirrors the HTTP status code."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class ExtractionError(Exception):
    """No usable article body could be extracted from a document."""
