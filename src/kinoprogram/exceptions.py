"""Errors returned to API clients as JSON bodies."""

from typing import Any


class ProgramError(Exception):
    """Base class for errors rendered as ``{"error": ..., **context}``."""

    status_code = 500
    message = "server error"

    def __init__(self, message: str | None = None, **context: Any) -> None:
        self.message = message or self.message
        self.context = context
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.context}


class InputError(ProgramError):
    """Missing or invalid query parameters."""

    status_code = 400
    message = "missing cinema or date"


class UnsupportedSite(ProgramError):
    """Cinema identifier with no scraper."""

    status_code = 501
    message = "cinema not supported"


class UpstreamUnavailable(ProgramError):
    """Every candidate URL failed or returned an unrecognisable page."""

    status_code = 502
    message = "could not load cinema page"


class ExtractionException(ProgramError):
    """Unexpected failure while parsing a page that was fetched fine."""

    status_code = 500
    message = "server error"
