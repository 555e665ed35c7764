"""Data models for program extraction."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class Show:
    """
    A single screening of a film.

    time is always canonical "HH:MM" once it has passed through the
    accumulator. hall is an empty string when the auditorium is unknown.
    """

    time: str
    hall: str = ""


@dataclass
class Listing:
    """One film title with its shows for the requested date, sorted by time."""

    title: str
    shows: list[Show] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "shows": [{"time": s.time, "hall": s.hall} for s in self.shows],
        }


class FailureKind(str, Enum):
    FETCH_FAILURE = "fetch_failure"
    SITE_EXCEPTION = "site_exception"


@dataclass
class ExtractionFailure:
    """Why a program could not be produced for a cinema."""

    kind: FailureKind
    status: int | None = None
    snippet: str | None = None
    detail: str | None = None


@dataclass
class Unsupported:
    """The requested cinema has no extractor."""

    cinema_id: str


@dataclass
class FetchResult:
    """Outcome of trying a list of candidate URLs."""

    ok: bool
    text: str = ""
    status: int | None = None
    snippet: str = ""
    url: str | None = None
