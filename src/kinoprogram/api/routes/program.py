"""Program API endpoint."""

import logging
import re
from datetime import date

from fastapi import APIRouter, Depends, Query, Response

from kinoprogram.config import settings
from kinoprogram.exceptions import (
    ExtractionException,
    InputError,
    UnsupportedSite,
    UpstreamUnavailable,
)
from kinoprogram.schemas.program import ErrorResponse, ListingResponse
from kinoprogram.scrapers import supported_cinemas
from kinoprogram.scrapers.models import ExtractionFailure, FailureKind, Unsupported
from kinoprogram.services.program import ProgramService

logger = logging.getLogger(__name__)
router = APIRouter()

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def get_program_service() -> ProgramService:
    return ProgramService()


def _validate_date(value: str) -> str:
    if not _ISO_DATE_RE.match(value):
        raise InputError("invalid date", date=value)
    try:
        date.fromisoformat(value)
    except ValueError:
        raise InputError("invalid date", date=value)
    return value


@router.get(
    "/program",
    response_model=list[ListingResponse],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        501: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def get_program(
    response: Response,
    cinema: str | None = Query(None, description="Cinema identifier, e.g. atlas"),
    date_param: str | None = Query(None, alias="date", description="Date (YYYY-MM-DD)"),
    service: ProgramService = Depends(get_program_service),
) -> list[dict]:
    """
    Get one cinema's program for one date.

    Films are sorted by title and shows by time. Successful responses may be
    cached at the edge for a few minutes.
    """
    cinema = (cinema or "").strip()
    date_param = (date_param or "").strip()
    if not cinema or not date_param:
        raise InputError()
    date_iso = _validate_date(date_param)

    try:
        outcome = await service.run(cinema, date_iso)
    except Exception as e:
        logger.error(f"Program request for {cinema} on {date_iso} failed: {e}", exc_info=True)
        raise ExtractionException(detail=str(e))

    if isinstance(outcome, Unsupported):
        raise UnsupportedSite(cinema=cinema, supported=supported_cinemas())

    if isinstance(outcome, ExtractionFailure):
        if outcome.kind == FailureKind.FETCH_FAILURE:
            raise UpstreamUnavailable(status=outcome.status, snippet=outcome.snippet or "")
        raise ExtractionException(detail=outcome.detail or "")

    response.headers["Cache-Control"] = settings.cache_control
    return [listing.to_dict() for listing in outcome]
