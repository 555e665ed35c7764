"""Pydantic schemas for API responses."""

from kinoprogram.schemas.cinema import CinemaResponse
from kinoprogram.schemas.program import ErrorResponse, ListingResponse, ShowResponse

__all__ = [
    "CinemaResponse",
    "ErrorResponse",
    "ListingResponse",
    "ShowResponse",
]
