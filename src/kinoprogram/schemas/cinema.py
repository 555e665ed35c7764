"""Pydantic schemas for cinema data."""

from pydantic import BaseModel


class CinemaResponse(BaseModel):
    """Supported cinema and the program URLs tried for it."""

    id: str
    name: str
    urls: list[str]
