"""Pydantic schemas for program data."""

from pydantic import BaseModel, ConfigDict


class ShowResponse(BaseModel):
    """Individual show time response."""

    model_config = ConfigDict(from_attributes=True)

    time: str
    hall: str = ""


class ListingResponse(BaseModel):
    """Film title with its shows for the requested date."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    shows: list[ShowResponse]


class ErrorResponse(BaseModel):
    """Error body. Extra context fields (status, snippet, detail, ...) are kept."""

    model_config = ConfigDict(extra="allow")

    error: str
