"""Health check endpoint."""

from fastapi import APIRouter

from kinoprogram.scrapers import supported_cinemas

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str | int]:
    """
    Health check endpoint.

    Reports the number of supported cinemas without contacting any of their
    websites.

    Returns:
        Status message and supported cinema count
    """
    return {"status": "ok", "cinemas": len(supported_cinemas())}
