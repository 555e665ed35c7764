"""Cinema API endpoints."""

from fastapi import APIRouter

from kinoprogram.schemas.cinema import CinemaResponse
from kinoprogram.scrapers import get_scraper, supported_cinemas

router = APIRouter()


@router.get("/cinemas", response_model=list[CinemaResponse])
async def get_cinemas() -> list[CinemaResponse]:
    """
    Get list of supported cinemas.

    Returns:
        Cinemas sorted by identifier, each with its candidate program URLs
        (templates may contain a {date} placeholder)
    """
    cinemas: list[CinemaResponse] = []
    for cinema_id in supported_cinemas():
        scraper = get_scraper(cinema_id)
        cinemas.append(
            CinemaResponse(
                id=cinema_id,
                name=scraper.display_name,
                urls=list(scraper.CANDIDATE_URLS),
            )
        )
    return cinemas
