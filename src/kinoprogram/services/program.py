"""Program service: fetches a cinema's page and extracts the day's listings."""

import logging
from typing import Union

from kinoprogram.scrapers import resolve_site
from kinoprogram.scrapers.models import (
    ExtractionFailure,
    FailureKind,
    Listing,
    Unsupported,
)
from kinoprogram.services.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

ProgramOutcome = Union[list[Listing], ExtractionFailure, Unsupported]


class ProgramService:
    """Runs one program request from cinema identifier to listings."""

    def __init__(self, fetcher: PageFetcher | None = None) -> None:
        self.fetcher = fetcher or PageFetcher()

    async def run(self, cinema_id: str, date_iso: str) -> ProgramOutcome:
        """
        Get the program of one cinema for one date.

        Args:
            cinema_id: Cinema identifier (e.g., "atlas")
            date_iso: Date as "YYYY-MM-DD"

        Returns:
            Listings sorted by title, Unsupported for an unknown cinema, or
            ExtractionFailure when the page could not be fetched or parsed
        """
        site = resolve_site(cinema_id, date_iso)
        if site is None:
            logger.info(f"Unsupported cinema requested: {cinema_id!r}")
            return Unsupported(cinema_id=cinema_id)

        scraper = site.scraper
        result = await self.fetcher.fetch_first(site.candidate_urls)
        if not result.ok:
            logger.warning(
                f"{scraper.name}: all {len(site.candidate_urls)} candidate URLs failed "
                f"(last status {result.status})"
            )
            return ExtractionFailure(
                kind=FailureKind.FETCH_FAILURE,
                status=result.status,
                snippet=result.snippet,
            )

        try:
            listings = scraper.extract(result.text, date_iso)
        except Exception as e:
            logger.error(f"{scraper.name}: extraction error: {e}", exc_info=True)
            return ExtractionFailure(kind=FailureKind.SITE_EXCEPTION, detail=str(e))

        logger.info(f"{scraper.name}: {len(listings)} films on {date_iso}")
        return listings
