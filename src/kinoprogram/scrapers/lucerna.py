"""Kino Lucerna scraper."""

from kinoprogram.scrapers.base import BaseScraper


class LucernaScraper(BaseScraper):
    """Scraper for Kino Lucerna."""

    name = "lucerna"
    display_name = "Kino Lucerna"
    CANDIDATE_URLS = (
        "https://www.kinolucerna.cz/cz/program/",
        "https://kinolucerna.cz/program/",
        "https://www.kinolucerna.cz/cz/program/?date={date}",
    )
    HALL_SELECTORS = (".hall", ".program-hall", ".hall-name")
