"""Kino Aero scraper."""

from kinoprogram.scrapers.base import BaseScraper


class AeroScraper(BaseScraper):
    """Scraper for Kino Aero (Žižkov)."""

    name = "aero"
    display_name = "Kino Aero"
    CANDIDATE_URLS = (
        "https://www.kinoaero.cz/cz/program/",
        "https://kinoaero.cz/program/",
        "https://www.kinoaero.cz/cz/program/?date={date}",
    )
    HALL_SELECTORS = (".hall", ".program-hall", ".place")
