"""Kino Světozor scraper."""

from kinoprogram.scrapers.base import BaseScraper


class SvetozorScraper(BaseScraper):
    """Scraper for Kino Světozor (Vodičkova)."""

    name = "svetozor"
    display_name = "Kino Světozor"
    CANDIDATE_URLS = (
        "https://www.kinosvetozor.cz/cz/program/",
        "https://kinosvetozor.cz/cz/program/",
        "https://www.kinosvetozor.cz/cz/program/?date={date}",
    )
    # Hall names appear as "Velký sál" / "Malý sál" in a .sal element
    HALL_SELECTORS = (".hall", ".program-hall", ".sal")
