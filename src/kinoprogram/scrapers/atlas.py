"""Kino Atlas scraper."""

from kinoprogram.scrapers.base import BaseScraper


class AtlasScraper(BaseScraper):
    """
    Scraper for Kino Atlas (Praha 8).

    The program page lists every screening as ``div.line`` carrying
    ``data-program-date`` ("2025-09-07 13:00:00") and ``data-program-title``,
    so the attribute strategy normally matches.
    """

    name = "atlas"
    display_name = "Kino Atlas"
    CANDIDATE_URLS = (
        "https://www.kinoatlaspraha.cz/program/",
        "https://kinoatlaspraha.cz/program/",
        "https://www.kinoatlaspraha.cz/program/?date={date}",
    )
