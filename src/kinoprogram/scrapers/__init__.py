"""Scraper registry mapping cinema identifiers to scraper classes."""

from dataclasses import dataclass
from typing import Type

from kinoprogram.scrapers.aero import AeroScraper
from kinoprogram.scrapers.atlas import AtlasScraper
from kinoprogram.scrapers.base import BaseScraper
from kinoprogram.scrapers.edison import EdisonScraper
from kinoprogram.scrapers.lucerna import LucernaScraper
from kinoprogram.scrapers.svetozor import SvetozorScraper

# Registry mapping cinema identifiers to scraper classes
SCRAPER_REGISTRY: dict[str, Type[BaseScraper]] = {
    "atlas": AtlasScraper,
    "svetozor": SvetozorScraper,
    "lucerna": LucernaScraper,
    "aero": AeroScraper,
    "edison": EdisonScraper,
}


@dataclass
class ResolvedSite:
    """Candidate URLs and scraper for one cinema and date."""

    candidate_urls: list[str]
    scraper: BaseScraper


def get_scraper(cinema_id: str) -> BaseScraper | None:
    """
    Get a scraper instance by cinema identifier.

    Args:
        cinema_id: The cinema identifier (e.g., "atlas", "aero")

    Returns:
        Scraper instance or None if the cinema is not supported
    """
    scraper_class = SCRAPER_REGISTRY.get(cinema_id.strip().lower())
    if scraper_class:
        return scraper_class()
    return None


def resolve_site(cinema_id: str, date_iso: str) -> ResolvedSite | None:
    """Resolve a cinema identifier to its candidate URLs and scraper."""
    scraper = get_scraper(cinema_id)
    if scraper is None:
        return None
    return ResolvedSite(candidate_urls=scraper.candidate_urls(date_iso), scraper=scraper)


def supported_cinemas() -> list[str]:
    return sorted(SCRAPER_REGISTRY)


__all__ = [
    "SCRAPER_REGISTRY",
    "ResolvedSite",
    "get_scraper",
    "resolve_site",
    "supported_cinemas",
    "BaseScraper",
    "AeroScraper",
    "AtlasScraper",
    "EdisonScraper",
    "LucernaScraper",
    "SvetozorScraper",
]
