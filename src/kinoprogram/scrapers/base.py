"""Base scraper shared by all cinema program scrapers."""

import logging
from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from kinoprogram.scrapers.models import Listing
from kinoprogram.scrapers.strategies import DEFAULT_STRATEGIES, ExtractionStrategy
from kinoprogram.utils.text import collapse_whitespace

logger = logging.getLogger(__name__)


class BaseScraper:
    """
    Base class for all cinema scrapers.

    A cinema scraper is mostly configuration: its candidate URLs and the
    attribute names and selectors its site uses. Extraction itself runs the
    shared strategy ladder (attribute, structured data, heuristic) and keeps
    the first strategy that finds anything.

    Subclasses must set ``name``, ``display_name`` and ``CANDIDATE_URLS``.
    URL templates may contain ``{date}`` which is replaced by the requested
    ISO date.
    """

    name: str = ""
    display_name: str = ""
    CANDIDATE_URLS: Sequence[str] = ()

    # Attribute strategy
    DATE_ATTR = "data-program-date"
    TITLE_ATTR = "data-program-title"
    HALL_ATTR = "data-program-hall"

    # Hall sub-elements, first non-empty match wins
    HALL_SELECTORS: Sequence[str] = (".hall", ".program-hall")

    # Heuristic strategy
    TIME_SELECTORS: Sequence[str] = ("time", ".time", "[datetime]")
    CONTAINER_TAGS: Sequence[str] = ("article", "li", "tr", "section", "div")
    TITLE_SELECTORS: Sequence[str] = (
        ".title",
        ".film-title",
        ".program-title",
        "h1",
        "h2",
        "h3",
        "h4",
    )
    FILM_PATHS: Sequence[str] = ("/film/", "/filmy/")

    strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES

    def candidate_urls(self, date_iso: str) -> list[str]:
        """Candidate program URLs in order of preference."""
        return [url.format(date=date_iso) for url in self.CANDIDATE_URLS]

    def title_selectors(self) -> list[str]:
        """Title selectors for the heuristic strategy, film detail links last."""
        links = [f'a[href*="{path}"]' for path in self.FILM_PATHS]
        return [*self.TITLE_SELECTORS, *links]

    def find_hall(self, element: Tag) -> str:
        """Text of the first non-empty hall sub-element, or an empty string."""
        for selector in self.HALL_SELECTORS:
            found = element.select_one(selector)
            if found is None:
                continue
            text = collapse_whitespace(found.get_text(" "))
            if text:
                return text
        return ""

    def normalise_title(self, title: str) -> str:
        """
        Normalize a film title as it appears on the cinema website.

        Args:
            title: Raw film title

        Returns:
            Title with whitespace collapsed
        """
        return collapse_whitespace(title)

    def extract(self, html: str, date_iso: str) -> list[Listing]:
        """
        Extract the program for one date from a fetched page.

        Args:
            html: Program page markup
            date_iso: Requested date as "YYYY-MM-DD"

        Returns:
            Listings sorted by title, empty if no strategy found anything

        Raises:
            Does not catch parsing errors; the caller turns them into a
            site failure.
        """
        soup = BeautifulSoup(html, "html.parser")

        for strategy in self.strategies:
            listings = strategy.try_extract(soup, date_iso, self)
            if listings:
                logger.info(
                    f"{self.name}: {strategy.name} strategy found {len(listings)} films for {date_iso}"
                )
                return listings
            logger.debug(f"{self.name}: {strategy.name} strategy found nothing")

        logger.info(f"{self.name}: no showings found for {date_iso}")
        return []
