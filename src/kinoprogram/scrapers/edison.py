"""Edison Filmhub scraper."""

from kinoprogram.scrapers.base import BaseScraper


class EdisonScraper(BaseScraper):
    """Scraper for Edison Filmhub (Jeruzalémská)."""

    name = "edison"
    display_name = "Edison Filmhub"
    CANDIDATE_URLS = (
        "https://www.edisonfilmhub.cz/program/",
        "https://edisonfilmhub.cz/program/",
        "https://www.edisonfilmhub.cz/program/?date={date}",
        "https://edisonfilmhub.cz/?date={date}",
    )
    HALL_SELECTORS = (".hall", ".program-hall", ".venue")
    TITLE_SELECTORS = (".title", ".film-title", ".program-title", ".event-title", "h1", "h2", "h3", "h4")
