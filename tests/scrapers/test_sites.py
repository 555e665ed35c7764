"""Tests for the per-cinema selector configuration."""

import pytest

from kinoprogram.scrapers import (
    AeroScraper,
    AtlasScraper,
    EdisonScraper,
    LucernaScraper,
    SvetozorScraper,
)
from kinoprogram.scrapers.base import BaseScraper
from kinoprogram.scrapers.models import Listing, Show

DATE = "2025-09-07"


def line(hall_markup: str) -> str:
    return (
        '<html><body><div class="line" data-program-date="2025-09-07 18:00:00"'
        f' data-program-title="Vlny">{hall_markup}</div></body></html>'
    )


# ---------------------------------------------------------------------------
# Hall sub-elements
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("scraper", "hall_markup"),
    [
        (SvetozorScraper(), '<span class="sal">Velký sál</span>'),
        (LucernaScraper(), '<span class="hall-name">Velký sál</span>'),
        (AeroScraper(), '<span class="place">Velký sál</span>'),
        (EdisonScraper(), '<span class="venue">Velký sál</span>'),
    ],
    ids=["svetozor", "lucerna", "aero", "edison"],
)
def test_site_hall_selector(scraper: BaseScraper, hall_markup: str) -> None:
    html = line(hall_markup)

    assert scraper.extract(html, DATE) == [
        Listing(title="Vlny", shows=[Show(time="18:00", hall="Velký sál")])
    ]
    # Sites without the override leave the hall unknown
    assert AtlasScraper().extract(html, DATE)[0].shows[0].hall == ""


def test_default_hall_selectors_apply_to_every_site() -> None:
    html = line('<span class="hall">Kavárna</span>')
    for scraper in (SvetozorScraper(), LucernaScraper(), AeroScraper(), EdisonScraper()):
        assert scraper.extract(html, DATE)[0].shows[0].hall == "Kavárna"


# ---------------------------------------------------------------------------
# Edison event titles
# ---------------------------------------------------------------------------


EDISON_EVENT = """
<html><body>
  <article>
    <p>Premiéra s delegací</p>
    <p class="event-title">Vlny</p>
    <time datetime="2025-09-07T19:30">19:30</time>
    <span class="venue">Studio</span>
  </article>
</body></html>
"""


def test_edison_event_title_selector() -> None:
    assert EdisonScraper().extract(EDISON_EVENT, DATE) == [
        Listing(title="Vlny", shows=[Show(time="19:30", hall="Studio")])
    ]


def test_event_title_needs_edison_override() -> None:
    # Without .event-title the block's first text line is taken instead
    listings = AtlasScraper().extract(EDISON_EVENT, DATE)
    assert [listing.title for listing in listings] == ["Premiéra s delegací"]
