"""Extraction strategies shared by all cinema scrapers.

Each strategy looks for screenings in a different kind of markup:

  1. AttributeStrategy: elements carrying data-program-* attributes
     (``<div class="line" data-program-date="2025-09-07 13:00:00"
     data-program-title="...">``).
  2. StructuredDataStrategy: schema.org events in JSON-LD script blocks.
  3. HeuristicStrategy: ``<time>`` and time-like elements, with the title
     taken from the surrounding block.

A scraper runs them in that order and keeps the first non-empty result.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from bs4 import BeautifulSoup, Tag

from kinoprogram.scrapers.accumulator import ListingAccumulator
from kinoprogram.scrapers.models import Listing, Show
from kinoprogram.scrapers.structured_data import (
    first_named,
    iter_json_nodes,
    load_json_ld_blocks,
    node_types,
)
from kinoprogram.utils.text import collapse_whitespace, extract_time_token

if TYPE_CHECKING:
    from kinoprogram.scrapers.base import BaseScraper

logger = logging.getLogger(__name__)

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_ONLY_RE = re.compile(r"\d{1,2}:\d{2}")

# Exact @type values; EventSeries, EventVenue and the like describe context
_SCREENING_TYPES = frozenset(
    {
        "Event",
        "ScreeningEvent",
        "TheaterEvent",
        "Movie",
        "ChildrensEvent",
        "EducationEvent",
        "MusicEvent",
        "SocialEvent",
    }
)


class ExtractionStrategy(ABC):
    """One way of finding screenings in a program page."""

    name: str = "strategy"

    def try_extract(self, soup: BeautifulSoup, date_iso: str, site: "BaseScraper") -> list[Listing]:
        """
        Run the strategy against a parsed document.

        Args:
            soup: Parsed program page
            date_iso: Requested date as "YYYY-MM-DD"
            site: Scraper whose selector configuration applies

        Returns:
            Materialised listings, empty if nothing matched
        """
        accumulator = ListingAccumulator()
        self.collect(soup, date_iso, site, accumulator)
        logger.debug(
            f"{site.name}: {self.name} collected {len(accumulator)} shows "
            f"for {len(accumulator.titles())} titles"
        )
        return accumulator.materialize()

    @abstractmethod
    def collect(
        self,
        soup: BeautifulSoup,
        date_iso: str,
        site: "BaseScraper",
        accumulator: ListingAccumulator,
    ) -> None:
        """Add every matching show to the accumulator."""


class AttributeStrategy(ExtractionStrategy):
    """Elements tagged with program date and title attributes."""

    name = "attribute"

    def collect(self, soup, date_iso, site, accumulator) -> None:
        elements = soup.find_all(attrs={site.DATE_ATTR: True, site.TITLE_ATTR: True})
        logger.debug(f"{site.name}: {len(elements)} elements with program attributes")

        # Dates look like "2025-09-07 13:00:00"; the prefix test keeps the
        # listing in the cinema's local time without any timezone handling.
        prefix = f"{date_iso} "
        for element in elements:
            value = element.get(site.DATE_ATTR) or ""
            title = element.get(site.TITLE_ATTR) or ""
            if not value or not title:
                continue
            if not value.startswith(prefix):
                continue

            hall = collapse_whitespace(element.get(site.HALL_ATTR)) or site.find_hall(element)
            accumulator.add(site.normalise_title(title), Show(time=value[11:16], hall=hall))


class StructuredDataStrategy(ExtractionStrategy):
    """schema.org Event / ScreeningEvent / Movie nodes in JSON-LD blocks."""

    name = "structured-data"

    def collect(self, soup, date_iso, site, accumulator) -> None:
        payloads = load_json_ld_blocks(soup)
        logger.debug(f"{site.name}: {len(payloads)} JSON-LD blocks")

        for payload in payloads:
            for node in iter_json_nodes(payload):
                if not self._is_screening(node):
                    continue

                start = node.get("startDate") or node.get("startTime")
                if not isinstance(start, str) or start[:10] != date_iso:
                    continue

                title = self._title(node)
                time = extract_time_token(start[10:]) or ""
                accumulator.add(site.normalise_title(title), Show(time=time, hall=self._hall(node)))

    @staticmethod
    def _is_screening(node: dict) -> bool:
        return any(t in _SCREENING_TYPES for t in node_types(node))

    @staticmethod
    def _title(node: dict) -> str:
        name = node.get("name")
        if isinstance(name, str) and name.strip():
            return name
        work = first_named(node.get("workPresented"))
        if work and isinstance(work.get("name"), str):
            return work["name"]
        return ""

    def _hall(self, node: dict) -> str:
        hall = _location_name(node.get("location"))
        if hall:
            return hall
        super_event = node.get("superEvent")
        if isinstance(super_event, list):
            super_event = super_event[0] if super_event else None
        if isinstance(super_event, dict):
            return _location_name(super_event.get("location"))
        return ""


def _location_name(location: Any) -> str:
    """Hall name from a schema.org location: its name, else its address."""
    if isinstance(location, str):
        return location
    if isinstance(location, list):
        for item in location:
            name = _location_name(item)
            if name:
                return name
        return ""
    if not isinstance(location, dict):
        return ""

    name = location.get("name")
    if isinstance(name, str) and name.strip():
        return name
    address = location.get("address")
    if isinstance(address, str):
        return address
    if isinstance(address, dict):
        street = address.get("streetAddress") or address.get("name")
        if isinstance(street, str):
            return street
    return ""


class HeuristicStrategy(ExtractionStrategy):
    """
    Last resort: time elements plus the nearest block around them.

    The machine-readable date is the element's own ``datetime``, else the
    program date attribute or ``datetime`` of an enclosing element. Elements
    with no such date cannot be filtered by date and are accepted as they are.
    """

    name = "heuristic"

    def collect(self, soup, date_iso, site, accumulator) -> None:
        selector = ", ".join(site.TIME_SELECTORS)
        elements = soup.select(selector)
        logger.debug(f"{site.name}: {len(elements)} time-like elements")

        for element in elements:
            # Wrappers such as <span class="time"><time ...></span> are handled
            # through their inner element
            if element.select_one(selector) is not None:
                continue

            machine = element.get("datetime") or ""
            time = extract_time_token(machine) or extract_time_token(element.get_text(" "))
            if not time:
                continue

            machine_date = self._machine_date(element, site)
            if machine_date and machine_date != date_iso:
                continue

            container = element.find_parent(list(site.CONTAINER_TAGS))
            if container is None:
                continue

            title = self._title(container, site)
            if not title:
                continue

            accumulator.add(title, Show(time=time, hall=site.find_hall(container)))

    @staticmethod
    def _machine_date(element: Tag, site: "BaseScraper") -> str | None:
        values = [element.get("datetime")]
        dated = element.find_parent(attrs={site.DATE_ATTR: True})
        if dated is not None:
            values.append(dated.get(site.DATE_ATTR))
        stamped = element.find_parent(attrs={"datetime": True})
        if stamped is not None:
            values.append(stamped.get("datetime"))

        for value in values:
            match = _ISO_DATE_RE.search(value or "")
            if match:
                return match.group(0)
        return None

    @staticmethod
    def _title(container: Tag, site: "BaseScraper") -> str:
        for selector in site.title_selectors():
            found = container.select_one(selector)
            if found is None:
                continue
            text = site.normalise_title(found.get_text(" "))
            if text:
                return text

        # No title element: take the first meaningful line of the block
        for line in container.get_text("\n").splitlines():
            line = collapse_whitespace(line)
            if len(line) > 3 and not _TIME_ONLY_RE.fullmatch(line):
                logger.debug(f"{site.name}: low-confidence title from block text: {line!r}")
                return site.normalise_title(line)
        return ""


DEFAULT_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    AttributeStrategy(),
    StructuredDataStrategy(),
    HeuristicStrategy(),
)
