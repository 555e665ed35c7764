"""Accumulates shows per film title and materialises the sorted program."""

from kinoprogram.scrapers.models import Listing, Show
from kinoprogram.utils.text import canonicalize_time, collapse_whitespace, czech_sort_key


class ListingAccumulator:
    """
    Mapping of film title to its shows, in insertion order.

    Owned by a single extraction run; never shared between requests.
    """

    def __init__(self) -> None:
        self._shows: dict[str, list[Show]] = {}

    def add(self, title: str | None, show: Show) -> None:
        """Record a show under a title. Empty titles and unparseable times are ignored."""
        title = collapse_whitespace(title)
        time = canonicalize_time(show.time)
        if not title or not time:
            return
        self._shows.setdefault(title, []).append(
            Show(time=time, hall=collapse_whitespace(show.hall))
        )

    def titles(self) -> list[str]:
        return list(self._shows)

    def __len__(self) -> int:
        return sum(len(shows) for shows in self._shows.values())

    def __bool__(self) -> bool:
        return bool(self._shows)

    def materialize(self) -> list[Listing]:
        """
        Build the output listings.

        Shows are sorted by time within each title (fixed-width "HH:MM" sorts
        correctly as a string), titles without shows are dropped and listings
        are sorted by title using Czech collation. Does not modify the
        accumulated data, so repeated calls give equal results.
        """
        listings: list[Listing] = []
        for title, shows in self._shows.items():
            valid = sorted((s for s in shows if s.time), key=lambda s: s.time)
            if not valid:
                continue
            listings.append(
                Listing(title=title, shows=[Show(time=s.time, hall=s.hall) for s in valid])
            )

        listings.sort(key=lambda listing: czech_sort_key(listing.title))
        return listings
