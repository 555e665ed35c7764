"""Tests for the program service."""

from unittest.mock import AsyncMock, patch

from kinoprogram.scrapers.models import (
    ExtractionFailure,
    FailureKind,
    FetchResult,
    Listing,
    Show,
    Unsupported,
)
from kinoprogram.services.program import ProgramService

PAGE = """
<html><body>
  <div class="line" data-program-date="2025-09-07 14:00:00" data-program-title="Vlny"></div>
  <div class="line" data-program-date="2025-09-07 09:30:00" data-program-title="Vlny"></div>
</body></html>
"""


def make_fetcher(result: FetchResult) -> AsyncMock:
    fetcher = AsyncMock()
    fetcher.fetch_first = AsyncMock(return_value=result)
    return fetcher


async def test_unknown_cinema_is_unsupported() -> None:
    fetcher = make_fetcher(FetchResult(ok=True, text=PAGE))
    outcome = await ProgramService(fetcher).run("unknown", "2025-09-07")

    assert outcome == Unsupported(cinema_id="unknown")
    fetcher.fetch_first.assert_not_called()


async def test_returns_sorted_listings() -> None:
    fetcher = make_fetcher(FetchResult(ok=True, text=PAGE, status=200))
    outcome = await ProgramService(fetcher).run("atlas", "2025-09-07")

    assert outcome == [
        Listing(title="Vlny", shows=[Show(time="09:30"), Show(time="14:00")])
    ]


async def test_fetches_candidate_urls_for_date() -> None:
    fetcher = make_fetcher(FetchResult(ok=True, text=PAGE))
    await ProgramService(fetcher).run("atlas", "2025-09-07")

    urls = fetcher.fetch_first.await_args.args[0]
    assert urls[0] == "https://www.kinoatlaspraha.cz/program/"
    assert urls[-1].endswith("?date=2025-09-07")


async def test_fetch_failure() -> None:
    fetcher = make_fetcher(FetchResult(ok=False, status=503, snippet="Service Unavailable"))
    outcome = await ProgramService(fetcher).run("aero", "2025-09-07")

    assert outcome == ExtractionFailure(
        kind=FailureKind.FETCH_FAILURE, status=503, snippet="Service Unavailable"
    )


async def test_extraction_exception_becomes_site_failure() -> None:
    fetcher = make_fetcher(FetchResult(ok=True, text=PAGE))
    with patch(
        "kinoprogram.scrapers.base.BaseScraper.extract", side_effect=ValueError("bad markup")
    ):
        outcome = await ProgramService(fetcher).run("atlas", "2025-09-07")

    assert outcome == ExtractionFailure(kind=FailureKind.SITE_EXCEPTION, detail="bad markup")


async def test_empty_program_is_success() -> None:
    fetcher = make_fetcher(FetchResult(ok=True, text="<html><body></body></html>"))
    outcome = await ProgramService(fetcher).run("lucerna", "2025-09-07")

    assert outcome == []
