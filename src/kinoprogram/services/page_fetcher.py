"""Fetches cinema program pages, falling back through mirror URLs."""

import logging
import re

import httpx

from kinoprogram.config import settings
from kinoprogram.scrapers.models import FetchResult

logger = logging.getLogger(__name__)

# Error pages served with status 200 usually lack a proper document root
_ROOT_TAG_RE = re.compile(r"<(html|body)[\s>]", re.IGNORECASE)


def looks_like_document(text: str) -> bool:
    """Whether a response body contains a root markup tag."""
    return bool(_ROOT_TAG_RE.search(text))


class PageFetcher:
    """Client for cinema program pages."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
        snippet_length: int | None = None,
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds (uses settings if not provided)
            user_agent: User-Agent header (uses settings if not provided)
            snippet_length: Length of the body snippet kept for diagnostics
        """
        self.timeout = timeout or settings.fetch_timeout
        self.user_agent = user_agent or settings.user_agent
        self.snippet_length = snippet_length or settings.snippet_length

    async def fetch_first(self, urls: list[str]) -> FetchResult:
        """
        Fetch the first candidate URL that returns a usable page.

        URLs are tried one after another, never in parallel. A page is usable
        when the status is 2xx and the body contains an <html> or <body> tag.

        Args:
            urls: Candidate URLs in order of preference

        Returns:
            FetchResult with the page text, or with the last status and a
            short body snippet when every URL failed. Never raises.
        """
        last_status: int | None = None
        last_snippet = ""
        last_url: str | None = None

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        ) as client:
            for url in urls:
                last_url = url
                try:
                    response = await client.get(url)
                    text = response.text
                except httpx.HTTPError as e:
                    logger.warning(f"Fetching {url} failed: {e}")
                    last_status = None
                    last_snippet = str(e)[: self.snippet_length]
                    continue

                last_status = response.status_code
                last_snippet = text[: self.snippet_length]

                if response.is_success and looks_like_document(text):
                    logger.info(f"Fetched {url} ({len(text)} chars)")
                    return FetchResult(ok=True, text=text, status=last_status, url=url)

                logger.warning(
                    f"Rejected {url}: status {response.status_code}, "
                    f"document root {'found' if looks_like_document(text) else 'missing'}"
                )

        return FetchResult(ok=False, status=last_status, snippet=last_snippet, url=last_url)
