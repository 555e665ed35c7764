"""Tests for the program page fetcher."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from kinoprogram.services.page_fetcher import PageFetcher, looks_like_document

PAGE = "<!DOCTYPE html><html><body><div class='line'></div></body></html>"


def make_response(status_code: int, text: str) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.is_success = 200 <= status_code < 300
    return response


def make_client(get: AsyncMock) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.get = get
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


class TestLooksLikeDocument:
    def test_html_tag(self) -> None:
        assert looks_like_document('<HTML lang="cs">')

    def test_body_tag(self) -> None:
        assert looks_like_document("<body>")

    def test_plain_text(self) -> None:
        assert not looks_like_document("Not found")

    def test_similar_tag_names_do_not_count(self) -> None:
        assert not looks_like_document("<bodyguard>")


class TestFetchFirst:
    async def test_returns_first_successful_page(self) -> None:
        get = AsyncMock(return_value=make_response(200, PAGE))
        with patch("httpx.AsyncClient", return_value=make_client(get)):
            result = await PageFetcher().fetch_first(["https://a.cz/", "https://b.cz/"])

        assert result.ok
        assert result.text == PAGE
        assert result.url == "https://a.cz/"
        get.assert_awaited_once_with("https://a.cz/")

    async def test_falls_back_to_mirror(self) -> None:
        get = AsyncMock(side_effect=[make_response(404, "Not found"), make_response(200, PAGE)])
        with patch("httpx.AsyncClient", return_value=make_client(get)):
            result = await PageFetcher().fetch_first(["https://a.cz/", "https://b.cz/"])

        assert result.ok
        assert result.url == "https://b.cz/"
        assert [c.args[0] for c in get.await_args_list] == ["https://a.cz/", "https://b.cz/"]

    async def test_rejects_soft_404(self) -> None:
        get = AsyncMock(side_effect=[make_response(200, "Stránka nenalezena"), make_response(200, PAGE)])
        with patch("httpx.AsyncClient", return_value=make_client(get)):
            result = await PageFetcher().fetch_first(["https://a.cz/", "https://b.cz/"])

        assert result.ok
        assert result.url == "https://b.cz/"

    async def test_reports_last_status_and_snippet(self) -> None:
        get = AsyncMock(
            side_effect=[make_response(500, "boom"), make_response(503, "x" * 500)]
        )
        with patch("httpx.AsyncClient", return_value=make_client(get)):
            result = await PageFetcher().fetch_first(["https://a.cz/", "https://b.cz/"])

        assert not result.ok
        assert result.status == 503
        assert result.snippet == "x" * 200

    async def test_transport_error_does_not_raise(self) -> None:
        get = AsyncMock(side_effect=httpx.ConnectError("Connection refused"))
        with patch("httpx.AsyncClient", return_value=make_client(get)):
            result = await PageFetcher().fetch_first(["https://a.cz/"])

        assert not result.ok
        assert result.status is None
        assert "Connection refused" in result.snippet

    async def test_transport_error_then_success(self) -> None:
        get = AsyncMock(side_effect=[httpx.ConnectError("down"), make_response(200, PAGE)])
        with patch("httpx.AsyncClient", return_value=make_client(get)):
            result = await PageFetcher().fetch_first(["https://a.cz/", "https://b.cz/"])

        assert result.ok

    async def test_sends_user_agent(self) -> None:
        get = AsyncMock(return_value=make_response(200, PAGE))
        with patch("httpx.AsyncClient", return_value=make_client(get)) as client_cls:
            await PageFetcher(user_agent="Mozilla/5.0").fetch_first(["https://a.cz/"])

        kwargs = client_cls.call_args.kwargs
        assert kwargs["headers"] == {"User-Agent": "Mozilla/5.0"}
        assert kwargs["follow_redirects"] is True
