"""Scrape orchestrator tests with a mocked HTTP client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from linkscraper.scrape import (
    FetchError,
    FetchTimeoutError,
    HTTPStatusError,
    ParseError,
    ScrapeResult,
    SelectorError,
    SelectorScraper,
    build_scraper,
)


BASE_URL = "https://news.example.com/front"


def _mock_response(status_code: int = 200, text: str = "", reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason
    response.text = text
    return response


def _patch_client(mock_client: MagicMock, *, response=None, exc=None) -> AsyncMock:
    ctx = AsyncMock()
    if exc is not None:
        ctx.get.side_effect = exc
    else:
        ctx.get.return_value = response
    mock_client.return_value.__aenter__ = AsyncMock(return_value=ctx)
    mock_client.return_value.__aexit__ = AsyncMock(return_value=False)
    return ctx


@pytest.mark.asyncio
async def test_scrape_normalizes_and_skips_blank(listing_html):
    scraper = SelectorScraper(timeout=5.0)

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, response=_mock_response(text=listing_html))
        results = await scraper.scrape(BASE_URL, ".titleline > a")

    assert results == [
        ScrapeResult(title="First story", link="https://example.org/first"),
        ScrapeResult(title="Second story", link="https://news.example.com/item?id=2"),
        ScrapeResult(title="Third story", link="https://news.example.com/front/item?id=3"),
        ScrapeResult(title="No link here", link=""),
        ScrapeResult(title="Contact", link="mailto:team@example.org"),
    ]
    assert all(r.title.strip() for r in results)


@pytest.mark.asyncio
async def test_scrape_passes_timeout_and_follows_redirects(listing_html):
    scraper = SelectorScraper(timeout=3.5)

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        ctx = _patch_client(mock_client, response=_mock_response(text=listing_html))
        await scraper.scrape(BASE_URL, "a")

    mock_client.assert_called_once_with(follow_redirects=True)
    ctx.get.assert_awaited_once_with(BASE_URL, timeout=3.5)


@pytest.mark.asyncio
async def test_scrape_no_match_returns_empty(listing_html):
    scraper = SelectorScraper()

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, response=_mock_response(text=listing_html))
        results = await scraper.scrape(BASE_URL, "div.nothing-here")

    assert results == []


@pytest.mark.asyncio
async def test_scrape_only_blank_matches_returns_empty():
    scraper = SelectorScraper()
    html = "<ul><li><a href='/a'> </a></li><li><a href='/b'>\n\t</a></li></ul>"

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, response=_mock_response(text=html))
        results = await scraper.scrape(BASE_URL, "li a")

    assert results == []


@pytest.mark.asyncio
async def test_scrape_404_raises_status_error():
    scraper = SelectorScraper()

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, response=_mock_response(404, reason="Not Found"))
        with pytest.raises(HTTPStatusError) as exc_info:
            await scraper.scrape(BASE_URL, "a")

    assert exc_info.value.status_code == 404
    assert "404" in str(exc_info.value)
    assert "Not Found" in str(exc_info.value)


@pytest.mark.asyncio
async def test_scrape_non_200_success_code_is_an_error():
    scraper = SelectorScraper()

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, response=_mock_response(204, reason="No Content"))
        with pytest.raises(HTTPStatusError) as exc_info:
            await scraper.scrape(BASE_URL, "a")

    assert exc_info.value.status_code == 204


@pytest.mark.asyncio
async def test_scrape_transport_failure_raises_fetch_error():
    scraper = SelectorScraper()

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, exc=httpx.ConnectError("connection refused"))
        with pytest.raises(FetchError, match="connection refused"):
            await scraper.scrape(BASE_URL, "a")


@pytest.mark.asyncio
async def test_scrape_invalid_url_raises_fetch_error():
    scraper = SelectorScraper()

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, exc=httpx.UnsupportedProtocol("no scheme"))
        with pytest.raises(FetchError):
            await scraper.scrape("example.com", "a")


@pytest.mark.asyncio
async def test_scrape_timeout_raises_timeout_error():
    scraper = SelectorScraper(timeout=2.0)

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, exc=httpx.ReadTimeout("read timed out"))
        with pytest.raises(FetchTimeoutError) as exc_info:
            await scraper.scrape(BASE_URL, "a")

    assert exc_info.value.timeout == 2.0
    assert not isinstance(exc_info.value, FetchError)


@pytest.mark.asyncio
async def test_scrape_invalid_selector_raises_selector_error(listing_html):
    scraper = SelectorScraper()

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, response=_mock_response(text=listing_html))
        with pytest.raises(SelectorError):
            await scraper.scrape(BASE_URL, "a[href")


@pytest.mark.asyncio
async def test_scrape_parser_rejection_raises_parse_error(listing_html):
    from bs4 import ParserRejectedMarkup

    scraper = SelectorScraper()

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client, patch(
        "linkscraper.scrape.extractor.BeautifulSoup",
        side_effect=ParserRejectedMarkup("bad markup"),
    ):
        _patch_client(mock_client, response=_mock_response(text=listing_html))
        with pytest.raises(ParseError):
            await scraper.scrape(BASE_URL, "a")


@pytest.mark.asyncio
async def test_standard_resolution_strategy():
    scraper = SelectorScraper(link_resolution="standard")
    html = '<a href="../up">Up</a><a href="//cdn.example.com/x">CDN</a>'

    with patch("linkscraper.scrape.fetcher.httpx.AsyncClient") as mock_client:
        _patch_client(mock_client, response=_mock_response(text=html))
        results = await scraper.scrape("https://example.com/a/b", "a")

    assert [r.link for r in results] == [
        "https://example.com/up",
        "https://cdn.example.com/x",
    ]


def test_build_scraper_from_settings():
    settings = MagicMock()
    settings.fetch_timeout_seconds = 7.5
    settings.link_resolution = "standard"

    scraper = build_scraper(settings)
    assert scraper.timeout == 7.5
    assert scraper.link_resolution == "standard"
