"""Scrape orchestrator — fetch a page, select nodes, normalize their links."""

from __future__ import annotations

import logging

import httpx

from .errors import FetchError, FetchTimeoutError, HTTPStatusError
from .extractor import extract, parse_document
from .links import LinkResolution, get_normalizer
from .models import ScrapeResult

logger = logging.getLogger(__name__)


class SelectorScraper:
    """Fetches a single URL and returns the text/link pairs matching a selector.

    Holds no per-request state, so one instance is shared by every request
    handler.
    """

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        link_resolution: LinkResolution = "naive",
    ) -> None:
        self._timeout = timeout
        self._link_resolution = link_resolution
        self._normalize = get_normalizer(link_resolution)

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def link_resolution(self) -> LinkResolution:
        return self._link_resolution

    async def fetch(self, url: str) -> str:
        """GET *url* and return its body; only a 200 counts as success."""
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                resp = await client.get(url, timeout=self._timeout)
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(url, self._timeout) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"fetching {url}: {exc}") from exc

        if resp.status_code != 200:
            raise HTTPStatusError(resp.status_code, resp.reason_phrase)
        return resp.text

    async def scrape(self, url: str, selector: str) -> list[ScrapeResult]:
        """Return one :class:`ScrapeResult` per matched node with visible text.

        Raises a :class:`~linkscraper.scrape.errors.ScrapeError` subclass on
        fetch, status, parse or selector failure. A selector that matches
        nothing yields an empty list.
        """
        logger.debug("scraping", extra={"url": url, "selector": selector})
        body = await self.fetch(url)
        document = parse_document(body)

        results: list[ScrapeResult] = []
        for text, href in extract(document, selector):
            title = text.strip()
            if not title:
                continue
            results.append(ScrapeResult(title=title, link=self._normalize(url, href)))

        logger.info(
            "scrape complete",
            extra={"url": url, "selector": selector, "result_count": len(results)},
        )
        return results
