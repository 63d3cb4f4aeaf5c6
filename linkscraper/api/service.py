"""Service layer — builds the page for one request."""

from __future__ import annotations

import logging
import time

from linkscraper.api.schemas import PageData
from linkscraper.catalog import SiteCatalog
from linkscraper.history import VisitHistory
from linkscraper.scrape import ScrapeError, SelectorScraper, ValidationError

logger = logging.getLogger(__name__)

MISSING_SELECTOR_MESSAGE = "Please provide a CSS selector."


def resolve_selector(url: str, selector: str, catalog: SiteCatalog) -> str:
    """Return *selector*, or the catalog default for *url* when it is empty."""
    if selector:
        return selector
    default = catalog.default_selector(url)
    if default is None:
        raise ValidationError(MISSING_SELECTOR_MESSAGE)
    return default


async def build_page(
    url: str,
    selector: str,
    *,
    scraper: SelectorScraper,
    history: VisitHistory,
    catalog: SiteCatalog,
) -> PageData:
    """Run the scrape for one request and collect everything the page shows.

    Scrape failures never escape: they land in ``PageData.error``. The
    visited list reflects history as it was before this request.
    """
    page = PageData(
        recommended=list(catalog.sites),
        visited=history.snapshot(),
    )
    if not url:
        return page

    page.url = url
    page.selector = selector
    history.record(url)

    try:
        selector = resolve_selector(url, selector, catalog)
    except ValidationError as exc:
        logger.info("no selector resolvable", extra={"url": url})
        page.error = str(exc)
        return page
    page.selector = selector

    start = time.perf_counter()
    try:
        page.results = await scraper.scrape(url, selector)
    except ScrapeError as exc:
        logger.warning(
            "scrape failed",
            extra={"url": url, "selector": selector, "error_kind": type(exc).__name__},
        )
        page.error = f"Error scraping: {exc}"
    finally:
        page.duration_ms = round((time.perf_counter() - start) * 1000)

    return page
