"""Scrape pipeline: fetch, select, normalize."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import (
    FetchError,
    FetchTimeoutError,
    HTTPStatusError,
    ParseError,
    ScrapeError,
    SelectorError,
    ValidationError,
)
from .extractor import extract, parse_document
from .fetcher import SelectorScraper
from .links import normalize, resolve_standard
from .models import ScrapeResult

if TYPE_CHECKING:
    from linkscraper.config import Settings

__all__ = [
    "FetchError",
    "FetchTimeoutError",
    "HTTPStatusError",
    "ParseError",
    "ScrapeError",
    "ScrapeResult",
    "SelectorError",
    "SelectorScraper",
    "ValidationError",
    "build_scraper",
    "extract",
    "normalize",
    "parse_document",
    "resolve_standard",
]

logger = logging.getLogger(__name__)


def build_scraper(settings: Settings) -> SelectorScraper:
    """Build the shared scraper from configured timeout and link strategy."""
    scraper = SelectorScraper(
        timeout=settings.fetch_timeout_seconds,
        link_resolution=settings.link_resolution,
    )
    logger.debug(
        "scraper configured",
        extra={
            "timeout": settings.fetch_timeout_seconds,
            "link_resolution": settings.link_resolution,
        },
    )
    return scraper
