"""Fixtures — history tracker, catalog, sample pages."""

import pytest

from linkscraper.catalog import RecommendedSite, SiteCatalog
from linkscraper.history import VisitHistory

LISTING_HTML = """
<html>
  <body>
    <span class="titleline"><a href="https://example.org/first">First story</a></span>
    <span class="titleline"><a href="/item?id=2">  Second story  </a></span>
    <span class="titleline"><a href="item?id=3">Third <b>story</b></a></span>
    <span class="titleline"><a href="/blank">   </a></span>
    <span class="titleline"><a>No link here</a></span>
    <span class="titleline"><a href="mailto:team@example.org">Contact</a></span>
  </body>
</html>
"""


@pytest.fixture
def history() -> VisitHistory:
    return VisitHistory(capacity=10)


@pytest.fixture
def catalog() -> SiteCatalog:
    return SiteCatalog(
        (
            RecommendedSite(
                url="https://news.example.com",
                tag="News",
                selector=".titleline > a",
                example="Example headlines",
            ),
        )
    )


@pytest.fixture
def listing_html() -> str:
    return LISTING_HTML
