"""Recommended sites shown on the landing page, with their default selectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecommendedSite:
    """A catalog entry: where to go and what to pick out of it."""

    url: str
    tag: str
    selector: str
    example: str


DEFAULT_SITES: tuple[RecommendedSite, ...] = (
    RecommendedSite(
        url="https://news.ycombinator.com",
        tag="Tech News",
        selector=".titleline > a",
        example="Hacker News headlines",
    ),
    RecommendedSite(
        url="https://www.reddit.com/r/golang/",
        tag="Golang",
        selector="h3._eYtD2XCVieq6emjKBH3m",
        example="Reddit post titles",
    ),
    RecommendedSite(
        url="https://github.com/trending",
        tag="GitHub",
        selector="h2 a",
        example="Trending repositories",
    ),
)


class SiteCatalog:
    """Read-only view over a fixed set of recommended sites."""

    def __init__(self, sites: tuple[RecommendedSite, ...] = DEFAULT_SITES) -> None:
        self._sites = tuple(sites)

    @property
    def sites(self) -> tuple[RecommendedSite, ...]:
        return self._sites

    def default_selector(self, url: str) -> str | None:
        """Selector of the site whose URL equals *url* exactly, if any."""
        for site in self._sites:
            if site.url == url:
                return site.selector
        return None
