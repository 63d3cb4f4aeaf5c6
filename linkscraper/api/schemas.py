"""View models handed to the page template."""

from pydantic import BaseModel

from linkscraper.catalog import RecommendedSite
from linkscraper.scrape.models import ScrapeResult


def format_duration(duration_ms: int) -> str:
    """Render a millisecond count the way a stopwatch would: ``532ms``, ``1.234s``."""
    if duration_ms < 1000:
        return f"{duration_ms}ms"
    return f"{duration_ms / 1000:.3f}s"


class PageData(BaseModel):
    url: str = ""
    selector: str = ""
    results: list[ScrapeResult] = []
    duration_ms: int | None = None
    error: str = ""
    recommended: list[RecommendedSite] = []
    visited: list[str] = []

    @property
    def duration(self) -> str:
        if self.duration_ms is None:
            return ""
        return format_duration(self.duration_ms)
