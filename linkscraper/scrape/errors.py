"""Error taxonomy for the scrape pipeline.

Every failure the pipeline can report derives from :class:`ScrapeError`, so
the request boundary can recover all of them with a single ``except``.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for recoverable scrape failures."""


class FetchError(ScrapeError):
    """The target URL could not be reached."""


class FetchTimeoutError(ScrapeError):
    """The fetch did not complete within the configured timeout."""

    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(f"timed out after {timeout:g}s fetching {url}")
        self.url = url
        self.timeout = timeout


class HTTPStatusError(ScrapeError):
    """The target answered with anything other than 200 OK."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        message = f"status code error: {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ParseError(ScrapeError):
    """The response body could not be parsed as HTML."""


class SelectorError(ScrapeError):
    """The selector was rejected by the CSS query engine."""

    def __init__(self, selector: str, detail: str = "") -> None:
        message = f"invalid selector {selector!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.selector = selector


class ValidationError(ScrapeError):
    """No selector could be resolved for the request."""
