"""Link normalization — turn an href found on a page into an absolute URL.

Two strategies are available:

``naive``
    Prefix-based string joining. Absolute (``http...``) and ``mailto:`` hrefs
    pass through, root-relative hrefs are joined to ``scheme://host``, and
    everything else is appended to the base URL with a ``/``. It does not
    collapse ``..`` segments. ``//host/path`` counts as root-relative and is
    joined to the origin, giving a double slash; ``?query`` and ``#frag``
    hrefs are treated as path-relative.

``standard``
    RFC 3986 resolution via :func:`urllib.parse.urljoin`.
"""

from __future__ import annotations

from typing import Callable, Literal
from urllib.parse import urljoin

LinkResolution = Literal["naive", "standard"]

Normalizer = Callable[[str, str], str]

_PASSTHROUGH_PREFIXES = ("http", "mailto:")


def _origin(base_url: str) -> str:
    """``scheme://host`` of *base_url*, by splitting on ``/``."""
    parts = base_url.split("/")
    if len(parts) >= 3:
        return "/".join(parts[:3])
    return _strip_slash(base_url)


def _strip_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url


def normalize(base_url: str, href: str) -> str:
    """Resolve *href* against *base_url* with the naive prefix rules."""
    if not href:
        return ""
    if href.startswith(_PASSTHROUGH_PREFIXES):
        return href
    if href.startswith("/"):
        return _origin(base_url) + href
    return f"{_strip_slash(base_url)}/{href}"


def resolve_standard(base_url: str, href: str) -> str:
    """Resolve *href* against *base_url* per RFC 3986."""
    if not href:
        return ""
    if href.startswith("mailto:"):
        return href
    return urljoin(base_url, href)


_STRATEGIES: dict[str, Normalizer] = {
    "naive": normalize,
    "standard": resolve_standard,
}


def get_normalizer(resolution: LinkResolution = "naive") -> Normalizer:
    """Return the normalizer for a resolution strategy name."""
    try:
        return _STRATEGIES[resolution]
    except KeyError:
        raise ValueError(f"unknown link resolution strategy: {resolution!r}") from None
