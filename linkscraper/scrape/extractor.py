"""CSS-selector extraction over parsed HTML."""

from __future__ import annotations

import logging

import soupsieve
from bs4 import BeautifulSoup, ParserRejectedMarkup

from .errors import ParseError, SelectorError

logger = logging.getLogger(__name__)

_PARSER = "html.parser"


def parse_document(html: str | bytes) -> BeautifulSoup:
    """Parse an HTML body into a queryable document."""
    try:
        return BeautifulSoup(html, _PARSER)
    except ParserRejectedMarkup as exc:
        raise ParseError(f"could not parse HTML: {exc}") from exc


def extract(document: BeautifulSoup, selector: str) -> list[tuple[str, str]]:
    """Return ``(text, href)`` for every node matching *selector*, in document order.

    Selector grammar is whatever soupsieve accepts. ``text`` is the node's
    full descendant text, untrimmed; ``href`` is the node's own attribute or
    ``""`` when absent.
    """
    try:
        nodes = document.select(selector)
    except (soupsieve.SelectorSyntaxError, NotImplementedError) as exc:
        # soupsieve appends a multi-line caret diagram; keep the headline.
        # Pseudo-elements are rejected with NotImplementedError.
        detail = str(exc).splitlines()[0] if str(exc) else ""
        raise SelectorError(selector, detail) from exc

    pairs = [(node.get_text(), node.get("href") or "") for node in nodes]

    logger.debug("selector matched", extra={"selector": selector, "match_count": len(pairs)})
    return pairs
