"""Data models for the scrape submodule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScrapeResult:
    """One matched node: its trimmed text and its normalized link.

    ``link`` is empty when the node carries no ``href``.
    """

    title: str
    link: str = ""
