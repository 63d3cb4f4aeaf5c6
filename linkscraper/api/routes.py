"""GET / endpoint handler."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from jinja2 import TemplateError

from linkscraper.api.render import render_page
from linkscraper.api.service import build_page
from linkscraper.catalog import SiteCatalog
from linkscraper.history import VisitHistory
from linkscraper.scrape import SelectorScraper

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_scraper(request: Request) -> SelectorScraper:
    return request.app.state.scraper


def _get_history(request: Request) -> VisitHistory:
    return request.app.state.history


def _get_catalog(request: Request) -> SiteCatalog:
    return request.app.state.catalog


@router.get("/", response_class=HTMLResponse)
async def index(
    url: str = "",
    selector: str = "",
    scraper: SelectorScraper = Depends(_get_scraper),
    history: VisitHistory = Depends(_get_history),
    catalog: SiteCatalog = Depends(_get_catalog),
):
    page = await build_page(
        url.strip(),
        selector.strip(),
        scraper=scraper,
        history=history,
        catalog=catalog,
    )

    try:
        html = render_page(page)
    except TemplateError:
        logger.exception("template rendering failed", extra={"url": page.url})
        return PlainTextResponse("Internal Server Error", status_code=500)
    return HTMLResponse(html)
