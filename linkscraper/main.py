"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from linkscraper.api.routes import router
from linkscraper.catalog import SiteCatalog
from linkscraper.config import get_settings
from linkscraper.history import VisitHistory
from linkscraper.logging_config import setup_logging
from linkscraper.scrape import build_scraper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Logging first so startup itself is logged as JSON
    setup_logging(settings.log_level)
    logger.info("starting link scraper")

    app.state.settings = settings
    app.state.scraper = build_scraper(settings)
    app.state.history = VisitHistory(capacity=settings.history_size)
    app.state.catalog = SiteCatalog()

    logger.info(
        "link scraper ready",
        extra={
            "fetch_timeout_seconds": settings.fetch_timeout_seconds,
            "history_size": settings.history_size,
            "link_resolution": settings.link_resolution,
            "catalog_size": len(app.state.catalog.sites),
        },
    )

    yield

    logger.info("shutting down link scraper")


app = FastAPI(title="Link Scraper", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
