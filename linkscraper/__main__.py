"""Run the scraper UI with uvicorn: ``python -m linkscraper``."""

import uvicorn

from linkscraper.config import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None keeps uvicorn from replacing the JSON handlers set up in lifespan
    uvicorn.run(
        "linkscraper.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
