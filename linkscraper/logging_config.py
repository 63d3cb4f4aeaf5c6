"""JSON structured logging for the scraper service and the uvicorn server."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

# Client libraries that log every outbound request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(log_level: str = "INFO") -> None:
    """Send every log record to stdout as one JSON object per line.

    Unknown level names fall back to INFO. Outbound HTTP client chatter is
    held at WARNING so that a scrape produces one line, not three.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    formatter = JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.addHandler(handler)
        server_logger.propagate = False

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
