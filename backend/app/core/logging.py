from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_log_level(name: str | None, debug: bool = False) -> int:
    if debug:
        return logging.DEBUG
    # Unknown names fall back to info.
    return LOG_LEVELS.get((name or "").strip().lower(), logging.INFO)


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    level = resolve_log_level(log_level, debug)
    root_logger = logging.getLogger()

    # Uvicorn may install handlers before our lifespan runs; basicConfig() is
    # then a no-op, so levels are set on the existing logger tree directly.
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    root_logger.setLevel(level)
    logging.getLogger("backend").setLevel(level)
