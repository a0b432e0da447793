"""Logging configuration for the storefront service."""

import logging

import structlog

from storefront.utils.settings import LOG_LEVEL

_configured = False


def configure_logging() -> None:
    global _configured
    if _configured:
        return

    level = logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", level=level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    # Suppress noisy library loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("celery").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str):
    configure_logging()
    return structlog.get_logger(name)
