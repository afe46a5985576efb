"""Loguru sink setup for the probe process."""
from __future__ import annotations

import sys

from loguru import logger

from dbprobe.app.config.settings import Settings

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{extra[service_name]} | {extra[event]} | {message}"
)


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default sink with one stderr sink at the configured level."""
    logger.remove()
    logger.configure(extra={"service_name": "", "event": ""})
    if settings.log_json:
        logger.add(sys.stderr, level=settings.log_level.upper(), serialize=True)
    else:
        logger.add(sys.stderr, level=settings.log_level.upper(), format=LOG_FORMAT)
