"""Logging setup for the web application."""

from __future__ import annotations

import logging

from micfx.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``."""

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level)


__all__ = ["configure_logging"]
