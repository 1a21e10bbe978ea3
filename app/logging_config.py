"""Logging setup shared by the web application and scripts."""

import logging

from app.config import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings) -> None:
    """Configure root logging from the configured level and format."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )
    # uvicorn access lines duplicate the request logging middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
