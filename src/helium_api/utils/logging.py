"""Logging setup for scripts and the command line."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> None:
    """Configure root logging and quiet down chatty third-party loggers."""
    logging.basicConfig(level=level, format=fmt or LOG_FORMAT)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("dlt").setLevel(logging.WARNING)
