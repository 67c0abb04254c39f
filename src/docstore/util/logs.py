"""Logging setup shared by the CLI and scripts"""

import logging

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> int:
    """Configure root logging; unknown level names fall back to INFO. Returns the numeric level."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=fmt, force=True)
    logger.debug(f"Logging configured at {logging.getLevelName(numeric_level)}")
    return numeric_level
