"""Logging setup shared by the console and scripts."""
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(level=None):
    """Configure root logging once; level falls back to PROJECTION_LOG_LEVEL, then INFO"""
    level = level or os.getenv("PROJECTION_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
