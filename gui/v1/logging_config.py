"""
Logging configuration for the profile showcase.
"""
import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_configured = False


def setup_logging(level: str = "INFO", fmt: Optional[str] = None) -> None:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Optional log record format

    Calling it again only changes the level.
    """
    global _configured

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT, DATE_FORMAT))
        root_logger.addHandler(handler)
        # flet's own client chatter stays at warning
        logging.getLogger("flet").setLevel(max(numeric_level, logging.WARNING))
        logging.getLogger("flet_desktop").setLevel(max(numeric_level, logging.WARNING))
        _configured = True
