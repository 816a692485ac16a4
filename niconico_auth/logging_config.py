"""Logging setup for applications using niconico_auth.

The library itself only creates module loggers; handlers are the
application's business.
"""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Log level; defaults to LOG_LEVEL env var, then INFO

    Returns:
        The configured root logger
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Attach the console handler only once; FileHandler subclasses don't count
    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger
