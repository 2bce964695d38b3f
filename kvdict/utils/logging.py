"""
Logging Setup

The library only creates module loggers; applications opt in to
console output by calling setup_logging().
"""

import logging
import sys
from typing import Optional, Union

from ..config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
PACKAGE_LOGGER = "kvdict"

_handler: Optional[logging.Handler] = None


def setup_logging(debug: bool = False, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Configure console logging for the kvdict package.

    Args:
        debug: Force DEBUG level
        level: Explicit level; when omitted, DEBUG if KV_DICT_DEBUG is
            set, else settings.LOG_LEVEL

    Returns:
        The configured package logger
    """
    global _handler

    if debug:
        resolved = logging.DEBUG
    elif level is not None:
        resolved = level
    elif settings.DEBUG:
        resolved = logging.DEBUG
    else:
        resolved = settings.LOG_LEVEL.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)

    # Replace our own handler on repeated calls
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

    return logger
