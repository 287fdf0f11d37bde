from __future__ import annotations

import logging
import sys

try:
    from constants import LOG_FORMAT, LOG_LEVEL, LOGGER_NAME
except ImportError:
    from .constants import LOG_FORMAT, LOG_LEVEL, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

level = logging.getLevelName(LOG_LEVEL.upper())
logger.setLevel(level if isinstance(level, int) else logging.INFO)
