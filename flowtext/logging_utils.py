"""Logging helpers for the command line."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: Optional[str] = None) -> int:
    """
    Configure stderr logging for the flowtext loggers.

    ``level`` wins over the FLOWTEXT_LOG_LEVEL environment variable, which
    defaults to WARNING. The root handler is only installed when nothing
    else (an embedding application, a test runner) has configured logging.
    """
    level_name = (level or os.environ.get("FLOWTEXT_LOG_LEVEL", "WARNING")).upper()
    resolved = getattr(logging, level_name, None)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logger = logging.getLogger("flowtext")
    logger.setLevel(resolved)
    logger.debug("Logging initialized at %s", logging.getLevelName(resolved))
    return resolved
