# -*- coding: utf-8 -*-
"""Logger setup for the command-line entry point."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from ..constant import LOG_LEVEL_ENV

_ROOT_LOGGER = "llmconf"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: Optional[str] = None) -> int:
    """Map a level name (or the env default) to a logging level."""
    name = (level or os.environ.get(LOG_LEVEL_ENV, "warning")).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """Attach one stderr handler to the package logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(resolve_log_level(level))
    if not any(getattr(h, "_llmconf", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._llmconf = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
