from __future__ import annotations

import logging
import os
from typing import Optional


_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# set by set_level(); wins over TRADINGPOST_LOG_LEVEL for every logger
_override: Optional[int] = None


def _default_level() -> int:
    if _override is not None:
        return _override
    return getattr(logging, os.getenv("TRADINGPOST_LOG_LEVEL", "INFO").upper(), logging.INFO)


def get_logger(name: str, *, level: Optional[int] = None) -> logging.Logger:
    """Return the logger for ``name`` with a single stderr handler attached.

    DEBUG carries request URLs, page progress and limiter waits; WARNING
    carries non-2xx responses; INFO carries CLI milestones.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level or _default_level())
    return logger


def set_level(level: Optional[int]) -> None:
    """Force ``level`` on tradingpost loggers, existing and future.

    ``None`` drops the override and goes back to TRADINGPOST_LOG_LEVEL.
    """

    global _override
    _override = level
    for name, obj in logging.root.manager.loggerDict.items():
        if name.startswith("tradingpost") and isinstance(obj, logging.Logger):
            obj.setLevel(_default_level())
