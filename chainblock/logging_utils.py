from __future__ import annotations

import logging
import sys
from typing import Optional

DEFAULT_LOGGER_NAME = "chainblock"

_LEVELS_BY_VERBOSE = {
    0: logging.WARNING,  # default
    1: logging.INFO,     # loader summaries
    2: logging.DEBUG,    # per-transaction store mutations
}


def setup_logging(verbose_count: int = 0, logger_name: Optional[str] = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Configure the package logger (or a named / root logger) from a -v count.

    Everything under ``chainblock.*`` (store, loader, cli) propagates here.
    Pass ``logger_name=None`` to configure the root logger instead.
    Calling it again only adjusts the level; the stderr handler is attached once.
    """
    level = _LEVELS_BY_VERBOSE.get(verbose_count, logging.DEBUG)
    logger = logging.getLogger(logger_name or "")
    logger.setLevel(level)

    if not any(getattr(h, "_chainblock_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler._chainblock_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(handler)

    return logger
