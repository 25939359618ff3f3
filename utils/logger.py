"""
utils/logger.py
---------------
Logging setup for the catalog.
Modules call `get_logger(__name__)`; the first call installs one stdout
handler on the root logger at the level named by LOG_LEVEL.
"""

import logging
import sys
from typing import Optional

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install (or re-level) the catalog's root handler.

    Calling it again never stacks a second handler; it only changes the level.

    Args:
        level: Level name such as ``"DEBUG"``; defaults to config.LOG_LEVEL.
            Unknown names fall back to INFO.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
    level_no = getattr(logging, (level or LOG_LEVEL).upper(), None)
    root.setLevel(level_no if isinstance(level_no, int) else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures the root handler on first use."""
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
