"""Centralized logger configuration.

Usage:
    from product_viewer.log import setup_logging
    setup_logging("DEBUG", "viewer.log")

The TUI owns the terminal while it runs, so log output belongs in a file
whenever anything below WARNING is enabled.
"""

from __future__ import annotations

import logging
import os

DEFAULT_LEVEL = os.getenv("PRODUCT_VIEWER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL, filename: str | None = None) -> None:
    """Configure the root logger once for the process.

    Args:
        level: Level name such as 'DEBUG' or 'INFO'. Unknown names fall back
            to WARNING.
        filename: Write to this file instead of stderr.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        filename=filename,
    )
