from __future__ import annotations

import logging
import sys


def setup_logging(level: str | None = None) -> None:
    """
    Configure application-wide logging.

    - Uses stderr (stdout is the game board)
    - Avoids duplicate handlers
    """
    level_name = (level or "WARNING").upper()
    lvl = getattr(logging, level_name, logging.WARNING)

    root = logging.getLogger()

    # If handlers already exist (e.g., tests, repeated main()), don't double-add
    if root.handlers:
        root.setLevel(lvl)
        return

    root.setLevel(lvl)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
