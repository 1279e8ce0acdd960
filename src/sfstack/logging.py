"""Logging configuration for the CLI process.

Uses standard library logging on stderr so task output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(level: str | int) -> None:
    """Configure root logging with one timestamped stderr handler."""

    root = logging.getLogger()

    # Remove any existing handlers to avoid duplicate logs when re-configuring.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ),
    )
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
