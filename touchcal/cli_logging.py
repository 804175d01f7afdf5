"""
CLI logging configuration.

Diagnostics go to stderr so that stdout carries nothing but udev rules.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["logging_setup"]


def logging_setup(level: str, log_format: str) -> None:
    """
    Configure the stderr handler and format.

    Args:
        level:
            Log level name (for example `WARNING` or `DEBUG`).
        log_format:
            Base logging format string.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers,
    )
