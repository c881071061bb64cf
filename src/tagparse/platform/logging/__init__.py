"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import LOGGER_NAME, configure_from, logger, setup_logger
from .handlers import ParseEventRichHandler

__all__ = [
    "LOGGER_NAME",
    "ParseEventRichHandler",
    "configure_from",
    "logger",
    "setup_logger",
]
