"""Utility helpers shared across the :mod:`ghost_note` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import (
    StructuredLoggerAdapter,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "configure_logging",
    "StructuredLoggerAdapter",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
