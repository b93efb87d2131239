"""Utility helpers shared across the :mod:`backronym` package."""

from __future__ import annotations

from .observability import (
    LOG_LEVEL_ENV,
    StructuredLoggerAdapter,
    add_span_attributes,
    configure_logging,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "LOG_LEVEL_ENV",
    "configure_logging",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
