"""Logging, metrics and tracing helpers shared by the service layer.

Loggers render bound context as a JSON suffix so log lines stay greppable,
and `configure_logging` gives the package logger a console handler.
Metrics are Prometheus collectors; re-creating a collector with an existing
name (common under test re-imports) returns the registered instance instead of
raising. Spans come from the OpenTelemetry API, which is a no-op until an SDK
tracer provider is installed by the host application.
"""

from __future__ import annotations

import json
import logging
import os
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram

_TRACER_NAME = "backronym"

_PACKAGE_LOGGER = "backronym"
LOG_LEVEL_ENV = "BACKRONYM_LOG_LEVEL"
_CONSOLE_HANDLER = "backronym-console"
_CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Adapter that appends bound and per-call context to each message."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra or {})
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra or {})
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            payload = json.dumps(event_context, sort_keys=True, default=str)
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    return StructuredLoggerAdapter(logging.getLogger(name), context)


def _level_number(level: Any) -> int:
    if isinstance(level, int):
        return level
    text = str(level).strip().upper()
    if text.isdigit():
        return int(text)
    named = getattr(logging, text, None) if text.isalpha() else None
    return named if isinstance(named, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None) -> logging.Logger:
    """Attach a console handler to the package logger and set its level.

    The level comes from ``level``, then ``BACKRONYM_LOG_LEVEL``, then INFO.
    Only the ``backronym`` logger is touched. Calling again re-applies the
    level but never stacks a second handler.
    """

    logger = logging.getLogger(_PACKAGE_LOGGER)
    chosen = level if level is not None else os.getenv(LOG_LEVEL_ENV, "INFO")
    logger.setLevel(_level_number(chosen))
    if not any(handler.get_name() == _CONSOLE_HANDLER for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_CONSOLE_HANDLER)
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logger.addHandler(handler)
    return logger


def _registered(name: str) -> Any:
    # Counters register under both ``name`` and ``name_total``.
    collectors = getattr(REGISTRY, "_names_to_collectors", {})
    return collectors.get(name) or collectors.get(f"{name}_total")


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Counter:
    """Create (or reuse) a Prometheus counter."""

    try:
        return Counter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _registered(name)
        if existing is None:
            raise
        return existing


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Histogram:
    """Create (or reuse) a Prometheus histogram."""

    try:
        return Histogram(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _registered(name)
        if existing is None:
            raise
        return existing


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None) -> Iterator[Any]:
    """Start an OpenTelemetry span carrying ``attributes``."""

    tracer = trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span``, skipping non-string keys."""

    if span is None:
        return
    for key, value in attributes.items():
        if isinstance(key, str):
            span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Mark ``span`` as failed with ``error``."""

    if span is None:
        return
    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "LOG_LEVEL_ENV",
    "StructuredLoggerAdapter",
    "configure_logging",
    "get_logger",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
