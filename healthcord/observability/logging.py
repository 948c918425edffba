"""Structured logging configuration using structlog.

Long-running callers log JSON lines; the CLI renders with structlog's console
renderer so operators running ``healthcord send-test`` get readable output.
Both go to stderr unless a stream is supplied.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

_SHARED_PROCESSORS: list[structlog.typing.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
]


def _renderers(json_output: bool) -> list[structlog.typing.Processor]:
    if json_output:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=False)]


def setup_logging(level: str = "info", json_output: bool = True, stream: IO[str] | None = None) -> None:
    """Route healthcord's structlog events to *stream* (stderr by default).

    Events below *level* are dropped by the bound logger itself; an unknown
    level name falls back to ``info``.
    """
    log_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *_renderers(json_output)],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name and any extra context."""
    return structlog.get_logger(component=component, **initial_values)  # type: ignore[return-value]
