"""Structured logging setup; loggers are bound per operation, not per process."""
import logging
import sys
from typing import Any

import structlog

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value; unknown names fall back to INFO."""
    return _LEVELS.get((level or "").lower(), logging.INFO)


def configure_logging(json_logs: bool = True, level: str = "info") -> None:
    """Configure structlog for JSON (or console) output filtered at *level*."""
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str, **fields: Any) -> Any:
    """Return a structlog logger tagged with *component* and extra *fields*."""
    return structlog.get_logger(component).bind(component=component, **fields)
