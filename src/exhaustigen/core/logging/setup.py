from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import Any, Optional

import orjson
import structlog

from exhaustigen.core.config.settings import settings


def _json_serializer(obj: Any, default: Any) -> str:
    return orjson.dumps(obj, default=default).decode("utf-8")


def configure_logging(*, level: Optional[str] = None) -> None:
    """
    Configure JSON-line logging for the process embedding the library.

    level defaults to settings.log_level (EXHAUSTIGEN_LOG_LEVEL); the
    configured settings.env is bound to every entry. The library never calls
    this itself.

    Loggers are not cached, so module-level loggers created before this call
    pick up the new level and output stream.
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(serializer=_json_serializer),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    bind_context(env=settings.env)


def bind_context(**values: Any) -> None:
    """
    Bind contextual information to all future log entries.

    Example:
        bind_context(suite="parser-fuzz")
    """
    structlog.contextvars.bind_contextvars(**values)


def bound_context(**values: Any) -> AbstractContextManager[None]:
    # bound for the duration of a with-block, then restored
    return structlog.contextvars.bound_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
