"""Structured logging configuration using structlog.

Library loggers render through the stdlib ``logging`` tree under the
``kubegen`` logger and emit nothing until a handler is attached, either by
the host application or by :func:`setup_logging` (used by the CLI).
"""

from __future__ import annotations

import logging
import sys

import structlog

ROOT_LOGGER = "kubegen"

_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.format_exc_info,
    structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
    structlog.processors.JSONRenderer(),
]

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def setup_logging(level: str = "info") -> None:
    """Send kubegen's JSON log lines to stderr at *level*.

    stdout is left to command output so ``kubegen status`` can be piped.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers[:] = [handler]
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name.

    Independent of the global structlog configuration, so importing kubegen
    never changes how the host application logs.
    """
    return structlog.wrap_logger(  # type: ignore[return-value]
        logging.getLogger(f"{ROOT_LOGGER}.{component}"),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
        component=component,
    )
