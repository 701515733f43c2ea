"""Structured logging configuration.

Logs are rendered either as JSON lines or in a colored console format and
written to stderr, so command output on stdout stays clean.

Usage:
    from project_store.logging_config import setup_logging
    import structlog

    setup_logging(service_name="project-store")
    logger = structlog.get_logger()
    logger.info("event_name", key1=value1)
"""

import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor


def setup_logging(
    service_name: str = "project-store",
    log_format: Literal["json", "console"] = "console",
    log_level: str = "WARNING",
) -> None:
    """Configure structured logging with structlog.

    Args:
        service_name: Bound to every event as `service`.
        log_format: "json" for machine-readable output, "console" for humans.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        # Merge contextvars (service name)
        structlog.contextvars.merge_contextvars,
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=False))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=service_name)

    logger = structlog.get_logger()
    logger.debug(
        "logging_initialized",
        service=service_name,
        log_format=log_format,
        log_level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)
