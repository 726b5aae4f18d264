"""Structured logging for the validator, scoped to the package logger."""

import logging
import sys
from typing import TextIO

import structlog
from structlog.typing import Processor

PACKAGE_LOGGER = "tunnel_validator"

_HANDLER_MARKER = "_tunnel_validator_handler"


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route validator log events to a stream.

    Only the ``tunnel_validator`` stdlib logger gets a handler. Root logger
    handlers installed by the host application are left alone, and calling
    this again replaces the handler added by the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, render events as JSON lines
        stream: Output stream, stderr by default

    Returns:
        The configured package logger
    """
    log_level = getattr(logging, level.upper())

    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    setattr(handler, _HANDLER_MARKER, True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in package_logger.handlers[:]:
        if getattr(existing, _HANDLER_MARKER, False):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    # Module loggers are created at import time, so they must not be cached
    # against an earlier configuration
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    return package_logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
