"""
Structured logging for salon.

Loggers are structlog ``BoundLogger``s wrapping standard library loggers, so
level filtering and output stay under the host application's control. Nothing
below WARNING is shown until ``configure_logging`` is called.
"""
from __future__ import annotations
from typing import Optional
import logging
import sys

import structlog

from salon.config import SalonConfig


_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]

# Marks the handler installed by configure_logging so a re-run can replace it.
_HANDLER_NAME = "salon.structlog"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(config: Optional[SalonConfig] = None) -> logging.Logger:
    """Install a structlog formatter on the package logger.

    Returns the configured stdlib logger.
    """
    config = config or SalonConfig.from_env()

    if config.logging.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(config.logger_name)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.logging.level.upper()))
    logger.propagate = False
    return logger
