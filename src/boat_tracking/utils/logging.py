"""structlog setup shared by the CLI commands and the tracking service."""

import logging
import structlog
from typing import Optional
from pathlib import Path

from ..models.config import LoggingConfig


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_logs: bool = False
) -> None:
    """
    Route structlog events for the tracker through stdlib logging.

    Registrations and ingestion progress log at INFO, violations at WARNING
    and per-report evaluations at DEBUG.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to
        json_logs: Whether to use JSON formatting
    """
    # force=True: every CLI command reconfigures against the current stderr
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=[
            logging.StreamHandler(),
            *([logging.FileHandler(log_file)] if log_file else [])
        ],
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging_from_config(config: LoggingConfig) -> None:
    """Apply the logging section of a tracking configuration."""
    setup_logging(level=config.level, log_file=config.log_file, json_logs=config.json_logs)


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structlog logger for a boat tracking module.

    Args:
        name: Module name, e.g. boat_tracking.core.registry

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)
