"""
Centralized logging configuration for daycounter.

This module provides standardized logging configuration using structlog
for all components. Standard output is reserved for the session report, so
log records are written to standard error unless another stream is given.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Destination of log records, defaults to stderr
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=stream if stream is not None else sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the session counting subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for the session counter
    """
    return structlog.get_logger(name, subsystem="session_counter")


def log_run_summary(
    logger: FilteringBoundLogger,
    start_date: str,
    end_date: str,
    sessions_total: int,
    week_count: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a counting run with standardized fields.

    Args:
        logger: Structlog logger instance
        start_date: First date of the range, display format
        end_date: Last date of the range, display format
        sessions_total: Number of sessions counted
        week_count: Number of distinct ISO weeks spanned
        context: Additional context data
    """
    bound_logger = logger.bind(
        start_date=start_date,
        end_date=end_date,
        sessions_total=sessions_total,
        week_count=week_count,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Session count completed")
