"""
Centralized logging configuration for the pricing engine.

This module provides standardized logging configuration using structlog
for all components. Calculation functions themselves do not log; the
coordinator and the call sites that turn calculation errors into display
states do.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

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

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
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


def get_calculation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the calculations subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for calculation call sites
    """
    logger = get_logger(name)

    return logger.bind(subsystem="calculations")


def log_guarded_result(
    logger: FilteringBoundLogger,
    metric: str,
    achievable: bool,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a call site that guards a hard-precondition metric.

    Args:
        logger: Structlog logger instance
        metric: Name of the guarded metric (e.g. "breakeven")
        achievable: Whether the metric produced a value
        reason: Why the metric was or was not achievable
        context: Additional context data
    """
    bound_logger = logger.bind(
        metric=metric,
        metric_result="ACHIEVABLE" if achievable else "NOT_ACHIEVABLE",
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if achievable:
        bound_logger.debug("Guarded metric computed")
    else:
        bound_logger.info("Guarded metric not achievable")
