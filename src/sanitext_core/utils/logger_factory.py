"""
Logger Factory - Convenience wrapper for LoggingService.

Provides a simple get_logger() function that wraps LoggingService.get_logger()
for convenient structured logging access throughout the library.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Optional

import structlog

from sanitext_core.config import settings
from sanitext_core.logging_service import LoggingService


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a module/component-specific logger.

    Args:
        name: Logger name (typically module path or __name__)

    Returns:
        BoundLogger instance with structured logging support

    Raises:
        ValueError: If name is empty or exceeds maximum length (200 chars)

    Example:
        ```python
        from sanitext_core.utils import get_logger

        logger = get_logger(__name__)
        logger.debug("validator_built", shape="text", rule="min=3")
        ```
    """
    return LoggingService.get_logger(name)


def configure_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """
    Configure structured logging infrastructure.

    Uses settings.log_level and settings.log_format for whatever is not
    passed explicitly. Call ONCE at application startup.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console")

    Raises:
        ValueError: If level or format is invalid
        RuntimeError: If called after logging already configured
    """
    if level is None:
        level = settings.log_level
    if format is None:
        format = settings.log_format

    LoggingService.configure_logging(level=level, format=format)
