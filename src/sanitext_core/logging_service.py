"""
LoggingService - Centralized structured logging for Sanitext.

Provides consistent, context-enriched, machine-readable logging
across all modules using structlog.

Events are rendered by structlog and emitted through the standard library
logger of the same name, so a host application that never configures
logging gets Python's last-resort behaviour: WARNING and above on stderr,
nothing on stdout.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, List, Optional

import structlog
from structlog.types import Processor


@dataclass
class LoggingConfig:
    """
    Configuration for LoggingService.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console" for dev)
        output_stream: Output destination (default: sys.stderr)

    Example:
        config = LoggingConfig(level="INFO", format="json")
    """

    level: str = "INFO"
    format: str = "json"  # "json" or "console"
    output_stream: Any = sys.stderr


class LoggingService:
    """
    Centralized structured logging service using structlog.

    Outputs JSON logs to stderr by default so that library logging never
    mixes with a host application's stdout.

    Loggers do not depend on structlog's global configuration. Each one
    wraps the stdlib logger of its name with a processor chain owned by this
    class; configure_logging() swaps that chain in place and installs a
    stream handler on the root logger, so loggers created at import time
    pick up the configuration.

    Example:
        # Setup logging once at startup
        LoggingService.configure_logging(level="INFO", format="json")

        # Get logger for a module
        logger = LoggingService.get_logger("sanitext_core.validation")

        logger.info("validator_built", shape="text", rule="min=3")
    """

    # Class-level state
    _configured: bool = False
    _log_level: str = "INFO"
    _config: Optional[LoggingConfig] = None
    _loggers: dict[str, Any] = {}
    _handler: Optional[logging.Handler] = None
    _processors: List[Processor] = []

    @classmethod
    def configure_logging(
        cls, level: str = "INFO", format: str = "json", config: Optional[LoggingConfig] = None
    ) -> None:
        """
        Configure global structured logging infrastructure.

        This should be called ONCE at application startup.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            format: Output format ("json" or "console")
            config: Optional LoggingConfig for advanced configuration

        Raises:
            ValueError: If level or format is invalid
            RuntimeError: If called after logging already configured
        """
        if cls._configured:
            raise RuntimeError("Logging already configured")

        if config is not None:
            cfg = config
        else:
            level_upper = level.upper()
            if level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
                raise ValueError(
                    f"Invalid log level: {level}. "
                    "Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
                )

            format_lower = format.lower()
            if format_lower not in ["json", "console"]:
                raise ValueError(f"Invalid format: {format}. Must be 'json' or 'console'")

            cfg = LoggingConfig(level=level_upper, format=format_lower)

        cls._config = cfg
        cls._log_level = cfg.level

        # In place: loggers already handed out hold a reference to this list
        cls._processors[:] = cls._setup_processors()

        root = logging.getLogger()
        if cls._handler is not None:
            root.removeHandler(cls._handler)

        handler = logging.StreamHandler(cfg.output_stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        root.setLevel(getattr(logging, cfg.level))
        cls._handler = handler

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> Any:
        """
        Get a module/component-specific logger.

        Returns a cached logger if already created, otherwise creates
        a new logger with the given name for context.

        Args:
            name: Logger name (typically module path)

        Returns:
            structlog BoundLogger proxy over logging.getLogger(name)

        Raises:
            ValueError: If name is empty or too long
        """
        if not name:
            raise ValueError("Logger name cannot be empty")

        if len(name) > 200:
            raise ValueError("Logger name exceeds maximum length (200)")

        if name in cls._loggers:
            return cls._loggers[name]

        if not cls._processors:
            cls._processors[:] = cls._setup_processors()

        logger = structlog.wrap_logger(
            logging.getLogger(name),
            processors=cls._processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )
        cls._loggers[name] = logger

        return logger

    @classmethod
    def _setup_processors(cls) -> list[Processor]:
        """
        Setup structlog processors based on configuration.

        Processors (in order):
            1. filter_by_level: Drop events the stdlib logger would not emit
            2. add_log_level: Add log level to context
            3. TimeStamper: Add ISO timestamp
            4. StackInfoRenderer: Render stack info if requested
            5. format_exc_info: Format exception info
            6. JSONRenderer or ConsoleRenderer: Final output format
        """
        processors: list[Processor] = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]

        if cls._config and cls._config.format == "console":
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.JSONRenderer())

        return processors
