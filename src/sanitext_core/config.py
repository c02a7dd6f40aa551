"""
Configuration Management for Sanitext.

Provides centralized, type-safe configuration loading using Pydantic Settings.
Supports environment variables (prefixed with SANITEXT_), .env files, and
sensible defaults for zero-config operation.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class SanitextSettings(BaseSettings):
    """
    Centralized configuration for the Sanitext library.

    Configuration is loaded with the following priority (highest to lowest):
    1. System environment variables (SANITEXT_LOG_LEVEL, ...)
    2. .env file in the working directory
    3. Hardcoded default values

    Example:
        ```python
        from sanitext_core.config import settings

        print(settings.log_level)  # 'INFO'
        print(settings.strict_rules)  # False
        ```
    """

    # ========================================
    # LOGGING CONFIGURATION
    # ========================================

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(default="json", description="Log format (json, console)")

    # ========================================
    # RULE COMPILATION
    # ========================================

    strict_rules: bool = Field(
        default=False,
        description="Reject rule parameters that are unknown for the target shape "
        "instead of ignoring them",
    )

    # ========================================
    # VALIDATORS
    # ========================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate log level is one of allowed values.

        Args:
            v: Log level string (case-insensitive)

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level not in allowed values
        """
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """
        Validate log format is one of allowed values.

        Args:
            v: Log format string (case-insensitive)

        Returns:
            Lowercase log format string

        Raises:
            ValueError: If log format not in allowed values
        """
        allowed = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got '{v}'")
        return v_lower

    # ========================================
    # PYDANTIC CONFIGURATION
    # ========================================

    model_config = {
        "env_prefix": "SANITEXT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "validate_assignment": True,
        "extra": "ignore",
    }


# ============================================================
# HELPER FUNCTIONS
# ============================================================


def get_config_summary(settings: SanitextSettings) -> Dict[str, Any]:
    """
    Get configuration summary for logging/debugging.

    Args:
        settings: SanitextSettings instance

    Returns:
        Configuration summary grouped by category
    """
    return {
        "logging": {
            "level": settings.log_level,
            "format": settings.log_format,
        },
        "rules": {
            "strict": settings.strict_rules,
        },
    }


# Singleton instance - instantiated once at module import
settings = SanitextSettings()
