"""
Sanitext Core.

Sanitizes and validates untrusted text, lists of text, and maps of text
against compact rule strings such as "min=3,max=40,preserve-newlines".

Contains:
- Rule grammar parser and typed rule options
- Unicode-aware text sanitizer
- List and map validators
- Sanitizer entry point with a validator cache
- Exception hierarchy
- Configuration management
- Logging service

Example:
    ```python
    from sanitext_core import validate

    validate("  Hello \\u00a0\\n world ", "max=40")  # "Hello world"
    validate(["b", "a", "b"], "unique")  # ["a", "b"]
    ```

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from .config import SanitextSettings, get_config_summary, settings
from .exceptions import (
    ConfigError,
    RuleSyntaxError,
    SanitextError,
    UnsupportedTypeError,
    ValidationError,
)
from .logging_service import LoggingConfig, LoggingService
from .rules import ListRuleOptions, MapRuleOptions, TextRuleOptions, parse_rule
from .validation import (
    Sanitizer,
    Shape,
    ValidatorCache,
    build_list_validator,
    build_map_validator,
    build_text_validator,
    detect_shape,
    get_default_sanitizer,
    validate,
    validate_list,
    validate_map,
    validate_optional,
    validate_text,
)

__version__ = "1.0.0"

__all__ = [
    # Exceptions
    "SanitextError",
    "RuleSyntaxError",
    "ConfigError",
    "ValidationError",
    "UnsupportedTypeError",
    # Configuration
    "SanitextSettings",
    "settings",
    "get_config_summary",
    # Logging
    "LoggingService",
    "LoggingConfig",
    # Rules
    "parse_rule",
    "TextRuleOptions",
    "ListRuleOptions",
    "MapRuleOptions",
    # Validation
    "Sanitizer",
    "ValidatorCache",
    "Shape",
    "detect_shape",
    "build_text_validator",
    "build_list_validator",
    "build_map_validator",
    "get_default_sanitizer",
    "validate",
    "validate_optional",
    "validate_text",
    "validate_list",
    "validate_map",
]
