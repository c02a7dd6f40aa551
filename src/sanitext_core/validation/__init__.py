"""
Validation module for sanitext_core.

Provides rule-driven validators for three value shapes:
- text (build_text_validator)
- list of text (build_list_validator)
- map of text to text (build_map_validator)

plus the Sanitizer entry point that detects a value's shape and caches
compiled validators by (shape, rule).

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from .cache import ValidatorCache
from .collection_validators import build_list_validator, build_map_validator
from .dispatch import (
    Sanitizer,
    get_default_sanitizer,
    validate,
    validate_list,
    validate_map,
    validate_optional,
    validate_text,
)
from .shapes import Shape, detect_shape
from .text_validator import build_text_validator, clean_text

__all__ = [
    "Sanitizer",
    "ValidatorCache",
    "Shape",
    "detect_shape",
    "build_text_validator",
    "build_list_validator",
    "build_map_validator",
    "clean_text",
    "get_default_sanitizer",
    "validate",
    "validate_optional",
    "validate_text",
    "validate_list",
    "validate_map",
]
