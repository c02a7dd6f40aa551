"""
Sanitizer - entry point that routes values to the right compiled validator.

Given a value and a rule string, the Sanitizer detects the value's shape,
fetches (or compiles and caches) the validator for (shape, rule), and
returns a sanitized value of the same shape.

Module-level functions (validate, validate_optional, validate_text,
validate_list, validate_map) use one process-wide Sanitizer created on
first use.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import functools
import threading
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar

from sanitext_core.config import settings
from sanitext_core.exceptions import UnsupportedTypeError
from sanitext_core.utils.logger_factory import get_logger
from sanitext_core.validation.cache import Builder, Validator, ValidatorCache
from sanitext_core.validation.collection_validators import (
    build_list_validator,
    build_map_validator,
)
from sanitext_core.validation.shapes import Shape, detect_shape
from sanitext_core.validation.text_validator import build_text_validator

logger = get_logger(__name__)

T = TypeVar("T")

_BUILDERS: Dict[Shape, Builder] = {
    Shape.TEXT: build_text_validator,
    Shape.TEXT_LIST: build_list_validator,
    Shape.TEXT_MAP: build_map_validator,
}


class Sanitizer:
    """
    Validate and sanitize text, lists of text, and maps of text.

    Each Sanitizer holds a ValidatorCache. Pass one in to share compiled
    validators between sanitizers; sanitizers sharing a cache should use
    the same strict_rules setting, since the cache key is only (shape, rule).

    Rule parameters that do not apply to the value's shape (e.g. "unique"
    in a text rule) are ignored with a warning log by default. With
    strict_rules=True (or SANITEXT_STRICT_RULES=true) they raise
    ConfigError CFG_003 instead.

    Thread-Safety:
        Safe to share between threads. See ValidatorCache for how
        concurrent first-time compilation of the same rule is handled.

    Example:
        ```python
        sanitizer = Sanitizer()

        sanitizer.validate("  hello   world ", "max=40")  # "hello world"
        sanitizer.validate(["b", "a", "b"], "unique")  # ["a", "b"]
        sanitizer.validate({" k ": " v "}, "key=(min=1)")  # {"k": "v"}
        sanitizer.validate_optional(None, "min=3")  # None
        ```
    """

    def __init__(
        self, cache: Optional[ValidatorCache] = None, strict_rules: Optional[bool] = None
    ) -> None:
        """
        Initialize Sanitizer.

        Args:
            cache: Validator cache to use (default: a new private cache)
            strict_rules: Reject rule parameters unknown for the value's
                shape. Defaults to settings.strict_rules.
        """
        self.cache = cache if cache is not None else ValidatorCache()
        self.strict_rules = settings.strict_rules if strict_rules is None else strict_rules

    def compile(self, shape: Shape, rule: str = "") -> Validator:
        """
        Get the validator for a shape and rule, compiling it on first use.

        Surrounding whitespace in the rule is ignored.

        Args:
            shape: Shape of the values to validate
            rule: Rule string

        Returns:
            Validator function. A rule that failed to compile yields a
            validator that raises RuleSyntaxError or ConfigError.
        """
        rule = rule.strip()
        builder = functools.partial(_BUILDERS[shape], strict=self.strict_rules)
        return self.cache.get_or_build(shape, rule, builder)

    def validate(self, value: T, rule: str = "") -> T:
        """
        Sanitize a value according to a rule.

        Args:
            value: str, list/tuple of str, or mapping of str to str
            rule: Rule string for the value's shape

        Returns:
            New value of the same shape: str, list (tuple for tuple input),
            or dict

        Raises:
            UnsupportedTypeError: If the value has no supported shape (None
                included; use validate_optional() for optional values)
            RuleSyntaxError: If the rule is malformed
            ConfigError: If the rule parameters are invalid
            ValidationError: If the value violates a bound
        """
        shape = detect_shape(value)
        result = self.compile(shape, rule)(value)
        if isinstance(value, tuple):
            return tuple(result)  # type: ignore[return-value]
        return result

    def validate_optional(self, value: Optional[T], rule: str = "") -> Optional[T]:
        """
        Sanitize a value that may be absent.

        None is returned unchanged without compiling the rule. Any other
        value, including an empty one, is validated like validate().
        """
        if value is None:
            return None
        return self.validate(value, rule)

    def validate_text(self, value: str, rule: str = "") -> str:
        """Sanitize a single text value."""
        self._expect_shape(value, Shape.TEXT)
        return self.compile(Shape.TEXT, rule)(value)

    def validate_list(self, values: Sequence[str], rule: str = "") -> List[str]:
        """Sanitize a list of text values."""
        self._expect_shape(values, Shape.TEXT_LIST)
        return self.compile(Shape.TEXT_LIST, rule)(values)

    def validate_map(self, entries: Mapping[str, str], rule: str = "") -> Dict[str, str]:
        """Sanitize a map of text keys to text values."""
        self._expect_shape(entries, Shape.TEXT_MAP)
        return self.compile(Shape.TEXT_MAP, rule)(entries)

    @staticmethod
    def _expect_shape(value: Any, expected: Shape) -> None:
        shape = detect_shape(value)
        if shape is not expected:
            raise UnsupportedTypeError(
                f"expected a {expected.value} value, got {type(value).__name__}",
                details={"type": type(value).__name__, "expected": expected.value},
            )


# ============================================================
# PROCESS-WIDE DEFAULT SANITIZER
# ============================================================

_default_sanitizer: Optional[Sanitizer] = None
_default_lock = threading.Lock()


def get_default_sanitizer() -> Sanitizer:
    """
    Get the process-wide Sanitizer used by the module-level functions.

    Created on first call (double-checked locking) and kept for the life of
    the process.
    """
    global _default_sanitizer
    if _default_sanitizer is None:
        with _default_lock:
            if _default_sanitizer is None:
                _default_sanitizer = Sanitizer()
                logger.debug(
                    "default_sanitizer_created", strict_rules=_default_sanitizer.strict_rules
                )
    return _default_sanitizer


def validate(value: T, rule: str = "") -> T:
    """Sanitize a value with the default Sanitizer. See Sanitizer.validate()."""
    return get_default_sanitizer().validate(value, rule)


def validate_optional(value: Optional[T], rule: str = "") -> Optional[T]:
    """Sanitize an optional value with the default Sanitizer."""
    return get_default_sanitizer().validate_optional(value, rule)


def validate_text(value: str, rule: str = "") -> str:
    """Sanitize a text value with the default Sanitizer."""
    return get_default_sanitizer().validate_text(value, rule)


def validate_list(values: Sequence[str], rule: str = "") -> List[str]:
    """Sanitize a list of text values with the default Sanitizer."""
    return get_default_sanitizer().validate_list(values, rule)


def validate_map(entries: Mapping[str, str], rule: str = "") -> Dict[str, str]:
    """Sanitize a map of text with the default Sanitizer."""
    return get_default_sanitizer().validate_map(entries, rule)
