"""
ValidatorCache - Memoization of compiled validators by (shape, rule).

Compiling a rule means parsing it and validating its options, so callers
that validate many values against the same rule should compile it once.
The cache stores one validator per (shape, rule) key for the lifetime of
the cache object.

Concurrency:
    Single dict reads and writes are atomic under the interpreter, and
    validators are pure functions of their rule. Two threads that miss on
    the same key may both build a validator and both publish it; the last
    write wins and either result behaves identically. Builds are therefore
    not locked or de-duplicated.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import copy
import threading
from typing import Any, Callable, Dict, Optional, Tuple

from sanitext_core.exceptions import ConfigError, RuleSyntaxError, SanitextError
from sanitext_core.utils.logger_factory import get_logger
from sanitext_core.validation.shapes import Shape

logger = get_logger(__name__)

Validator = Callable[[Any], Any]
Builder = Callable[[str], Validator]


class ValidatorCache:
    """
    In-memory store of compiled validators keyed by (shape, rule).

    Entries are never evicted. A rule that fails to compile is stored as a
    validator that raises the same build error on every call, so a bad rule
    fails fast and consistently without being parsed again.

    The cache does not know how validators were built. Sanitizers sharing
    one cache should be created with the same strict_rules setting.

    Attributes:
        stats: Lookup statistics (hits, misses, builds, build_failures)

    Example:
        ```python
        cache = ValidatorCache()
        validate = cache.get_or_build(Shape.TEXT, "max=5", build_text_validator)
        validate(" hi ")  # "hi"

        stats = cache.get_statistics()
        print(f"Hit rate: {stats['hit_rate']:.1%}")
        ```
    """

    def __init__(self) -> None:
        self._validators: Dict[Tuple[Shape, str], Validator] = {}

        # Counters only; the validator table itself is not locked
        self._stats_lock = threading.Lock()
        self.stats: Dict[str, int] = {
            "hits": 0,
            "misses": 0,
            "builds": 0,
            "build_failures": 0,
        }

    def get(self, shape: Shape, rule: str) -> Optional[Validator]:
        """Return the cached validator for (shape, rule), or None."""
        return self._validators.get((shape, rule))

    def put(self, shape: Shape, rule: str, validator: Validator) -> None:
        """Publish a validator for (shape, rule), replacing any previous entry."""
        self._validators[(shape, rule)] = validator

    def get_or_build(self, shape: Shape, rule: str, builder: Builder) -> Validator:
        """
        Return the cached validator for (shape, rule), building it on a miss.

        Args:
            shape: Value shape the validator is compiled for
            rule: Rule string (used verbatim as part of the key)
            builder: Function compiling the rule into a validator

        Returns:
            Validator function. If the rule failed to compile, the returned
            validator raises the build error when called.
        """
        validator = self.get(shape, rule)
        if validator is not None:
            self._count("hits")
            return validator

        self._count("misses")
        try:
            validator = builder(rule)
        except (RuleSyntaxError, ConfigError) as e:
            self._count("build_failures")
            logger.warning(
                "validator_build_failed",
                shape=shape.value,
                rule=rule,
                error_code=e.error_code,
                error=e.message,
            )
            validator = failing_validator(e)
        else:
            self._count("builds")
            logger.debug("validator_built", shape=shape.value, rule=rule)

        self.put(shape, rule, validator)
        return validator

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dict with hits, misses, builds, build_failures, total_requests,
            hit_rate and size
        """
        with self._stats_lock:
            stats: Dict[str, Any] = dict(self.stats)

        total = stats["hits"] + stats["misses"]
        stats["total_requests"] = total
        stats["hit_rate"] = stats["hits"] / total if total else 0.0
        stats["size"] = len(self._validators)
        return stats

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, key: object) -> bool:
        return key in self._validators

    def _count(self, name: str) -> None:
        with self._stats_lock:
            self.stats[name] += 1


def failing_validator(error: SanitextError) -> Validator:
    """
    Create a validator that always raises a copy of a build error.

    Each call raises its own copy so that concurrent callers never share a
    traceback.
    """

    def fail(value: Any) -> Any:
        err = copy.copy(error)
        err.details = dict(error.details)
        raise err

    return fail
