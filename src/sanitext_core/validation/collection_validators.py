"""
Collection validators - lists of text and maps of text to text.

Both validators check the element/entry count of the input first and then
run every element (or every key and value) through a text validator
compiled from the matching sub-rule. The first failing element stops the
run; no partial result is returned.

List rule parameters:
- ``min=int`` / ``max=int``: element count bounds
- ``sort``: sort the result
- ``unique``: sort the result and drop duplicates
- ``value=(rule)``: text rule applied to each element

Map rule parameters:
- ``min=int`` / ``max=int``: entry count bounds
- ``key=(rule)``: text rule applied to each key
- ``value=(rule)``: text rule applied to each value

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Callable, Dict, List, Mapping, Optional, Sequence

from sanitext_core.exceptions import ValidationError
from sanitext_core.rules.options import ListRuleOptions, MapRuleOptions
from sanitext_core.rules.parser import parse_rule
from sanitext_core.utils.logger_factory import get_logger
from sanitext_core.utils.ordering import dedup_sorted, sort_in_place
from sanitext_core.validation.text_validator import build_text_validator

logger = get_logger(__name__)

ListValidator = Callable[[Sequence[str]], List[str]]
MapValidator = Callable[[Mapping[str, str]], Dict[str, str]]


def build_list_validator(rule: str = "", strict: bool = False) -> ListValidator:
    """
    Compile a rule string into a list-of-text validator.

    Count bounds are checked against the input, before elements are
    sanitized and before duplicates are removed. A "min=2,unique" rule
    therefore accepts ["a", "a"] and returns ["a"].

    Args:
        rule: List rule, e.g. "max=10,unique,value=(max=40)"
        strict: Reject parameters unknown to the rule's shape

    Returns:
        Function mapping a list of text to a new sanitized list

    Raises:
        RuleSyntaxError: If the rule or the element sub-rule is malformed
        ConfigError: If the rule or the element sub-rule is invalid

    Example:
        ```python
        validate = build_list_validator("unique")
        validate(["c", "a", "a", "b", "c"])  # ["a", "b", "c"]
        ```
    """
    options = ListRuleOptions.from_params(parse_rule(rule), strict=strict)
    element_validator = build_text_validator(options.value, strict=strict)

    min_count = options.min
    max_count = options.max
    sort_result = options.sort or options.unique
    unique = options.unique

    def validate_list(values: Sequence[str]) -> List[str]:
        _check_count(len(values), min_count, max_count)

        result: List[str] = []
        for index, value in enumerate(values):
            try:
                result.append(element_validator(value))
            except ValidationError as e:
                e.details.setdefault("index", index)
                raise

        if sort_result:
            sort_in_place(result)
        if unique:
            result = dedup_sorted(result)

        return result

    return validate_list


def build_map_validator(rule: str = "", strict: bool = False) -> MapValidator:
    """
    Compile a rule string into a map-of-text validator.

    Keys and values are sanitized independently into a fresh dict. When two
    input keys sanitize to the same key, the entry processed last wins.

    Args:
        rule: Map rule, e.g. "max=20,key=(min=2,asciionly),value=(max=100)"
        strict: Reject parameters unknown to the rule's shape

    Returns:
        Function mapping a dict of text to a new sanitized dict

    Raises:
        RuleSyntaxError: If the rule or a key/value sub-rule is malformed
        ConfigError: If the rule or a key/value sub-rule is invalid

    Example:
        ```python
        validate = build_map_validator("key=(min=2)")
        validate({"foo": " hi "})  # {"foo": "hi"}
        validate({"1": "h"})  # raises ValidationError
        ```
    """
    options = MapRuleOptions.from_params(parse_rule(rule), strict=strict)
    key_validator = build_text_validator(options.key, strict=strict)
    value_validator = build_text_validator(options.value, strict=strict)

    min_count = options.min
    max_count = options.max

    def validate_map(entries: Mapping[str, str]) -> Dict[str, str]:
        _check_count(len(entries), min_count, max_count)

        result: Dict[str, str] = {}
        for key, value in entries.items():
            try:
                clean_key = key_validator(key)
                result[clean_key] = value_validator(value)
            except ValidationError as e:
                e.details.setdefault("key", key)
                raise

        return result

    return validate_map


def _check_count(count: int, min_count: Optional[int], max_count: Optional[int]) -> None:
    if min_count is not None and count < min_count:
        logger.debug("collection_validation_failed", reason="too_few", count=count, min=min_count)
        raise ValidationError(
            f"value is shorter than {min_count}",
            details={"bound": "min", "limit": min_count, "length": count},
        )
    if max_count is not None and count > max_count:
        logger.debug("collection_validation_failed", reason="too_many", count=count, max=max_count)
        raise ValidationError(
            f"value is longer than {max_count}",
            details={"bound": "max", "limit": max_count, "length": count},
        )
