"""
Value shapes supported by Sanitext.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from sanitext_core.exceptions import UnsupportedTypeError


class Shape(str, Enum):
    """The closed set of value kinds a validator can be compiled for."""

    TEXT = "text"
    TEXT_LIST = "list"
    TEXT_MAP = "map"


def detect_shape(value: Any) -> Shape:
    """
    Determine the shape of a value.

    Args:
        value: Candidate value

    Returns:
        Shape.TEXT for str, Shape.TEXT_LIST for a list or tuple of str,
        Shape.TEXT_MAP for a mapping whose keys and values are all str

    Raises:
        UnsupportedTypeError: For any other value, including None, bytes,
            and collections holding non-text items
    """
    if isinstance(value, str):
        return Shape.TEXT

    if isinstance(value, (list, tuple)):
        if all(isinstance(item, str) for item in value):
            return Shape.TEXT_LIST
        raise _unsupported(value, "list items must all be str")

    if isinstance(value, Mapping):
        if all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
            return Shape.TEXT_MAP
        raise _unsupported(value, "map keys and values must all be str")

    raise _unsupported(value, "expected str, list of str, or map of str to str")


def _unsupported(value: Any, reason: str) -> UnsupportedTypeError:
    type_name = type(value).__name__
    return UnsupportedTypeError(
        f"cannot find a validator for type {type_name}: {reason}",
        details={"type": type_name},
    )
