"""
Ordering helpers for list validators.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import List, TypeVar

T = TypeVar("T")


def sort_in_place(items: List[T]) -> None:
    """
    Sort a list ascending using the natural ``<`` order of its elements.

    Strings compare by code point, which matches byte order of their
    UTF-8 encoding.
    """
    items.sort()


def dedup_sorted(items: List[T]) -> List[T]:
    """
    Remove adjacent duplicates from an already sorted list.

    Single forward pass; the input is not modified. If the input is not
    sorted, non-adjacent duplicates survive.

    Args:
        items: Sorted list

    Returns:
        New list without adjacent duplicates

    Example:
        >>> dedup_sorted(["a", "a", "b", "c", "c"])
        ['a', 'b', 'c']
    """
    if not items:
        return list(items)

    result = [items[0]]
    for item in items[1:]:
        if item != result[-1]:
            result.append(item)

    return result
