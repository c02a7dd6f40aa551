"""
Utilities for Sanitext Core.

Provides logging helpers and ordering utilities shared by the validators.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from .logger_factory import configure_logging, get_logger
from .ordering import dedup_sorted, sort_in_place

__all__ = [
    "get_logger",
    "configure_logging",
    "sort_in_place",
    "dedup_sorted",
]
