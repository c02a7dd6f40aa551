"""
Rule grammar for Sanitext.

Provides:
- parse_rule: rule string -> parameter map
- TextRuleOptions, ListRuleOptions, MapRuleOptions: typed build options

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from .options import ListRuleOptions, MapRuleOptions, RuleOptions, TextRuleOptions
from .parser import parse_rule

__all__ = [
    "parse_rule",
    "RuleOptions",
    "TextRuleOptions",
    "ListRuleOptions",
    "MapRuleOptions",
]
