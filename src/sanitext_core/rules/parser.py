"""
Rule grammar parser.

A rule is a comma-separated list of items. Each item is either a flag
(``unique``) or a ``key=value`` pair (``min=3``). A field wrapped in one
pair of parentheses that spans the whole field has that layer stripped,
which is how sub-rules are nested:

    min=1,value=(min=2,max=10)  ->  {"min": "1", "value": "min=2,max=10"}

Commas and equals signs inside parentheses are not separators. Characters
above ASCII are payload and never treated as punctuation.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Dict, Optional

from sanitext_core.exceptions import RuleSyntaxError


def parse_rule(rule: str) -> Dict[str, str]:
    """
    Parse a rule string into a parameter map.

    Flags are stored with an empty string value. A later duplicate key
    overwrites an earlier one. An empty rule yields an empty map.

    Args:
        rule: Rule string, e.g. "min=3,max=40,preserve-newlines"

    Returns:
        Dict mapping parameter names to values ("" for flags)

    Raises:
        RuleSyntaxError: If parentheses are unbalanced, a key or a
            parenthesized field is empty, an item is empty, or an item
            holds more than one "=" outside parentheses

    Example:
        >>> parse_rule("foo=bar,2=1,me")
        {'foo': 'bar', '2': '1', 'me': ''}
        >>> parse_rule("foo=((bar))")
        {'foo': '(bar)'}
    """
    params: Dict[str, str] = {}
    if not rule:
        return params

    depth = 0
    start = 0
    group_open = -1
    group_close = -1
    key: Optional[str] = None

    for i, char in enumerate(rule):
        if ord(char) > 127:
            continue

        if char == "(":
            if depth == 0:
                group_open = i
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise _syntax_error("unmatched closing parenthesis", rule, i)
            if depth == 0:
                group_close = i
        elif depth == 0 and char in ",=":
            field = _close_field(rule, start, i, group_open, group_close)
            if char == "=":
                if key is not None:
                    raise _syntax_error("unexpected '=' in value", rule, i)
                if not field:
                    raise _syntax_error("empty key before '='", rule, i)
                key = field
            else:
                _store(params, key, field, rule, i)
                key = None
            start = i + 1

    if depth != 0:
        raise _syntax_error("unbalanced opening parenthesis", rule, len(rule))

    # A trailing comma leaves nothing to close
    if start < len(rule) or key is not None:
        field = _close_field(rule, start, len(rule), group_open, group_close)
        _store(params, key, field, rule, len(rule))

    return params


def _close_field(rule: str, start: int, end: int, group_open: int, group_close: int) -> str:
    """Return rule[start:end], minus one layer of parentheses spanning all of it."""
    if group_open == start and group_close == end - 1:
        inner = rule[start + 1 : end - 1]
        if not inner:
            raise _syntax_error("empty parenthesized field", rule, start)
        return inner
    return rule[start:end]


def _store(params: Dict[str, str], key: Optional[str], field: str, rule: str, pos: int) -> None:
    if key is None:
        if not field:
            raise _syntax_error("empty item", rule, pos)
        params[field] = ""
    else:
        params[key] = field


def _syntax_error(reason: str, rule: str, pos: int) -> RuleSyntaxError:
    return RuleSyntaxError(
        f"invalid rule string: {reason} at position {pos}",
        details={"rule": rule, "position": pos, "reason": reason},
    )
