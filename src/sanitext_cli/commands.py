"""
Command implementations for the Sanitext CLI.

Each command returns a process exit code: 0 on success, 1 when the value
or the rule is rejected.
"""

import json
import sys
from typing import Any, Optional, TextIO

from sanitext_core.exceptions import SanitextError
from sanitext_core.rules import parse_rule
from sanitext_core.utils.logger_factory import get_logger
from sanitext_core.validation import Sanitizer, Shape

logger = get_logger(__name__)

SHAPE_CHOICES = ["auto", "text", "list", "map"]


def load_value(raw: str, shape: str) -> Any:
    """
    Turn raw command-line input into a value to validate.

    Args:
        raw: Input text
        shape: One of SHAPE_CHOICES. "text" uses raw as-is, "list" and "map"
            require JSON, "auto" tries JSON and falls back to text.

    Returns:
        str, list, or dict

    Raises:
        ValueError: If JSON is required but raw is not valid JSON
    """
    if shape == "text":
        return raw

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        if shape == "auto":
            return raw
        raise ValueError(f"--shape {shape} expects a JSON value")


def check_command(
    rule: str,
    value: Optional[str],
    shape: str = "auto",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Validate a value against a rule and print the sanitized result as JSON.

    Args:
        rule: Rule string
        value: Value to validate (read from stdin if None)
        shape: Shape selector (see load_value)
        stdin, stdout, stderr: Streams (default: the sys streams at call time)

    Returns:
        Exit code
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    raw = value if value is not None else (stdin or sys.stdin).read()

    try:
        data = load_value(raw, shape)
    except ValueError as e:
        print(f"error: {e}", file=stderr)
        return 1

    sanitizer = Sanitizer()
    try:
        if shape == "auto":
            result = sanitizer.validate(data, rule)
        else:
            validate_as = {
                Shape.TEXT: sanitizer.validate_text,
                Shape.TEXT_LIST: sanitizer.validate_list,
                Shape.TEXT_MAP: sanitizer.validate_map,
            }[Shape(shape)]
            result = validate_as(data, rule)
    except SanitextError as e:
        logger.info("check_failed", error_code=e.error_code, rule=rule)
        print(f"{e.error_code}: {e.message}", file=stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False), file=stdout)
    return 0


def parse_command(
    rule: str, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None
) -> int:
    """Print the parameter map of a rule as JSON."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    try:
        params = parse_rule(rule.strip())
    except SanitextError as e:
        print(f"{e.error_code}: {e.message}", file=stderr)
        return 1

    print(json.dumps(params, ensure_ascii=False, sort_keys=True), file=stdout)
    return 0
