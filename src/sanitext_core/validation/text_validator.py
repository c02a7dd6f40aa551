"""
Text validator - Unicode-aware sanitizer for single text values.

A text validator is compiled once from a rule and then applied to any
number of values. Each call performs:

1. Unicode normalization (NFC unless ``unorm`` selects another form)
2. Trimming of leading/trailing Unicode whitespace
3. A single pass that drops control characters, optionally drops
   non-ASCII characters, and applies the whitespace policy
4. A second trim, since step 3 can expose whitespace at the ends
5. Length bounds, measured in UTF-8 bytes

Supported rule parameters:
- ``min=int`` / ``max=int``: byte length bounds
- ``preserve-whitespace``: keep whitespace characters as-is, do not collapse
- ``preserve-newlines``: keep line feeds even when collapsing whitespace
- ``replace-whitespaces``: emit an underscore for each (collapsed) whitespace run
- ``asciionly``: drop every character above U+007F
- ``unorm=nfc|nfd|nfkc|nfkd``: Unicode normalization form

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import unicodedata
from typing import Callable

from sanitext_core.exceptions import ValidationError
from sanitext_core.rules.options import TextRuleOptions
from sanitext_core.rules.parser import parse_rule
from sanitext_core.utils.logger_factory import get_logger

logger = get_logger(__name__)

TextValidator = Callable[[str], str]

# Tab and line feed go through the whitespace policy; ZWJ joins emoji sequences
_KEPT_CONTROLS = frozenset("\t\n\u200d")
_CONTROL_CATEGORIES = frozenset({"Cc", "Cf", "Co", "Cs"})


def build_text_validator(rule: str = "", strict: bool = False) -> TextValidator:
    """
    Compile a rule string into a text validator.

    Args:
        rule: Text rule, e.g. "min=3,max=40,preserve-newlines"
        strict: Reject parameters unknown to text rules

    Returns:
        Function mapping a text value to its sanitized form

    Raises:
        RuleSyntaxError: If the rule is malformed
        ConfigError: If the rule parameters are invalid

    Example:
        ```python
        validate = build_text_validator("max=5")
        validate("  hi!  ")  # "hi!"
        validate("hello world")  # raises ValidationError
        ```
    """
    options = TextRuleOptions.from_params(parse_rule(rule), strict=strict)
    return text_validator_from_options(options)


def text_validator_from_options(options: TextRuleOptions) -> TextValidator:
    """Create a text validator from already validated options."""
    form = options.unicode_form
    min_len = options.min
    max_len = options.max
    preserve_newlines = options.preserve_newlines
    replace_whitespaces = options.replace_whitespaces
    preserve_whitespace = options.preserve_whitespace
    ascii_only = options.ascii_only

    def validate_text(value: str) -> str:
        result = unicodedata.normalize(form, value).strip()
        result = clean_text(
            result,
            preserve_newlines=preserve_newlines,
            replace_whitespaces=replace_whitespaces,
            preserve_whitespace=preserve_whitespace,
            ascii_only=ascii_only,
        ).strip()

        size = len(result.encode("utf-8"))
        if min_len is not None and size < min_len:
            logger.debug("text_validation_failed", reason="too_short", size=size, min=min_len)
            raise ValidationError(
                f"value is shorter than {min_len}",
                details={"bound": "min", "limit": min_len, "length": size},
            )
        if max_len is not None and size > max_len:
            logger.debug("text_validation_failed", reason="too_long", size=size, max=max_len)
            raise ValidationError(
                f"value is longer than {max_len}",
                details={"bound": "max", "limit": max_len, "length": size},
            )

        return result

    return validate_text


def clean_text(
    value: str,
    preserve_newlines: bool = False,
    replace_whitespaces: bool = False,
    preserve_whitespace: bool = False,
    ascii_only: bool = False,
) -> str:
    """
    Strip control characters and apply the whitespace policy in one pass.

    Control characters (categories Cc, Cf, Co, Cs) are removed except tab,
    line feed and the zero-width joiner. Whitespace runs are collapsed to
    their first character unless preserve_whitespace is set; that character
    becomes "_" with replace_whitespaces, a plain space by default, or
    stays as-is with preserve_whitespace.

    Args:
        value: Text to clean (already normalized and trimmed)
        preserve_newlines: Emit every line feed, even inside collapsed runs
        replace_whitespaces: Emit "_" instead of whitespace
        preserve_whitespace: Keep every whitespace character unchanged
        ascii_only: Drop characters above U+007F

    Returns:
        Cleaned text (not trimmed)

    Example:
        >>> clean_text("hello \\n\\n world")
        'hello world'
        >>> clean_text("hello \\n\\n world", preserve_newlines=True)
        'hello \\n\\nworld'
    """
    out = []
    last_space = False

    for char in value:
        if ascii_only and ord(char) > 127:
            continue

        if char not in _KEPT_CONTROLS and unicodedata.category(char) in _CONTROL_CATEGORIES:
            continue

        if not char.isspace():
            last_space = False
            out.append(char)
            continue

        if preserve_newlines and char == "\n":
            last_space = True
            out.append("\n")
            continue

        if last_space and not preserve_whitespace:
            continue

        last_space = True
        if replace_whitespaces:
            out.append("_")
        elif not preserve_whitespace:
            out.append(" ")
        else:
            out.append(char)

    return "".join(out)
