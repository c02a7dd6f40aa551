"""
Unit tests for the text validator.

Tests cover:
- Trimming and whitespace collapsing
- Control character removal (ZWJ and emoji sequences preserved)
- preserve-whitespace, preserve-newlines, replace-whitespaces
- asciionly and Unicode normalization forms
- min/max byte length bounds
- Build-time configuration errors

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import pytest

from sanitext_core.exceptions import ConfigError, RuleSyntaxError, ValidationError
from sanitext_core.validation import build_text_validator, clean_text


class TestDefaultRule:
    """Test the sanitizer with an empty rule."""

    @pytest.fixture
    def validate(self):
        """Provide a validator for the empty rule."""
        return build_text_validator("")

    def test_empty_string(self, validate):
        """Test empty string stays empty."""
        assert validate("") == ""

    def test_ascii_string(self, validate):
        """Test plain ASCII passes through."""
        assert validate("hi!") == "hi!"

    def test_trim_spaces(self, validate):
        """Test leading/trailing spaces are removed."""
        assert validate(" hi! ") == "hi!"

    def test_trim_unicode_spaces_and_newlines(self, validate):
        """Test boundary newlines and Unicode spaces are removed."""
        assert validate("  hi! \n ") == "hi!"
        assert validate("  hi!　") == "hi!"

    def test_only_spaces(self, validate):
        """Test whitespace-only input becomes empty."""
        assert validate("   ") == ""

    def test_nfc_normalization(self, validate):
        """Test decomposed characters are composed."""
        assert validate("è") == "è"
        assert validate("è") == "è"
        assert validate("ß") == "ß"

    def test_emoji_unchanged(self, validate):
        """Test emoji survive."""
        assert validate("😀") == "😀"
        assert validate("\U0001f600") == "😀"

    def test_emoji_with_modifiers_and_zwj(self, validate):
        """Test multi-codepoint emoji sequences survive intact."""
        value = "😀 👨‍👩‍👧‍👦 1️⃣ 💁🏽‍♂️ 🧑🏻‍🍼"
        assert validate(value) == value

    def test_collapse_whitespaces(self, validate):
        """Test runs of spaces collapse to one."""
        assert validate("hi   !") == "hi !"

    def test_replace_unicode_spaces(self, validate):
        """Test Unicode spaces become plain spaces."""
        assert validate("hi !") == "hi !"
        assert validate("h   i !") == "h i !"

    def test_tabs_become_spaces(self, validate):
        """Test tabs are converted and collapsed."""
        assert validate("hi\t !") == "hi !"

    def test_remove_control_chars(self, validate):
        """Test control and format characters are removed."""
        assert validate("he\x07l\u001el﻿o⁤") == "hello"

    def test_newlines_become_spaces(self, validate):
        """Test newlines are converted to spaces."""
        assert validate("hello\nworld") == "hello world"

    def test_multiple_newlines_collapse(self, validate):
        """Test multiple newlines collapse to a single space."""
        assert validate("hello\n\n\nworld") == "hello world"

    def test_newlines_and_spaces_collapse(self, validate):
        """Test mixed whitespace collapses to a single space."""
        assert validate("hello\n \n world") == "hello world"

    def test_carriage_returns_removed(self, validate):
        """Test carriage returns are dropped as control characters."""
        assert validate("hello\r\nworld") == "hello world"

    def test_returns_new_string_for_each_call(self, validate):
        """Test the validator holds no state between calls."""
        assert validate("  a  ") == "a"
        assert validate("  b  ") == "b"
        assert validate("  a  ") == "a"


class TestBounds:
    """Test min/max byte length bounds."""

    def test_min_length_ok(self):
        """Test value at least min bytes long after trimming."""
        assert build_text_validator("min=3")(" hi! ") == "hi!"

    def test_min_length_fail(self):
        """Test value shorter than min after trimming."""
        with pytest.raises(ValidationError) as exc_info:
            build_text_validator("min=3")(" hi ")

        assert exc_info.value.bound == "min"
        assert exc_info.value.error_code == "VAL_003"
        assert exc_info.value.details["limit"] == 3
        assert exc_info.value.details["length"] == 2

    def test_min_length_empty_string(self):
        """Test empty and blank values fail a min bound."""
        validate = build_text_validator("min=3")
        with pytest.raises(ValidationError):
            validate("")
        with pytest.raises(ValidationError):
            validate("  ")

    def test_max_length_ok(self):
        """Test value within max after trimming."""
        assert build_text_validator("max=5")("  hi!  ") == "hi!"

    def test_max_length_fail(self):
        """Test value longer than max."""
        with pytest.raises(ValidationError) as exc_info:
            build_text_validator("max=5")("hello world")

        assert exc_info.value.bound == "max"
        assert "longer than 5" in exc_info.value.message

    def test_min_and_max(self):
        """Test both bounds together."""
        validate = build_text_validator("min=2,max=5")
        assert validate("hello") == "hello"
        assert validate("hello   ") == "hello"
        assert validate("hi -!   ") == "hi -!"
        with pytest.raises(ValidationError):
            validate("hello!   ")
        with pytest.raises(ValidationError):
            validate("hi - !!   ")

    def test_bounds_count_utf8_bytes(self):
        """Test length is measured in encoded bytes, not characters."""
        validate = build_text_validator("max=4")
        assert validate("èè") == "èè"
        with pytest.raises(ValidationError):
            validate("èèè")


class TestPreserveWhitespace:
    """Test the preserve-whitespace flag."""

    @pytest.fixture
    def validate(self):
        """Provide a validator keeping whitespace."""
        return build_text_validator("preserve-whitespace")

    def test_spaces_kept(self, validate):
        """Test runs of spaces are not collapsed."""
        assert validate("hi   !") == "hi   !"

    def test_newlines_kept(self, validate):
        """Test inner newlines are kept."""
        assert validate("hi   !\n \n\n hi") == "hi   !\n \n\n hi"

    def test_tabs_kept(self, validate):
        """Test inner tabs are kept."""
        assert validate("hi\t   !\n \n\n hi") == "hi\t   !\n \n\n hi"

    def test_unicode_spaces_kept(self, validate):
        """Test Unicode spaces are kept as-is."""
        assert validate("hi !") == "hi !"
        assert validate("h   i !") == "h   i !"

    def test_ends_still_trimmed(self, validate):
        """Test boundary whitespace is still removed."""
        assert validate("  hi  ") == "hi"

    def test_with_preserve_newlines_emits_newline_once(self):
        """Test a newline is not duplicated when both flags are set."""
        validate = build_text_validator("preserve-whitespace,preserve-newlines")
        assert validate("a \n b") == "a \n b"


class TestPreserveNewlines:
    """Test the preserve-newlines flag."""

    @pytest.fixture
    def validate(self):
        """Provide a validator keeping newlines."""
        return build_text_validator("preserve-newlines")

    def test_single_newline(self, validate):
        """Test an inner newline is kept."""
        assert validate("hello\nworld") == "hello\nworld"

    def test_newlines_at_ends_removed(self, validate):
        """Test newlines at the ends are always trimmed."""
        assert validate("   \nhello\nworl\nd\n") == "hello\nworl\nd"

    def test_multiple_newlines(self, validate):
        """Test consecutive newlines are all kept."""
        assert validate("hello\n\n\nworld") == "hello\n\n\nworld"

    def test_carriage_return_removed(self, validate):
        """Test CRLF becomes LF."""
        assert validate("hello\r\nworld") == "hello\nworld"

    def test_spaces_around_newlines(self, validate):
        """Test spaces after a newline are collapsed into it."""
        value = "hello \n world-hello   \n\n \n world"
        assert validate(value) == "hello \nworld-hello \n\n\nworld"


class TestReplaceWhitespaces:
    """Test the replace-whitespaces flag."""

    def test_replace_and_collapse(self):
        """Test a whitespace run becomes one underscore."""
        assert build_text_validator("replace-whitespaces")("hi   !") == "hi_!"

    def test_replace_newlines(self):
        """Test newlines are replaced too."""
        assert build_text_validator("replace-whitespaces")("hi  \n \n\n !") == "hi_!"

    def test_replace_unicode_spaces(self):
        """Test Unicode spaces are replaced."""
        validate = build_text_validator("replace-whitespaces")
        assert validate("hi !") == "hi_!"
        assert validate("h  \n\r i !") == "h_i_!"

    def test_trim_before_replace(self):
        """Test boundary whitespace is trimmed, not replaced."""
        assert build_text_validator("replace-whitespaces")("  hi   ! \n") == "hi_!"

    def test_with_preserve_newlines(self):
        """Test newlines survive while other whitespace is replaced."""
        validate = build_text_validator("replace-whitespaces,preserve-newlines")
        assert validate("hi   !") == "hi_!"
        assert validate("hi  \n \n\n !") == "hi_\n\n\n!"
        assert validate("hi !\n !") == "hi_!\n!"
        assert validate("h  \n\r i !") == "h_\ni_!"


class TestAsciiOnly:
    """Test the asciionly flag."""

    def test_ascii_allowed(self):
        """Test ASCII text is kept and whitespace still collapsed."""
        assert build_text_validator("asciionly")("hello   !\nworld") == "hello ! world"

    def test_non_ascii_removed(self):
        """Test non-ASCII characters are dropped."""
        assert build_text_validator("asciionly")("日本語😊") == ""

    def test_keycap_keeps_digit(self):
        """Test the ASCII base of a keycap sequence survives."""
        assert build_text_validator("asciionly")("1️⃣") == "1"

    def test_runs_after_normalization(self):
        """Test decomposed and composed forms are removed alike."""
        assert build_text_validator("asciionly")("ä ä") == ""

    def test_with_nfd_keeps_base_letter(self):
        """Test NFD splits off the accent, leaving the ASCII letter."""
        assert build_text_validator("asciionly,unorm=nfd")("è") == "e"


class TestNormalizationForms:
    """Test the unorm parameter."""

    def test_nfd_keeps_decomposed(self):
        """Test NFD leaves decomposed text decomposed."""
        assert build_text_validator("unorm=nfd")("è") == "è"

    def test_nfd_decomposes(self):
        """Test NFD decomposes a precomposed character."""
        assert build_text_validator("unorm=nfd")("è") == "è"

    def test_nfkc(self):
        """Test NFKC folds compatibility characters."""
        assert build_text_validator("unorm=nfkc")("①") == "1"

    def test_nfkd(self):
        """Test NFKD folds and decomposes."""
        assert build_text_validator("unorm=nfkd")("è①") == "è1"

    def test_form_name_case_insensitive(self):
        """Test upper-case form names are accepted."""
        assert build_text_validator("unorm=NFD")("è") == "è"


class TestBuildErrors:
    """Test configuration errors raised when compiling a rule."""

    def test_min_zero(self):
        """Test min must be positive."""
        with pytest.raises(ConfigError) as exc_info:
            build_text_validator("min=0")

        assert exc_info.value.error_code == "CFG_001"
        assert "'min'" in exc_info.value.message

    def test_max_negative(self):
        """Test max must be positive."""
        with pytest.raises(ConfigError):
            build_text_validator("max=-1")

    def test_min_not_integer(self):
        """Test min must be an integer."""
        with pytest.raises(ConfigError):
            build_text_validator("min=abc")

    def test_min_greater_than_max(self):
        """Test inverted bounds."""
        with pytest.raises(ConfigError) as exc_info:
            build_text_validator("min=5,max=1")

        assert exc_info.value.error_code == "CFG_002"

    def test_invalid_unorm(self):
        """Test unknown normalization form."""
        with pytest.raises(ConfigError) as exc_info:
            build_text_validator("unorm=invalid")

        assert exc_info.value.details["problems"][0]["parameter"] == "unorm"

    def test_syntax_error(self):
        """Test malformed rules raise RuleSyntaxError."""
        with pytest.raises(RuleSyntaxError):
            build_text_validator("min=(3")

    def test_unknown_parameter_ignored(self):
        """Test unknown parameters are ignored by default."""
        assert build_text_validator("sort,min=1")(" a ") == "a"

    def test_unknown_parameter_strict(self):
        """Test unknown parameters are rejected in strict mode."""
        with pytest.raises(ConfigError) as exc_info:
            build_text_validator("sort,min=1", strict=True)

        assert exc_info.value.error_code == "CFG_003"
        assert exc_info.value.details["parameters"] == ["sort"]

    def test_empty_bound_value_ignored(self):
        """Test 'min=' counts as no bound."""
        assert build_text_validator("min=")("") == ""


class TestCleanText:
    """Test clean_text() directly."""

    def test_default(self):
        """Test default policy."""
        assert clean_text("a \t\n b") == "a b"

    def test_does_not_trim(self):
        """Test clean_text leaves boundary spaces for the caller."""
        assert clean_text(" a ") == " a "

    def test_zero_width_joiner_kept(self):
        """Test ZWJ is kept while other format characters go."""
        assert clean_text("a‍b​c") == "a‍bc"
