"""
Unit tests for SanitextSettings.

Tests configuration loading, validation, helper functions,
and environment variable handling.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import pytest
from pydantic import ValidationError

from sanitext_core.config import SanitextSettings, get_config_summary

# ============================================================
# CONFIGURATION LOADING TESTS
# ============================================================


def test_default_configuration():
    """Test that default configuration loads successfully with all defaults."""
    settings = SanitextSettings()

    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.strict_rules == False


def test_environment_override(monkeypatch):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("SANITEXT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SANITEXT_LOG_FORMAT", "console")
    monkeypatch.setenv("SANITEXT_STRICT_RULES", "true")

    settings = SanitextSettings()

    assert settings.log_level == "DEBUG"
    assert settings.log_format == "console"
    assert settings.strict_rules == True


def test_unprefixed_variables_ignored(monkeypatch):
    """Test that variables without the SANITEXT_ prefix are not read."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    settings = SanitextSettings()
    assert settings.log_level == "INFO"


def test_dotenv_loading(tmp_path, monkeypatch):
    """Test loading configuration from .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("SANITEXT_STRICT_RULES=1\nSANITEXT_LOG_LEVEL=warning\nOTHER_KEY=x\n")
    monkeypatch.chdir(tmp_path)

    settings = SanitextSettings()

    assert settings.strict_rules == True
    assert settings.log_level == "WARNING"


def test_system_env_overrides_dotenv(tmp_path, monkeypatch):
    """Test that system environment variables have higher priority than .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("SANITEXT_LOG_FORMAT=console\n")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SANITEXT_LOG_FORMAT", "json")

    settings = SanitextSettings()
    assert settings.log_format == "json"  # System env wins


# ============================================================
# VALIDATION TESTS
# ============================================================


def test_invalid_log_level():
    """Test that invalid log level raises ValidationError."""
    with pytest.raises(ValidationError) as exc_info:
        SanitextSettings(log_level="VERBOSE")

    assert "log_level" in str(exc_info.value)


def test_log_level_case_insensitive():
    """Test that log level is case-insensitive and normalized to uppercase."""
    settings = SanitextSettings(log_level="debug")
    assert settings.log_level == "DEBUG"


def test_invalid_log_format():
    """Test that invalid log format raises ValidationError."""
    with pytest.raises(ValidationError):
        SanitextSettings(log_format="xml")


def test_log_format_case_insensitive():
    """Test that log format is case-insensitive and normalized to lowercase."""
    settings = SanitextSettings(log_format="CONSOLE")
    assert settings.log_format == "console"


def test_invalid_strict_rules():
    """Test that a non-boolean strict_rules value is rejected."""
    with pytest.raises(ValidationError):
        SanitextSettings(strict_rules="sometimes")


def test_assignment_validated():
    """Test that assignments go through validators."""
    settings = SanitextSettings()
    settings.log_level = "error"
    assert settings.log_level == "ERROR"

    with pytest.raises(ValidationError):
        settings.log_level = "LOUD"


# ============================================================
# HELPER FUNCTION TESTS
# ============================================================


def test_get_config_summary():
    """Test configuration summary grouping."""
    settings = SanitextSettings(log_level="WARNING", strict_rules=True)
    summary = get_config_summary(settings)

    assert summary == {
        "logging": {"level": "WARNING", "format": "json"},
        "rules": {"strict": True},
    }
