"""
Unit test fixtures.

Isolates unit tests from environment variables (.env file)
to ensure tests verify actual default values.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import os

import pytest

from sanitext_core.validation import Sanitizer, ValidatorCache

# Environment variables that affect SanitextSettings defaults
CONFIG_ENV_VARS = [
    "SANITEXT_LOG_LEVEL",
    "SANITEXT_LOG_FORMAT",
    "SANITEXT_STRICT_RULES",
]


@pytest.fixture(autouse=True)
def clean_env_for_unit_tests(monkeypatch, tmp_path):
    """
    Remove all config-related environment variables and change working
    directory to avoid loading .env file.
    """
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    original_dir = os.getcwd()
    os.chdir(tmp_path)
    yield
    os.chdir(original_dir)


@pytest.fixture
def cache():
    """Provide an empty ValidatorCache."""
    return ValidatorCache()


@pytest.fixture
def sanitizer(cache):
    """Provide a lenient Sanitizer with its own cache."""
    return Sanitizer(cache=cache, strict_rules=False)
