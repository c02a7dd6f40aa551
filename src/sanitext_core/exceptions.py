"""
Exception hierarchy for Sanitext.

Defines all exception types with error codes and correlation IDs.
Build-time errors (rule syntax, rule configuration) are raised once when a
validator is compiled; validation errors are raised per call.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

import uuid
from typing import Any, Dict, Optional


class SanitextError(Exception):
    """
    Base exception for all Sanitext errors.

    Provides standard error attributes: message, error_code, details,
    correlation_id.

    Attributes:
        message: Human-readable error message
        error_code: Programmatic error code (e.g., "VAL_003")
        details: Additional context (dict)
        correlation_id: UUID for tracing across layers
        original_exception: Wrapped exception (if any)

    Example:
        raise SanitextError(
            message="Operation failed",
            error_code="ERR_UNKNOWN",
            details={"rule": "min=3"},
        )
    """

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize SanitextError.

        Args:
            message: Error message
            error_code: Error code for programmatic handling
            details: Additional context dict
            correlation_id: UUID for request tracing
            original_exception: Original wrapped exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with all error information
        """
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "correlation_id": self.correlation_id,
            "original_error": str(self.original_exception) if self.original_exception else None,
        }


# === Build-time Exceptions ===


class RuleSyntaxError(SanitextError):
    """
    Raised when a rule string is not well-formed.

    Error Codes:
        SYN_001: Unbalanced parentheses, empty field, or stray "="
    """

    def __init__(self, message: str, error_code: str = "SYN_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class ConfigError(SanitextError):
    """
    Raised when a well-formed rule carries invalid parameters.

    Error Codes:
        CFG_001: Invalid parameter value (bad integer, unknown unorm form)
        CFG_002: Parameter "max" is smaller than parameter "min"
        CFG_003: Unknown parameter for the target shape (strict mode)
    """

    def __init__(self, message: str, error_code: str = "CFG_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


# === Per-call Exceptions ===


class ValidationError(SanitextError):
    """
    Raised when a value violates a configured bound.

    Error Codes:
        VAL_003: Value length or element count out of range

    The violated bound ("min" or "max") is available in details["bound"].
    """

    def __init__(self, message: str, error_code: str = "VAL_003", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)

    @property
    def bound(self) -> Optional[str]:
        """Name of the violated bound, if known."""
        return self.details.get("bound")


class UnsupportedTypeError(SanitextError):
    """
    Raised when a value is not text, a list of text, or a map of text.

    Error Codes:
        TYPE_001: No validator exists for the value's type
    """

    def __init__(self, message: str, error_code: str = "TYPE_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
