"""Shared error codes and exceptions for builders.

Hard validation failures (wrong child category, non-numeric sizes, missing
names) raise synchronously; nothing is written to the document first.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    MISSING_REQUIRED_ARGUMENT = "MISSING_REQUIRED_ARGUMENT"
    INVALID_CHILD = "INVALID_CHILD"  # Wrong capability for a composite slot
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"  # Only raised with STRICT_ENUMS
    UNKNOWN_BUILDER = "UNKNOWN_BUILDER"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class BuilderError(Exception):
    """Base exception for builder errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_ARGUMENT):
        super().__init__(message)
        self.code = code


class BuilderTypeError(BuilderError, TypeError):
    """Argument has the wrong category for the accessor or slot."""

    pass


class BuilderValueError(BuilderError, ValueError):
    """Argument is outside an enumerated set (strict mode only)."""

    def __init__(
        self,
        message: str,
        value: Any = None,
        allowed: Optional[tuple] = None,
    ):
        super().__init__(message, ErrorCode.INVALID_ENUM_VALUE)
        self.value = value
        self.allowed = allowed or ()


class UnknownBuilderError(BuilderError, KeyError):
    """No builder registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown builder: {name}", ErrorCode.UNKNOWN_BUILDER)
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class ConfigurationError(BuilderError):
    """Settings file could not be loaded."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR)


__all__ = [
    "ErrorCode",
    "BuilderError",
    "BuilderTypeError",
    "BuilderValueError",
    "UnknownBuilderError",
    "ConfigurationError",
]
