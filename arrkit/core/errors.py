"""Error Hierarchy — typed, categorized exceptions for all arrkit failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only input validation raises; hashing problems are reported, never raised
    - to_dict() produces the envelope the CLI logs and prints

Design Decisions:
    - Single hierarchy with ArrkitError base: the CLI shell catches one type
    - InvalidArgumentError subclasses ValueError: callers using plain `except ValueError` keep working
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and CLI exit handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"


class ArrkitError(Exception):
    """Base exception for all arrkit errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
            }
        }


# ─── Validation Errors ───────────────────────────────────────────

class InvalidArgumentError(ArrkitError, ValueError):
    """Argument failed validation (bad count, conflicting options, malformed pairs)."""
    def __init__(self, message: str, argument: str, code: str = "INVALID_ARGUMENT"):
        super().__init__(
            message, code, ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        )
        self.argument = argument


class EmptySourceError(InvalidArgumentError):
    """Operation needs at least one element to choose from."""
    def __init__(self, argument: str = "data"):
        super().__init__(
            f"{argument}: source is empty, nothing to choose from",
            argument, code="EMPTY_SOURCE",
        )


# ─── Reported Conditions ─────────────────────────────────────────

class UnsupportedValueError(ArrkitError):
    """Value kind the structural hasher cannot render. Logged, not raised."""
    def __init__(self, key: Any, value: Any):
        super().__init__(
            f"only scalars, mappings, sequences and None supported. "
            f"key: {key!r}, type: {type(value).__name__}",
            "UNSUPPORTED_VALUE", ErrorCategory.UNSUPPORTED, ErrorSeverity.WARNING,
        )
        self.key = key
        self.value_type = type(value).__name__
