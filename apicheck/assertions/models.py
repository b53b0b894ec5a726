"""
Assertion result models.

This module defines data structures for assertion outcomes,
including detailed failure information, and the exception that
carries a failed outcome out of a hard check.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # e.g., empty response, unreadable body


class CheckMode(str, Enum):
    """How a non-passing outcome is handled once reported."""
    SOFT = "soft"  # record and carry on
    HARD = "hard"  # record, then raise CheckFailed


class MissingPropertyPolicy(str, Enum):
    """How a non-empty check treats a record that lacks the property."""
    STRINGIFY = "stringify"  # absent reads as "undefined", which is non-empty
    FAIL = "fail"


class QueryMatch(str, Enum):
    """How a request is judged to mention a property name."""
    SUBSTRING = "substring"  # anywhere in the raw query string
    EXACT = "exact"  # as a query parameter name


@dataclass
class AssertionResult:
    """
    Result of a single assertion check.

    Attributes:
        status: Whether the assertion passed, failed, or errored
        message: Human-readable description of the result
        key: The record key that was evaluated, if any
        expected: What was expected (for comparison assertions)
        actual: What was actually found
        details: Additional context for debugging
    """
    status: AssertionStatus
    message: str
    key: str | None = None
    expected: Any = None
    actual: Any = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    def require(self) -> AssertionResult:
        """
        Raise CheckFailed unless this result passed.

        Used inside declared predicates to stop at the first failing
        sub-check.
        """
        if not self.passed:
            raise CheckFailed(self)
        return self

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.status == AssertionStatus.PASSED:
            return f"✅ PASS: {self.message}"

        icon = "❌" if self.status == AssertionStatus.FAILED else "⚠️"
        lines = [f"{icon} {self.status.value.upper()}: {self.message}"]

        if self.key:
            lines.append(f"   Key: {self.key}")

        if self.expected is not None:
            lines.append(f"   Expected: {_format_value(self.expected)}")

        if self.actual is not None:
            lines.append(f"   Actual:   {_format_value(self.actual)}")

        if self.details:
            for key, value in self.details.items():
                lines.append(f"   {key}: {_format_value(value)}")

        return "\n".join(lines)

    @classmethod
    def passed_result(
        cls,
        message: str,
        key: str | None = None,
        actual: Any = None,
    ) -> AssertionResult:
        """Create a passing result."""
        return cls(
            status=AssertionStatus.PASSED,
            message=message,
            key=key,
            actual=actual,
        )

    @classmethod
    def failed_result(
        cls,
        message: str,
        key: str | None = None,
        expected: Any = None,
        actual: Any = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create a failing result."""
        return cls(
            status=AssertionStatus.FAILED,
            message=message,
            key=key,
            expected=expected,
            actual=actual,
            details=details or {},
        )

    @classmethod
    def error_result(
        cls,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create an error result (assertion couldn't be evaluated)."""
        return cls(
            status=AssertionStatus.ERROR,
            message=message,
            key=key,
            details=details or {},
        )

    @classmethod
    def from_bool(cls, outcome: bool, message: str) -> AssertionResult:
        """Wrap a bare predicate outcome."""
        if outcome:
            return cls.passed_result(message)
        return cls.failed_result(message, expected=True, actual=False)


class CheckFailed(AssertionError):
    """
    A check did not pass.

    Raised by hard checks after the outcome has been reported, and by
    AssertionResult.require() inside declared predicates. `reported`
    is True when the outcome is already in a report.
    """

    def __init__(self, result: AssertionResult, reported: bool = False):
        super().__init__(result.message)
        self.result = result
        self.reported = reported


def _format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, dict)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted
