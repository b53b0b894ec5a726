"""
Assertion engine for evaluating checks on response data.

This module provides the comparison primitives the helpers are built
from. Every primitive returns an AssertionResult; none of them raise
or report anything on their own.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Mapping

from ..host.models import MISSING, record_field, stringify
from .models import AssertionResult, MissingPropertyPolicy


class AssertionEngine:
    """
    Engine for running assertions on response values and records.

    Supports these assertion types:
    - equals: Check a value equals an expected value
    - below: Check a number is strictly below a ceiling
    - has_keys: Check a record carries every named key
    - non_empty: Check a record's value stringifies to something non-empty
    - before: Check one instant is strictly earlier than another

    Example:
        engine = AssertionEngine()
        record = {"id": 1, "name": "widget"}

        result = engine.has_keys(record, ["id", "name"])
        result = engine.non_empty(record, "name")
        result = engine.below(120, 5000)
    """

    def equals(self, actual: Any, expected: Any, label: str = "value") -> AssertionResult:
        """
        Assert that a value equals an expected value.

        Args:
            actual: The value found
            expected: The value required
            label: What the value is, for messages

        Returns:
            AssertionResult indicating pass/fail
        """
        if actual == expected:
            return AssertionResult.passed_result(
                message=f"{label.capitalize()} matches expected",
                actual=actual,
            )
        return AssertionResult.failed_result(
            message=f"{label.capitalize()} does not match",
            expected=expected,
            actual=actual,
            details=self._type_mismatch_hint(expected, actual),
        )

    def below(self, actual: Any, ceiling: Any, label: str = "value") -> AssertionResult:
        """
        Assert that a number is strictly below a ceiling.

        Args:
            actual: The number found
            ceiling: Exclusive upper bound
            label: What the number is, for messages

        Returns:
            AssertionResult indicating pass/fail
        """
        if actual < ceiling:
            return AssertionResult.passed_result(
                message=f"{label.capitalize()} is below {ceiling}",
                actual=actual,
            )
        return AssertionResult.failed_result(
            message=f"{label.capitalize()} is not below {ceiling}",
            expected=f"< {ceiling}",
            actual=actual,
            details={"excess": actual - ceiling},
        )

    def has_keys(self, record: Any, names: Iterable[str]) -> AssertionResult:
        """
        Assert that a record carries every named key.

        Only key presence counts; a key holding None or "" is present.

        Args:
            record: The record to inspect
            names: Keys that must be present

        Returns:
            AssertionResult indicating pass/fail
        """
        names = list(names)
        if not isinstance(record, Mapping):
            return AssertionResult.failed_result(
                message=f"Record is not an object",
                expected=f"object with keys {names!r}",
                actual=record,
                details={"type": type(record).__name__},
            )

        missing = [name for name in names if name not in record]
        if not missing:
            return AssertionResult.passed_result(
                message=f"Record has all {len(names)} expected properties",
                actual=sorted(record.keys()),
            )
        return AssertionResult.failed_result(
            message=f"Record is missing {len(missing)} expected propert{'y' if len(missing) == 1 else 'ies'}",
            expected=names,
            actual=sorted(record.keys()),
            details={"missing": missing},
        )

    def non_empty(
        self,
        record: Any,
        name: str,
        missing: MissingPropertyPolicy = MissingPropertyPolicy.STRINGIFY,
    ) -> AssertionResult:
        """
        Assert that a record's value stringifies to a non-empty string.

        With MissingPropertyPolicy.STRINGIFY an absent key reads as
        "undefined" and passes; with FAIL it fails.

        Args:
            record: The record to inspect
            name: Key whose value is checked
            missing: Treatment of an absent key

        Returns:
            AssertionResult indicating pass/fail
        """
        value = record_field(record, name)

        if value is MISSING and missing == MissingPropertyPolicy.FAIL:
            return AssertionResult.failed_result(
                message=f"Property is missing",
                key=name,
                expected="property to be present",
                actual="<absent>",
            )

        text = stringify(value)
        if text != "":
            return AssertionResult.passed_result(
                message=f"Property is non-empty",
                key=name,
                actual=text,
            )
        return AssertionResult.failed_result(
            message=f"Property is empty",
            key=name,
            expected="non-empty string",
            actual=text,
        )

    def before(
        self,
        first: datetime | None,
        second: datetime | None,
        label: str = "date",
    ) -> AssertionResult:
        """
        Assert that one instant is strictly earlier than another.

        None stands for an invalid date, which is neither before nor
        after anything, so any comparison involving it fails.

        Args:
            first: The instant expected to be earlier
            second: The instant expected to be later
            label: What the instants are, for messages

        Returns:
            AssertionResult indicating pass/fail
        """
        if first is None or second is None:
            return AssertionResult.failed_result(
                message=f"Cannot order an invalid {label}",
                expected=f"two valid {label}s",
                actual=[_isoformat(first), _isoformat(second)],
                details={"invalid": [i for i, v in enumerate((first, second)) if v is None]},
            )

        if first < second:
            return AssertionResult.passed_result(
                message=f"{label.capitalize()} is before {_isoformat(second)}",
                actual=_isoformat(first),
            )
        return AssertionResult.failed_result(
            message=f"{label.capitalize()} is not before {_isoformat(second)}",
            expected=f"< {_isoformat(second)}",
            actual=_isoformat(first),
        )

    def _type_mismatch_hint(self, expected: Any, actual: Any) -> dict[str, Any]:
        """Generate a hint if types don't match."""
        if type(expected) != type(actual):
            return {
                "hint": f"Type mismatch: expected {type(expected).__name__}, got {type(actual).__name__}"
            }
        return {}


def _isoformat(value: datetime | None) -> str:
    return value.isoformat() if value is not None else "Invalid Date"


# Convenience functions for quick assertions
def assert_equals(actual: Any, expected: Any) -> AssertionResult:
    """Check that a value equals expected."""
    return AssertionEngine().equals(actual, expected)


def assert_below(actual: Any, ceiling: Any) -> AssertionResult:
    """Check that a number is strictly below a ceiling."""
    return AssertionEngine().below(actual, ceiling)


def assert_has_keys(record: Any, names: Iterable[str]) -> AssertionResult:
    """Check that a record carries every named key."""
    return AssertionEngine().has_keys(record, names)


def assert_non_empty(record: Any, name: str) -> AssertionResult:
    """Check that a record's value stringifies to something non-empty."""
    return AssertionEngine().non_empty(record, name)
