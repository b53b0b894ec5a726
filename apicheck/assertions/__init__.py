"""
Assertion Engine for API Response Validation

This package provides the outcome models and comparison primitives
that the helpers report through a Sandbox.

Supported assertions:
    - equals: Check if a value equals expected
    - below: Check if a number is strictly below a ceiling
    - has_keys: Check if a record carries every named key
    - non_empty: Check if a record value stringifies to non-empty
    - before: Check if one instant is strictly earlier than another

Usage:
    from apicheck.assertions import AssertionEngine, assert_has_keys

    record = {"id": 1, "name": "widget"}

    # Using the engine
    engine = AssertionEngine()
    result = engine.has_keys(record, ["id", "name"])
    result = engine.non_empty(record, "name")

    # Using convenience functions
    result = assert_has_keys(record, ["id"])

    # Check result
    if result.passed:
        print("✅ Assertion passed")
    else:
        print(result)  # Detailed failure message
"""

# Models
from .models import (
    AssertionResult,
    AssertionStatus,
    CheckFailed,
    CheckMode,
    MissingPropertyPolicy,
    QueryMatch,
)

# Engine
from .engine import (
    AssertionEngine,
    # Convenience functions
    assert_below,
    assert_equals,
    assert_has_keys,
    assert_non_empty,
)

__all__ = [
    # Models
    "AssertionResult",
    "AssertionStatus",
    "CheckFailed",
    "CheckMode",
    "MissingPropertyPolicy",
    "QueryMatch",
    # Engine
    "AssertionEngine",
    # Convenience functions
    "assert_below",
    "assert_equals",
    "assert_has_keys",
    "assert_non_empty",
]
