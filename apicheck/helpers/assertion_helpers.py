"""
Success-path assertion helpers.

Each helper declares one named check against the sandbox's current
response (assert_optional_properties_if_requested declares one per
requested property).
"""

from __future__ import annotations

from typing import Iterable

from ..assertions.engine import AssertionEngine
from ..assertions.models import AssertionResult, MissingPropertyPolicy, QueryMatch
from ..host.models import EmptyResponseError
from ..sandbox import Sandbox

_engine = AssertionEngine()


def assert_status_ok(ctx: Sandbox) -> AssertionResult:
    """Declare that the response is a 200."""
    return ctx.declare(
        "When making the request, then the response is a 200 code",
        lambda: _engine.equals(ctx.response.status_code, 200, "status code"),
    )


def assert_response_time_below(ctx: Sandbox, ceiling_ms: float | None = None) -> AssertionResult:
    """
    Declare that the response arrived strictly within a time ceiling.

    Args:
        ctx: Current sandbox
        ceiling_ms: Exclusive ceiling in milliseconds; defaults to
            settings.response_time_ceiling_ms (5000)
    """
    if ceiling_ms is None:
        ceiling_ms = ctx.settings.response_time_ceiling_ms
    return ctx.declare(
        f"When making the request, then the response took less than {ceiling_ms}ms",
        lambda: _engine.below(ctx.response.elapsed_ms, ceiling_ms, "response time"),
    )


def assert_all_properties_present(ctx: Sandbox, property_names: Iterable[str]) -> AssertionResult:
    """
    Declare that the first response record has every listed key.

    Only the first record is inspected, and only for key presence.

    Raises:
        EmptyResponseError: If the response has no records; the check
            is reported as an error first
    """
    property_names = list(property_names)

    def first_record_has_keys() -> AssertionResult:
        records = ctx.response.records()
        if not records:
            raise EmptyResponseError("Response contains no records to inspect")
        return _engine.has_keys(records[0], property_names)

    return ctx.declare(
        "When making the request, then the response properties are as expected",
        first_record_has_keys,
    )


def assert_property_non_empty(
    ctx: Sandbox,
    property_name: str,
    missing: MissingPropertyPolicy | None = None,
) -> AssertionResult:
    """
    Declare that every response record has a non-empty value for a key.

    Values are stringified first, so 0, false and null all pass. Under
    the default STRINGIFY policy a record without the key passes too
    (it reads as "undefined"); pass MissingPropertyPolicy.FAIL to treat
    absence as a failure.
    """
    if missing is None:
        missing = ctx.settings.missing_property_policy
    records = ctx.response.records()

    def every_record_non_empty() -> AssertionResult:
        for index, record in enumerate(records):
            result = _engine.non_empty(record, property_name, missing)
            if not result.passed:
                result.details["record_index"] = index
            result.require()
        return AssertionResult.passed_result(
            f"{property_name} is non-empty in all {len(records)} record(s)",
            key=property_name,
        )

    return ctx.declare(
        f"When making the request, then {property_name} is non-empty in the {len(records)} response object(s)",
        every_record_non_empty,
    )


def request_mentions(ctx: Sandbox, name: str, match: QueryMatch) -> bool:
    """
    Tell whether the current request asks for a property.

    SUBSTRING looks anywhere in the raw query string, so "bar" matches
    "?q=foobar". EXACT requires a parameter with that name.
    """
    if match == QueryMatch.EXACT:
        return name in ctx.request.query_parameter_names()
    return name in ctx.request.raw_query_string()


def assert_optional_properties_if_requested(
    ctx: Sandbox,
    optional_property_names: Iterable[str],
    match: QueryMatch | None = None,
) -> list[AssertionResult]:
    """
    Declare a non-empty check for each optional property the request mentions.

    Returns:
        One result per property that triggered a check, in list order
    """
    if match is None:
        match = ctx.settings.query_match

    results = []
    for name in optional_property_names:
        if request_mentions(ctx, name, match):
            results.append(assert_property_non_empty(ctx, name))
    return results
