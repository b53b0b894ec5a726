"""Tests for the success-path assertion helpers."""

import pytest

from apicheck import (
    AssertionStatus,
    EmptyResponseError,
    HelperSettings,
    MissingPropertyPolicy,
    QueryMatch,
)
from apicheck.helpers import assertion_helpers as success


# ─────────────────────────────────────────────────────────────────────────────
# assert_status_ok
# ─────────────────────────────────────────────────────────────────────────────

def test_status_ok_passes_on_200(make_ctx):
    ctx = make_ctx(status_code=200)
    result = success.assert_status_ok(ctx)

    assert result.passed
    assert ctx.reporter.checks[0].name == "When making the request, then the response is a 200 code"


@pytest.mark.parametrize("code", [201, 204, 301, 404, 500])
def test_status_ok_fails_on_other_codes(make_ctx, code):
    ctx = make_ctx(status_code=code)
    result = success.assert_status_ok(ctx)

    assert result.failed
    assert result.actual == code


# ─────────────────────────────────────────────────────────────────────────────
# assert_response_time_below
# ─────────────────────────────────────────────────────────────────────────────

def test_response_time_default_ceiling(make_ctx):
    ctx = make_ctx(elapsed_ms=4999)
    result = success.assert_response_time_below(ctx)

    assert result.passed
    assert ctx.reporter.checks[0].name == (
        "When making the request, then the response took less than 5000ms"
    )


@pytest.mark.parametrize("elapsed", [5000, 5001, 12000])
def test_response_time_at_or_above_default_fails(make_ctx, elapsed):
    ctx = make_ctx(elapsed_ms=elapsed)
    assert success.assert_response_time_below(ctx).failed


def test_response_time_custom_ceiling(make_ctx):
    ctx = make_ctx(elapsed_ms=250)

    assert success.assert_response_time_below(ctx, 300).passed
    assert success.assert_response_time_below(ctx, 250).failed


def test_response_time_ceiling_from_settings(make_ctx):
    ctx = make_ctx(elapsed_ms=250, settings=HelperSettings(response_time_ceiling_ms=200))
    assert success.assert_response_time_below(ctx).failed


# ─────────────────────────────────────────────────────────────────────────────
# assert_all_properties_present
# ─────────────────────────────────────────────────────────────────────────────

def test_all_properties_present_on_first_record(ctx):
    result = success.assert_all_properties_present(ctx, ["id", "name"])
    assert result.passed


def test_all_properties_present_accepts_null_values(make_ctx):
    ctx = make_ctx(body=[{"id": 1, "name": None}])
    assert success.assert_all_properties_present(ctx, ["id", "name"]).passed


def test_all_properties_present_fails_on_missing_name(ctx):
    result = success.assert_all_properties_present(ctx, ["id", "sku"])

    assert result.failed
    assert result.details["missing"] == ["sku"]


def test_all_properties_present_only_inspects_first_record(make_ctx):
    ctx = make_ctx(body=[{"id": 1, "name": "a"}, {"id": 2}])
    assert success.assert_all_properties_present(ctx, ["id", "name"]).passed


def test_all_properties_present_on_empty_response_raises(make_ctx):
    ctx = make_ctx(body=[])

    with pytest.raises(EmptyResponseError):
        success.assert_all_properties_present(ctx, ["id"])

    [check] = ctx.reporter.checks
    assert check.status == AssertionStatus.ERROR


# ─────────────────────────────────────────────────────────────────────────────
# assert_property_non_empty
# ─────────────────────────────────────────────────────────────────────────────

def test_property_non_empty_passes_for_every_record(ctx):
    result = success.assert_property_non_empty(ctx, "name")

    assert result.passed
    assert ctx.reporter.checks[0].name == (
        "When making the request, then name is non-empty in the 2 response object(s)"
    )


def test_property_non_empty_fails_on_empty_string(make_ctx):
    ctx = make_ctx(body=[{"name": "a"}, {"name": ""}, {"name": "c"}])
    result = success.assert_property_non_empty(ctx, "name")

    assert result.failed
    assert result.details["record_index"] == 1


def test_property_non_empty_stringifies_falsy_scalars(make_ctx):
    ctx = make_ctx(body=[{"n": 0}, {"n": False}, {"n": None}])
    assert success.assert_property_non_empty(ctx, "n").passed


def test_property_non_empty_does_not_detect_missing_property(make_ctx):
    # Absent key stringifies to "undefined", which is non-empty.
    ctx = make_ctx(body=[{"name": "a"}, {"id": 2}])
    assert success.assert_property_non_empty(ctx, "name").passed


def test_property_non_empty_fail_policy_detects_missing_property(make_ctx):
    ctx = make_ctx(body=[{"name": "a"}, {"id": 2}])
    result = success.assert_property_non_empty(ctx, "name", MissingPropertyPolicy.FAIL)

    assert result.failed
    assert result.message == "Property is missing"


def test_property_non_empty_policy_from_settings(make_ctx):
    ctx = make_ctx(
        body=[{"id": 2}],
        settings=HelperSettings(missing_property_policy=MissingPropertyPolicy.FAIL),
    )
    assert success.assert_property_non_empty(ctx, "name").failed


def test_property_non_empty_on_empty_response_passes_vacuously(make_ctx):
    ctx = make_ctx(body=[])
    result = success.assert_property_non_empty(ctx, "name")

    assert result.passed
    assert "in the 0 response object(s)" in ctx.reporter.checks[0].name


# ─────────────────────────────────────────────────────────────────────────────
# assert_optional_properties_if_requested
# ─────────────────────────────────────────────────────────────────────────────

def test_optional_property_checked_when_requested(make_ctx):
    ctx = make_ctx(url="https://api.example.com/items?fields=name")
    results = success.assert_optional_properties_if_requested(ctx, ["name", "sku"])

    assert len(results) == 1
    assert "name is non-empty" in ctx.reporter.checks[0].name


def test_optional_property_skipped_when_not_requested(make_ctx):
    ctx = make_ctx(url="https://api.example.com/items?page=1")

    assert success.assert_optional_properties_if_requested(ctx, ["name"]) == []
    assert ctx.reporter.checks == []


def test_optional_property_substring_match_false_positive(make_ctx):
    # "bar" only appears inside a value, but the substring match still fires.
    ctx = make_ctx(
        url="https://api.example.com/items?q=foobar",
        body=[{"bar": ""}],
    )
    results = success.assert_optional_properties_if_requested(ctx, ["bar"])

    assert len(results) == 1
    assert results[0].failed


def test_optional_property_exact_match_ignores_value_fragment(make_ctx):
    ctx = make_ctx(url="https://api.example.com/items?q=foobar", body=[{"bar": ""}])
    results = success.assert_optional_properties_if_requested(ctx, ["bar"], QueryMatch.EXACT)

    assert results == []


def test_optional_property_exact_match_on_parameter_name(make_ctx):
    ctx = make_ctx(url="https://api.example.com/items?bar=1", body=[{"bar": "x"}])
    results = success.assert_optional_properties_if_requested(ctx, ["bar"], QueryMatch.EXACT)

    assert [r.passed for r in results] == [True]
