"""Tests for record iteration and date comparison."""

from datetime import date, datetime, timezone

import pytest

from apicheck import AssertionStatus, CheckFailed, CheckMode, HelperSettings, ResponseBodyError
from apicheck.helpers import utilities


def test_for_each_visits_records_in_order(ctx):
    seen = []
    utilities.for_each_response_node(ctx, lambda node: seen.append(node["id"]))
    assert seen == [1, 2]


def test_for_each_stops_on_exception(make_ctx):
    ctx = make_ctx(body=[{"id": 1}, {"id": 2}, {"id": 3}])
    seen = []

    def action(node):
        seen.append(node["id"])
        if node["id"] == 2:
            raise ValueError("stop")

    with pytest.raises(ValueError):
        utilities.for_each_response_node(ctx, action)
    assert seen == [1, 2]


def test_for_each_on_non_sequence_body(make_ctx):
    ctx = make_ctx(body={"id": 1})
    with pytest.raises(ResponseBodyError):
        utilities.for_each_response_node(ctx, lambda node: None)


# ─────────────────────────────────────────────────────────────────────────────
# parse_date
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-01", datetime(2024, 1, 1, tzinfo=timezone.utc)),
        ("2024-01-01T10:30:00Z", datetime(2024, 1, 1, 10, 30, tzinfo=timezone.utc)),
        (date(2024, 1, 1), datetime(2024, 1, 1, tzinfo=timezone.utc)),
        (0, datetime(1970, 1, 1, tzinfo=timezone.utc)),
    ],
)
def test_parse_date(value, expected):
    assert utilities.parse_date(value) == expected


@pytest.mark.parametrize("value", ["not-a-date", "", None, True, {"d": 1}])
def test_parse_date_invalid(value):
    assert utilities.parse_date(value) is None


# ─────────────────────────────────────────────────────────────────────────────
# is_date_before
# ─────────────────────────────────────────────────────────────────────────────

def test_date_before_passes(ctx):
    result = utilities.is_date_before(ctx, "2024-01-01", "2024-02-01")

    assert result.passed
    assert ctx.reporter.checks[0].mode == CheckMode.HARD


def test_date_before_fails_hard(ctx):
    with pytest.raises(CheckFailed):
        utilities.is_date_before(ctx, "2024-02-01", "2024-01-01")
    assert ctx.reporter.checks[0].status == AssertionStatus.FAILED


def test_equal_dates_are_not_before(ctx):
    with pytest.raises(CheckFailed):
        utilities.is_date_before(ctx, "2024-01-01", "2024-01-01")


@pytest.mark.parametrize(
    "first, second",
    [("not-a-date", "2024-01-01"), ("2024-01-01", "not-a-date")],
)
def test_invalid_date_never_orders(ctx, first, second):
    # An invalid date is neither before nor after anything, so both orders fail.
    with pytest.raises(CheckFailed) as exc_info:
        utilities.is_date_before(ctx, first, second)
    assert "invalid" in exc_info.value.result.message


def test_date_before_soft_mode_records_and_continues(ctx):
    result = utilities.is_date_before(ctx, "2024-02-01", "2024-01-01", mode=CheckMode.SOFT)

    assert result.failed
    assert ctx.reporter.checks[0].mode == CheckMode.SOFT


def test_date_check_mode_from_settings(make_ctx):
    ctx = make_ctx(settings=HelperSettings(date_check_mode=CheckMode.SOFT))
    assert utilities.is_date_before(ctx, "2024-02-01", "2024-01-01").failed


def test_for_each_with_date_check(ctx):
    utilities.for_each_response_node(
        ctx, lambda node: utilities.is_date_before(ctx, node["created_at"], node["updated_at"])
    )
    assert [c.passed for c in ctx.reporter.checks] == [True, True]
