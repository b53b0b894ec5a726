"""
Iteration and comparison utilities.

for_each_response_node walks the parsed response records;
is_date_before compares two date-like values and reports the result.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Callable

from ..assertions.engine import AssertionEngine
from ..assertions.models import AssertionResult, CheckMode
from ..sandbox import Sandbox

_engine = AssertionEngine()


def for_each_response_node(ctx: Sandbox, action: Callable[[Any], object]) -> None:
    """
    Call `action(record)` for each response record, in order.

    An exception from the action stops the iteration and propagates.
    """
    for record in ctx.response.records():
        action(record)


def parse_date(value: Any) -> datetime | None:
    """
    Parse a date-like value into an aware datetime.

    Accepts datetime and date objects, epoch milliseconds, and ISO-8601
    strings (a trailing "Z" included). Naive values are taken as UTC.

    Returns:
        The parsed datetime, or None if the value isn't a valid date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, bool):
        return None
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_date_before(
    ctx: Sandbox,
    date_a: Any,
    date_b: Any,
    mode: CheckMode | None = None,
) -> AssertionResult:
    """
    Report whether `date_a` is strictly earlier than `date_b`.

    Defaults to a hard check (settings.date_check_mode), so a failure
    raises CheckFailed and ends the enclosing step instead of showing
    up as one more named result. An unparseable date always fails.

    Raises:
        CheckFailed: In hard mode, when the dates are not in order
    """
    if mode is None:
        mode = ctx.settings.date_check_mode
    result = _engine.before(parse_date(date_a), parse_date(date_b))
    return ctx.report(f"{date_a} is before {date_b}", result, mode)
