"""
Replay runner.

Runs the checks listed in an Exchange against its captured
request/response, the way a test sandbox would run a test script:
checks run in order, and the first hard failure or uncaught error
stops the rest.
"""

from __future__ import annotations

import logging

from ..assertions.models import CheckFailed
from ..config.models import HelperSettings
from ..helpers.assertion_helpers import (
    assert_all_properties_present,
    assert_optional_properties_if_requested,
    assert_property_non_empty,
    assert_response_time_below,
    assert_status_ok,
)
from ..helpers.gating_helpers import run_if_query_param_exists
from ..helpers.utilities import for_each_response_node, is_date_before
from ..host.models import CapturedRequest, CapturedResponse, record_field
from ..reporting.models import SessionReport
from ..reporting.reporter import Reporter
from ..sandbox import Sandbox
from .models import CheckOp, CheckSpec, Exchange

logger = logging.getLogger(__name__)


def build_sandbox(
    exchange: Exchange,
    settings: HelperSettings | None = None,
    session_id: str | None = None,
) -> Sandbox:
    """Build the sandbox an exchange's checks run in."""
    settings = (settings or HelperSettings()).merged(exchange.settings)

    request = CapturedRequest(url=exchange.request.url, method=exchange.request.method)
    response = CapturedResponse(
        status_code=exchange.response.status,
        elapsed_ms=exchange.response.elapsed_ms,
        body=exchange.response.body,
        body_text=exchange.response.body_text,
        records_path=settings.records_path,
    )
    reporter = Reporter.for_exchange(
        name=exchange.name,
        request_url=exchange.request.url,
        status_code=exchange.response.status,
        exchange_dict=exchange.raw,
        session_id=session_id,
    )
    return Sandbox(request=request, response=response, reporter=reporter, settings=settings)


def run_exchange(
    exchange: Exchange,
    settings: HelperSettings | None = None,
    session_id: str | None = None,
) -> SessionReport:
    """
    Run every check in an exchange and return the finished report.

    Args:
        exchange: The parsed exchange
        settings: Base settings; the exchange's own settings override them
        session_id: Optional custom session ID

    Returns:
        The completed SessionReport
    """
    ctx = build_sandbox(exchange, settings, session_id)
    reporter = ctx.reporter
    reporter.start_session()

    logger.debug("Running %d check(s) for %s", len(exchange.checks), exchange.name)
    try:
        run_checks(ctx, exchange.checks)
    except CheckFailed as e:
        reporter.abort(f"Hard check failed: {e.result.message}")
        logger.warning("Aborted %s: hard check failed: %s", exchange.name, e.result.message)
    except Exception as e:
        reporter.abort(f"{type(e).__name__}: {e}")
        logger.warning("Aborted %s: %s: %s", exchange.name, type(e).__name__, e)

    return reporter.finish_session()


def run_checks(ctx: Sandbox, checks: list[CheckSpec]) -> None:
    """Run checks in order; exceptions propagate."""
    for check in checks:
        run_check(ctx, check)


def run_check(ctx: Sandbox, check: CheckSpec) -> None:
    """Dispatch one check to its helper."""
    op = check.op

    if op == CheckOp.STATUS_OK:
        assert_status_ok(ctx)
    elif op == CheckOp.RESPONSE_TIME_BELOW:
        assert_response_time_below(ctx, check.value)
    elif op == CheckOp.ALL_PROPERTIES_PRESENT:
        assert_all_properties_present(ctx, check.value)
    elif op == CheckOp.PROPERTY_NON_EMPTY:
        assert_property_non_empty(ctx, check.value)
    elif op == CheckOp.OPTIONAL_PROPERTIES_IF_REQUESTED:
        assert_optional_properties_if_requested(ctx, check.value)
    elif op == CheckOp.IF_QUERY_PARAM:
        run_if_query_param_exists(ctx, check.param, lambda: run_checks(ctx, check.checks))
    elif op == CheckOp.DATE_BEFORE:
        first, second = check.value
        is_date_before(ctx, first, second)
    elif op == CheckOp.EACH_NODE_DATE_BEFORE:
        first_key, second_key = check.value
        for_each_response_node(
            ctx,
            lambda node: is_date_before(ctx, record_field(node, first_key), record_field(node, second_key)),
        )
    else:
        raise ValueError(f"Unknown check operator: {op}")
