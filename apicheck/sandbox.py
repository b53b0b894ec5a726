"""
Explicit host context for the helpers.

A Sandbox bundles the current request, the current response, the
settings and a Reporter. Every helper receives one as its first
argument instead of reaching for ambient globals.

All outcomes, declared or immediate, go through Sandbox.report().
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from .assertions.models import AssertionResult, CheckFailed, CheckMode
from .config.models import HelperSettings
from .host.base import RequestAccessor, ResponseAccessor
from .reporting.reporter import Reporter

logger = logging.getLogger(__name__)

Outcome = Union[bool, AssertionResult]
Predicate = Callable[[], Union[Outcome, None]]


class Sandbox:
    """
    The request/response context a helper runs against.

    Example:
        ctx = Sandbox(
            request=CapturedRequest("https://api.example.com/items?fields=name"),
            response=CapturedResponse(status_code=200, elapsed_ms=87, body=[...]),
        )
        assert_status_ok(ctx)
        report = ctx.reporter.finish_session()
    """

    def __init__(
        self,
        request: RequestAccessor,
        response: ResponseAccessor,
        reporter: Reporter | None = None,
        settings: HelperSettings | None = None,
    ):
        self.request = request
        self.response = response
        self.reporter = reporter or Reporter()
        self.settings = settings or HelperSettings()

    def report(
        self,
        name: str,
        outcome: Outcome,
        mode: CheckMode = CheckMode.SOFT,
    ) -> AssertionResult:
        """
        Record one outcome under a name.

        Args:
            name: What the check asserts, as it should appear in the report
            outcome: A bool or an AssertionResult
            mode: SOFT records and returns; HARD also raises on non-pass

        Returns:
            The recorded AssertionResult

        Raises:
            CheckFailed: In HARD mode, if the outcome did not pass
        """
        result = outcome if isinstance(outcome, AssertionResult) else AssertionResult.from_bool(outcome, name)
        self.reporter.record(name, result, mode)

        if result.passed:
            logger.debug("PASS %s", name)
        else:
            logger.info("%s %s: %s", result.status.value.upper(), name, result.message)

        if mode == CheckMode.HARD and not result.passed:
            raise CheckFailed(result, reported=True)
        return result

    def declare(
        self,
        description: str,
        predicate: Predicate,
        mode: CheckMode = CheckMode.SOFT,
    ) -> AssertionResult:
        """
        Evaluate a predicate and report it as one named check.

        The predicate may return a bool or an AssertionResult, return
        None (meaning every sub-check it required passed), or raise
        CheckFailed. Any other exception is reported as an error and
        re-raised.

        A hard check inside the predicate that already reported its
        failure is not recorded a second time under the description;
        its result is returned (or re-raised in HARD mode) as-is.

        Args:
            description: Name of the check
            predicate: Zero-argument callable producing the outcome
            mode: Reporting mode for the outcome

        Returns:
            The recorded AssertionResult
        """
        try:
            outcome = predicate()
        except CheckFailed as e:
            if e.reported:
                if mode == CheckMode.HARD:
                    raise
                return e.result
            outcome = e.result
        except Exception as e:
            self.report(
                description,
                AssertionResult.error_result(
                    f"{type(e).__name__}: {e}",
                    details={"exception": type(e).__name__},
                ),
            )
            raise

        if outcome is None:
            outcome = True
        return self.report(description, outcome, mode)

    def expect(self, result: AssertionResult) -> AssertionResult:
        """Report an immediate check that aborts on failure."""
        return self.report(result.message, result, CheckMode.HARD)
