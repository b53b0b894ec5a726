"""
Reporter for building and managing session reports.

This module provides the Reporter class which collects every outcome
a Sandbox reports and turns them into a SessionReport.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..assertions.models import AssertionResult, CheckMode
from .models import CheckRecord, SessionReport, compute_exchange_hash


class Reporter:
    """
    Builds and manages session reports.

    Example:
        reporter = Reporter.for_exchange("list items", request_url=url, status_code=200)
        reporter.start_session()

        reporter.record("response is 200", AssertionResult.passed_result("ok"))

        report = reporter.finish_session()
        print(report.summary())
    """

    def __init__(self, report: SessionReport | None = None):
        """
        Initialize with a SessionReport.

        Use Reporter.for_exchange() to fill in the exchange metadata.
        """
        self.report = report or SessionReport()

    @classmethod
    def for_exchange(
        cls,
        name: str = "",
        request_url: str | None = None,
        status_code: int | None = None,
        exchange_dict: dict[str, Any] | None = None,
        session_id: str | None = None,
    ) -> Reporter:
        """
        Create a Reporter for one request/response exchange.

        Args:
            name: Display name for the session
            request_url: URL of the request under test
            status_code: Status code of the response under test
            exchange_dict: Raw exchange data, hashed for tracking
            session_id: Optional custom session ID (auto-generated if not provided)

        Returns:
            Reporter instance ready to record outcomes
        """
        report = SessionReport(
            name=name,
            request_url=request_url,
            status_code=status_code,
            exchange_hash=compute_exchange_hash(exchange_dict) if exchange_dict else "",
        )
        if session_id:
            report.session_id = session_id
        return cls(report)

    @property
    def checks(self) -> list[CheckRecord]:
        return self.report.checks

    def start_session(self) -> None:
        """Mark the session as started."""
        self.report.start()

    def finish_session(self) -> SessionReport:
        """
        Mark the session as completed and return the final report.

        Returns:
            The completed SessionReport with summary stats
        """
        self.report.complete()
        return self.report

    def record(
        self,
        name: str,
        result: AssertionResult,
        mode: CheckMode = CheckMode.SOFT,
    ) -> CheckRecord:
        """
        Record one reported outcome.

        Args:
            name: Name the check was reported under
            result: The outcome
            mode: Whether it was reported as a hard or soft check

        Returns:
            The new CheckRecord
        """
        check = CheckRecord.from_result(name, result, mode)
        self.report.add_check(check)
        return check

    def abort(self, reason: str) -> None:
        """Note that the session stopped before running every check."""
        self.report.aborted = reason

    def save_json(self, path: str | Path) -> None:
        """
        Save the report to a JSON file.

        Args:
            path: Path to save the JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json())

    def get_summary(self) -> str:
        """Get a human-readable summary of the session."""
        return self.report.summary()
