"""
Reporting for API Check Sessions

This package provides reporting capabilities for capturing complete
records of the checks run against one request/response exchange.

Features:
    - Session metadata (ID, timestamp, exchange info)
    - One record per reported check, hard or soft
    - Expected/actual capture
    - Abort reasons
    - JSON serialization
    - Human-readable summaries

Usage:
    from apicheck.reporting import Reporter

    reporter = Reporter.for_exchange("list items", request_url=url, status_code=200)
    reporter.start_session()

    reporter.record("response is 200", result)

    report = reporter.finish_session()
    print(report.summary())

    reporter.save_json("reports/session.json")
"""

# Models
from .models import (
    CheckRecord,
    RunStatus,
    SessionReport,
    compute_exchange_hash,
)

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "CheckRecord",
    "RunStatus",
    "SessionReport",
    "compute_exchange_hash",
    # Reporter
    "Reporter",
]
