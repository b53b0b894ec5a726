"""
Report data models for API check sessions.

This module defines the data structures for capturing complete
session records including metadata, check outcomes, and timing.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..assertions.models import AssertionResult, AssertionStatus, CheckMode


class RunStatus(str, Enum):
    """Overall status of a check session."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class CheckRecord:
    """
    Record of a single reported check.

    Captures the name it was reported under, how it was reported, and
    the outcome's expected/actual detail.
    """
    name: str
    status: AssertionStatus
    mode: CheckMode = CheckMode.SOFT
    message: str = ""
    key: str | None = None
    expected: Any = None
    actual: Any = None
    details: dict[str, Any] = field(default_factory=dict)
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_result(cls, name: str, result: AssertionResult, mode: CheckMode) -> CheckRecord:
        return cls(
            name=name,
            status=result.status,
            mode=mode,
            message=result.message,
            key=result.key,
            expected=result.expected,
            actual=result.actual,
            details=dict(result.details),
        )

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "status": self.status.value,
            "mode": self.mode.value,
            "message": self.message,
            "key": self.key,
            "expected": _safe_serialize(self.expected),
            "actual": _safe_serialize(self.actual),
            "details": _safe_serialize(self.details) if self.details else None,
            "recorded_at": self.recorded_at.isoformat(),
        }


@dataclass
class SessionReport:
    """
    Complete record of one request/response check session.

    Contains metadata about the exchange under test and a record
    for each check reported against it.
    """
    # Session identification
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    exchange_hash: str = ""

    # Timing
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # Exchange info
    request_url: str | None = None
    status_code: int | None = None

    # Overall status
    status: RunStatus = RunStatus.PENDING
    aborted: str | None = None

    # Check records
    checks: list[CheckRecord] = field(default_factory=list)

    # Summary stats
    total_checks: int = 0
    passed_checks: int = 0
    failed_checks: int = 0
    error_checks: int = 0

    def start(self) -> None:
        """Mark the session as started."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        """Mark the session as completed and calculate final status."""
        self.ended_at = datetime.now(timezone.utc)
        delta = self.ended_at - self.started_at
        self.duration_ms = delta.total_seconds() * 1000

        # Calculate summary stats
        self.total_checks = len(self.checks)
        self.passed_checks = sum(1 for c in self.checks if c.status == AssertionStatus.PASSED)
        self.failed_checks = sum(1 for c in self.checks if c.status == AssertionStatus.FAILED)
        self.error_checks = sum(1 for c in self.checks if c.status == AssertionStatus.ERROR)

        # Determine overall status
        if self.error_checks > 0:
            self.status = RunStatus.ERROR
        elif self.failed_checks > 0:
            self.status = RunStatus.FAILED
        elif self.aborted:
            self.status = RunStatus.ERROR
        else:
            self.status = RunStatus.PASSED

    def add_check(self, check: CheckRecord) -> None:
        """Add a check record to the session."""
        self.checks.append(check)

    def get_checks(self, name: str) -> list[CheckRecord]:
        """Get every check record reported under a name."""
        return [c for c in self.checks if c.name == name]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "session_id": self.session_id,
            "name": self.name,
            "exchange_hash": self.exchange_hash,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "request_url": self.request_url,
            "status_code": self.status_code,
            "status": self.status.value,
            "aborted": self.aborted,
            "summary": {
                "total": self.total_checks,
                "passed": self.passed_checks,
                "failed": self.failed_checks,
                "errors": self.error_checks,
            },
            "checks": [check.to_dict() for check in self.checks],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            f"═══════════════════════════════════════════════════════════",
            f"  Check Report: {self.name or self.request_url or 'session'}",
            f"═══════════════════════════════════════════════════════════",
            f"  Session ID: {self.session_id}",
            f"  Status:     {_status_icon(self.status)} {self.status.value.upper()}",
            f"  Duration:   {self.duration_ms:.0f}ms" if self.duration_ms else "  Duration:   N/A",
            f"  Response:   {self.status_code}" if self.status_code is not None else "  Response:   N/A",
            f"───────────────────────────────────────────────────────────",
            f"  Checks: {self.passed_checks} passed, {self.failed_checks} failed, {self.error_checks} errors",
            f"───────────────────────────────────────────────────────────",
        ]

        for check in self.checks:
            icon = _status_icon_check(check.status)
            hard = " [hard]" if check.mode == CheckMode.HARD else ""
            lines.append(f"  {icon} {check.name}{hard}")
            if not check.passed:
                lines.append(f"      └─ {check.message}")

        if self.aborted:
            lines.append(f"  ⛔ Aborted: {self.aborted}")

        lines.append(f"═══════════════════════════════════════════════════════════")
        return "\n".join(lines)


def compute_exchange_hash(exchange_dict: dict[str, Any]) -> str:
    """
    Compute a hash of an exchange for tracking/versioning.

    Args:
        exchange_dict: The exchange data as a dict

    Returns:
        SHA-256 hash (first 12 chars)
    """
    serialized = json.dumps(exchange_dict, sort_keys=True, default=str)
    hash_bytes = hashlib.sha256(serialized.encode()).hexdigest()
    return hash_bytes[:12]


def _safe_serialize(value: Any) -> Any:
    """Safely serialize a value, handling non-JSON types."""
    if value is None:
        return None
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


def _status_icon(status: RunStatus) -> str:
    """Get icon for session status."""
    return {
        RunStatus.PENDING: "⏳",
        RunStatus.RUNNING: "🔄",
        RunStatus.PASSED: "✅",
        RunStatus.FAILED: "❌",
        RunStatus.ERROR: "⚠️",
    }.get(status, "❓")


def _status_icon_check(status: AssertionStatus) -> str:
    """Get icon for check status."""
    return {
        AssertionStatus.PASSED: "✅",
        AssertionStatus.FAILED: "❌",
        AssertionStatus.ERROR: "⚠️",
    }.get(status, "❓")
