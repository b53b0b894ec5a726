"""
apicheck - Assertion, gating and iteration helpers for HTTP API tests

This package provides reusable checks for black-box API test scripts.
Every helper takes an explicit Sandbox (the current request, response,
settings and reporter) instead of reading ambient globals.

Subpackages:
    - helpers: assertion_helpers, gating_helpers, utilities
    - host: Request/response accessors and captured models
    - assertions: Outcome models and comparison primitives
    - reporting: Session reports and result tracking
    - config: Helper settings loaded from YAML
    - replay: Run helpers against a captured exchange file

Usage:
    from apicheck import Sandbox, CapturedRequest, CapturedResponse
    from apicheck import assertion_helpers, gating_helpers, utilities

    ctx = Sandbox(
        request=CapturedRequest("https://api.example.com/items?fields=name"),
        response=CapturedResponse(status_code=200, elapsed_ms=87, body=[{"name": "a"}]),
    )

    assertion_helpers.assert_status_ok(ctx)
    assertion_helpers.assert_response_time_below(ctx, 3000)
    gating_helpers.run_if_query_param_exists(
        ctx, "fields", lambda: assertion_helpers.assert_property_non_empty(ctx, "name")
    )

    report = ctx.reporter.finish_session()
    print(report.summary())
"""

__version__ = "0.1.0"

# Host context
from .host import (
    MISSING,
    ApiCheckError,
    CapturedRequest,
    CapturedResponse,
    EmptyResponseError,
    PreconditionError,
    RequestAccessor,
    ResponseAccessor,
    ResponseBodyError,
)
from .sandbox import Sandbox

# Assertions
from .assertions import (
    AssertionEngine,
    AssertionResult,
    AssertionStatus,
    CheckFailed,
    CheckMode,
    MissingPropertyPolicy,
    QueryMatch,
)

# Helper namespaces
from .helpers import assertion_helpers, gating_helpers, utilities

# Reporting
from .reporting import CheckRecord, Reporter, RunStatus, SessionReport

# Config
from .config import HelperSettings, ValidationResult, load_settings

# Replay
from .replay import Exchange, load_exchange, run_exchange

__all__ = [
    # Package info
    "__version__",
    # Host context
    "MISSING",
    "ApiCheckError",
    "CapturedRequest",
    "CapturedResponse",
    "EmptyResponseError",
    "PreconditionError",
    "RequestAccessor",
    "ResponseAccessor",
    "ResponseBodyError",
    "Sandbox",
    # Assertions
    "AssertionEngine",
    "AssertionResult",
    "AssertionStatus",
    "CheckFailed",
    "CheckMode",
    "MissingPropertyPolicy",
    "QueryMatch",
    # Helper namespaces
    "assertion_helpers",
    "gating_helpers",
    "utilities",
    # Reporting
    "CheckRecord",
    "Reporter",
    "RunStatus",
    "SessionReport",
    # Config
    "HelperSettings",
    "ValidationResult",
    "load_settings",
    # Replay
    "Exchange",
    "load_exchange",
    "run_exchange",
]
