"""
Host context for API test helpers.

This package provides the request/response accessors a Sandbox wraps.

Components:
    - base: ResponseAccessor / RequestAccessor interfaces
    - models: Captured request and response, record helpers, errors

Usage:
    from apicheck.host import CapturedRequest, CapturedResponse

    request = CapturedRequest("https://api.example.com/items?fields=name")
    response = CapturedResponse(status_code=200, elapsed_ms=87, body=[{"name": "a"}])

    request.query_parameter_names()   # {"fields"}
    response.records()                # [{"name": "a"}]
"""

# Base
from .base import RequestAccessor, ResponseAccessor

# Models
from .models import (
    MISSING,
    ApiCheckError,
    CapturedRequest,
    CapturedResponse,
    EmptyResponseError,
    PreconditionError,
    Record,
    ResponseBodyError,
    record_field,
    stringify,
)

__all__ = [
    # Base
    "RequestAccessor",
    "ResponseAccessor",
    # Models
    "MISSING",
    "ApiCheckError",
    "CapturedRequest",
    "CapturedResponse",
    "EmptyResponseError",
    "PreconditionError",
    "Record",
    "ResponseBodyError",
    "record_field",
    "stringify",
]
