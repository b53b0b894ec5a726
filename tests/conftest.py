"""Shared fixtures for apicheck tests."""

import pytest

from apicheck import CapturedRequest, CapturedResponse, HelperSettings, Sandbox

ITEMS = [
    {"id": 1, "name": "widget", "created_at": "2024-01-01", "updated_at": "2024-02-01"},
    {"id": 2, "name": "gadget", "created_at": "2024-03-01", "updated_at": "2024-03-05"},
]


@pytest.fixture
def make_ctx():
    """Build a Sandbox around a captured request/response."""

    def _make(
        url="https://api.example.com/items",
        status_code=200,
        elapsed_ms=120,
        body=None,
        settings=None,
    ):
        return Sandbox(
            request=CapturedRequest(url),
            response=CapturedResponse(
                status_code=status_code,
                elapsed_ms=elapsed_ms,
                body=[dict(item) for item in ITEMS] if body is None else body,
            ),
            settings=settings or HelperSettings(),
        )

    return _make


@pytest.fixture
def ctx(make_ctx):
    return make_ctx()
