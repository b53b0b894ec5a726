"""
Request/response models for the host context.

This module defines the captured request and response that back a
Sandbox, the record sentinel for absent fields, and the precondition
errors raised when a response can't be read as a record sequence.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import parse_qsl, urlsplit

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from .base import RequestAccessor, ResponseAccessor


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────

class ApiCheckError(Exception):
    """Base class for apicheck errors that aren't assertion failures."""


class PreconditionError(ApiCheckError):
    """Input a helper depends on is malformed or absent."""


class EmptyResponseError(PreconditionError, IndexError):
    """A first-record check ran against an empty record sequence."""


class ResponseBodyError(PreconditionError):
    """The response body can't be read as a sequence of records."""


# ─────────────────────────────────────────────────────────────────────────────
# Records
# ─────────────────────────────────────────────────────────────────────────────

class _Missing:
    """Sentinel for a field absent from a record."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

Record = Mapping[str, Any]


def record_field(record: Any, name: str) -> Any:
    """
    Read a field from a record, distinguishing absent from empty.

    Returns MISSING when the record has no such key (or isn't a mapping
    at all); a present key holding None or "" is returned as-is.
    """
    if isinstance(record, Mapping) and name in record:
        return record[name]
    return MISSING


def stringify(value: Any) -> str:
    """
    Stringify a record value the way the test sandbox does.

    Absent fields become "undefined" and None becomes "null", so only a
    genuinely empty string stringifies to "".
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if v is None else stringify(v) for v in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


# ─────────────────────────────────────────────────────────────────────────────
# Captured request / response
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class CapturedRequest(RequestAccessor):
    """An outgoing request, reduced to what the helpers inspect."""
    url: str
    method: str = "GET"

    def query_parameter_names(self) -> set[str]:
        return {name for name, _ in parse_qsl(self.raw_query_string(), keep_blank_values=True)}

    def raw_query_string(self) -> str:
        return urlsplit(self.url).query


@dataclass
class CapturedResponse(ResponseAccessor):
    """
    A received response.

    Attributes:
        status_code: HTTP status code
        elapsed_ms: Round-trip time in milliseconds
        body: Decoded JSON body (takes precedence over body_text)
        body_text: Raw body text, decoded as JSON on demand
        records_path: JSONPath locating the record sequence in the body
    """
    status_code: int
    elapsed_ms: float = 0.0
    body: Any = None
    body_text: str | None = None
    records_path: str = "$"

    def json(self) -> Any:
        """Return the decoded body."""
        if self.body is not None or self.body_text is None:
            return self.body
        try:
            return json.loads(self.body_text)
        except json.JSONDecodeError as e:
            raise ResponseBodyError(f"Response body is not valid JSON: {e}") from e

    def records(self) -> list[Any]:
        data = self.json()

        if self.records_path and self.records_path != "$":
            try:
                expr = parse_jsonpath(self.records_path)
            except JSONPathError as e:
                raise ResponseBodyError(
                    f"Invalid records path {self.records_path!r}: {e}"
                ) from e
            matches = expr.find(data)
            if not matches:
                raise ResponseBodyError(
                    f"Records path {self.records_path!r} matched nothing in the response body"
                )
            data = matches[0].value

        if not isinstance(data, list):
            raise ResponseBodyError(
                f"Expected a sequence of records, got {type(data).__name__}"
            )
        return data
