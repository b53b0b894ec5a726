"""
Schema validation for replayable exchanges.

This module checks raw parsed YAML against the exchange schema and
reports errors with helpful messages.
"""

from __future__ import annotations

from typing import Any

from ..config.validation import SettingsValidator, ValidationResult
from .models import CheckOp


class ExchangeValidator:
    """Validates raw parsed YAML against the exchange schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "request", "response", "checks"}
    OPTIONAL_TOP_LEVEL = {"settings"}
    VALID_CHECK_OPS = {op.value for op in CheckOp}

    # Ops and the shape their 'value' must have
    VALUE_REQUIRED_OPS = {
        "response_time_below": "number",
        "all_properties_present": "list of strings",
        "property_non_empty": "string",
        "optional_properties_if_requested": "list of strings",
        "date_before": "pair",
        "each_node_date_before": "pair of strings",
    }

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_request()
        self._validate_response()
        self._validate_settings()
        self._validate_checks(self.data.get("checks"), "checks")

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your exchange file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for the exchange"
            )

    def _validate_request(self) -> None:
        request = self.data.get("request")
        if not isinstance(request, dict):
            self.result.add_error(
                "request",
                "Must be an object",
                value=request
            )
            return

        url = request.get("url")
        if not url:
            self.result.add_error(
                "request.url",
                "Required field",
                suggestion="Add 'url: \"https://...\"' to the request"
            )
        elif not isinstance(url, str):
            self.result.add_error(
                "request.url",
                "Must be a string",
                value=url
            )
        elif not (url.startswith("http://") or url.startswith("https://")):
            self.result.add_error(
                "request.url",
                "Must be a valid HTTP(S) URL",
                value=url,
                suggestion="URL should start with 'http://' or 'https://'"
            )

        method = request.get("method")
        if "method" in request and not isinstance(method, str):
            self.result.add_error(
                "request.method",
                "Must be a string",
                value=method
            )

    def _validate_response(self) -> None:
        response = self.data.get("response")
        if not isinstance(response, dict):
            self.result.add_error(
                "response",
                "Must be an object",
                value=response
            )
            return

        status = response.get("status")
        if not isinstance(status, int) or isinstance(status, bool):
            self.result.add_error(
                "response.status",
                "Must be an integer HTTP status code",
                value=status,
                suggestion="Use e.g. 'status: 200'"
            )

        if "elapsed_ms" in response:
            elapsed = response["elapsed_ms"]
            if isinstance(elapsed, bool) or not isinstance(elapsed, (int, float)) or elapsed < 0:
                self.result.add_error(
                    "response.elapsed_ms",
                    "Must be a non-negative number (milliseconds)",
                    value=elapsed
                )

        if "body" in response and "body_text" in response:
            self.result.add_error(
                "response",
                "Use either 'body' or 'body_text', not both"
            )

        body_text = response.get("body_text")
        if body_text is not None and not isinstance(body_text, str):
            self.result.add_error(
                "response.body_text",
                "Must be a string (raw JSON)",
                value=body_text
            )

    def _validate_settings(self) -> None:
        settings = self.data.get("settings")
        if settings is None:
            return
        self.result.extend(SettingsValidator(settings).validate())

    def _validate_checks(self, checks: Any, path: str) -> None:
        if not isinstance(checks, list):
            self.result.add_error(
                path,
                "Must be a list",
                value=checks
            )
            return

        if len(checks) == 0:
            self.result.add_error(
                path,
                "Must contain at least one check",
                suggestion="Add e.g. '- op: status_ok'"
            )
            return

        for i, check in enumerate(checks):
            self._validate_check(f"{path}[{i}]", check)

    def _validate_check(self, path: str, check: Any) -> None:
        if not isinstance(check, dict):
            self.result.add_error(
                path,
                "Check must be an object",
                value=check
            )
            return

        op = check.get("op")
        if not isinstance(op, str) or op not in self.VALID_CHECK_OPS:
            self.result.add_error(
                f"{path}.op",
                "Invalid check operator",
                value=op,
                suggestion=f"Valid operators: {', '.join(sorted(self.VALID_CHECK_OPS))}"
            )
            return

        if op == CheckOp.IF_QUERY_PARAM.value:
            param = check.get("param")
            if not isinstance(param, str) or not param:
                self.result.add_error(
                    f"{path}.param",
                    "if_query_param requires a 'param' string",
                    value=param
                )
            self._validate_checks(check.get("checks"), f"{path}.checks")
            return

        shape = self.VALUE_REQUIRED_OPS.get(op)
        if shape is None:
            return
        if "value" not in check:
            self.result.add_error(
                f"{path}.value",
                f"Operator '{op}' requires a 'value' field ({shape})"
            )
            return
        if not _has_shape(check["value"], shape):
            self.result.add_error(
                f"{path}.value",
                f"Must be a {shape}",
                value=check["value"]
            )


def _has_shape(value: Any, shape: str) -> bool:
    if shape == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if shape == "string":
        return isinstance(value, str) and bool(value)
    if shape == "list of strings":
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    if shape == "pair":
        return isinstance(value, list) and len(value) == 2
    if shape == "pair of strings":
        return isinstance(value, list) and len(value) == 2 and all(isinstance(v, str) for v in value)
    return False
