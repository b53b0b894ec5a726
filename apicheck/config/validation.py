"""
Validation for helper settings.

This module contains the validation result types shared by the
settings and exchange loaders, and the checks that raw parsed YAML
settings must pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from ..assertions.models import CheckMode, MissingPropertyPolicy, QueryMatch
from .models import HelperSettings


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "settings.query_match"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def extend(self, other: ValidationResult) -> None:
        self.errors.extend(other.errors)

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Settings Validator
# ─────────────────────────────────────────────────────────────────────────────

class SettingsValidator:
    """Validates raw parsed YAML against the HelperSettings schema."""

    VALID_KEYS = HelperSettings.field_names()
    VALID_MISSING_POLICIES = {p.value for p in MissingPropertyPolicy}
    VALID_QUERY_MATCHES = {m.value for m in QueryMatch}
    VALID_CHECK_MODES = {m.value for m in CheckMode}

    def __init__(self, data: Any, prefix: str = "settings"):
        self.data = data
        self.prefix = prefix
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        if not isinstance(self.data, dict):
            self.result.add_error(
                self.prefix,
                "Must be an object",
                value=self.data
            )
            return self.result

        self._validate_keys()
        self._validate_not_null()
        self._validate_ceiling()
        self._validate_choice(
            "missing_property_policy", self.VALID_MISSING_POLICIES
        )
        self._validate_choice("query_match", self.VALID_QUERY_MATCHES)
        self._validate_choice("date_check_mode", self.VALID_CHECK_MODES)
        self._validate_records_path()
        return self.result

    def _path(self, key: str) -> str:
        return f"{self.prefix}.{key}"

    def _validate_keys(self) -> None:
        for key in set(self.data.keys()) - self.VALID_KEYS:
            self.result.add_error(
                self._path(str(key)),
                f"Unknown setting '{key}'",
                suggestion=f"Valid settings are: {', '.join(sorted(self.VALID_KEYS))}"
            )

    def _validate_not_null(self) -> None:
        for key in sorted(self.VALID_KEYS & set(self.data.keys())):
            if self.data[key] is None:
                self.result.add_error(
                    self._path(key),
                    "Must not be null",
                    suggestion=f"Give '{key}' a value, or remove it to keep the default"
                )

    def _validate_ceiling(self) -> None:
        ceiling = self.data.get("response_time_ceiling_ms")
        if ceiling is None:
            return
        if isinstance(ceiling, bool) or not isinstance(ceiling, (int, float)):
            self.result.add_error(
                self._path("response_time_ceiling_ms"),
                "Must be a number (milliseconds)",
                value=ceiling
            )
        elif ceiling <= 0:
            self.result.add_error(
                self._path("response_time_ceiling_ms"),
                "Must be > 0",
                value=ceiling,
                suggestion="Use 'response_time_ceiling_ms: 5000'"
            )

    def _validate_choice(self, key: str, valid: set[str]) -> None:
        value = self.data.get(key)
        if value is None:
            return
        if not isinstance(value, str) or value not in valid:
            self.result.add_error(
                self._path(key),
                "Invalid value",
                value=value,
                suggestion=f"Valid values: {', '.join(sorted(valid))}"
            )

    def _validate_records_path(self) -> None:
        records_path = self.data.get("records_path")
        if records_path is None:
            return
        if not isinstance(records_path, str):
            self.result.add_error(
                self._path("records_path"),
                "Must be a string (JSONPath expression)",
                value=records_path
            )
            return
        try:
            parse_jsonpath(records_path)
        except JSONPathError as e:
            self.result.add_error(
                self._path("records_path"),
                f"Invalid JSONPath expression: {e}",
                value=records_path,
                suggestion="Use '$' for a top-level array, or e.g. '$.data'"
            )
