"""
Typed settings for the helpers.

Every helper that has a policy choice reads its default from here,
and every one of them also takes an explicit override.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from ..assertions.models import CheckMode, MissingPropertyPolicy, QueryMatch

DEFAULT_RESPONSE_TIME_CEILING_MS = 5000


@dataclass(frozen=True)
class HelperSettings:
    """
    Defaults the helpers fall back on.

    Attributes:
        response_time_ceiling_ms: Exclusive ceiling for assert_response_time_below
        missing_property_policy: Treatment of absent keys in non-empty checks
        query_match: How optional properties are detected in the request
        date_check_mode: Whether is_date_before aborts on failure
        records_path: JSONPath to the record sequence inside the body
    """
    response_time_ceiling_ms: float = DEFAULT_RESPONSE_TIME_CEILING_MS
    missing_property_policy: MissingPropertyPolicy = MissingPropertyPolicy.STRINGIFY
    query_match: QueryMatch = QueryMatch.SUBSTRING
    date_check_mode: CheckMode = CheckMode.HARD
    records_path: str = "$"

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HelperSettings:
        """Build settings from validated raw data; absent keys keep their defaults."""
        return cls().merged(data)

    def merged(self, data: dict[str, Any] | None) -> HelperSettings:
        """
        Return a copy with the given (validated) raw overrides applied.

        Null values are not overrides; the current value is kept.
        """
        if not data:
            return self
        data = {k: v for k, v in data.items() if v is not None}
        overrides: dict[str, Any] = {}
        if "response_time_ceiling_ms" in data:
            overrides["response_time_ceiling_ms"] = data["response_time_ceiling_ms"]
        if "missing_property_policy" in data:
            overrides["missing_property_policy"] = MissingPropertyPolicy(data["missing_property_policy"])
        if "query_match" in data:
            overrides["query_match"] = QueryMatch(data["query_match"])
        if "date_check_mode" in data:
            overrides["date_check_mode"] = CheckMode(data["date_check_mode"])
        if "records_path" in data:
            overrides["records_path"] = data["records_path"]
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "response_time_ceiling_ms": self.response_time_ceiling_ms,
            "missing_property_policy": self.missing_property_policy.value,
            "query_match": self.query_match.value,
            "date_check_mode": self.date_check_mode.value,
            "records_path": self.records_path,
        }
