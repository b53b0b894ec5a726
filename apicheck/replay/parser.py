"""
Exchange parser.

This module converts validated YAML data into typed Exchange structures.
"""

from __future__ import annotations

from typing import Any

from .models import CheckOp, CheckSpec, Exchange, RequestSpec, ResponseSpec


class ExchangeParser:
    """Parses and converts validated YAML to a typed Exchange."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> Exchange:
        """Convert validated data to typed Exchange."""
        return Exchange(
            version=self.data["version"],
            name=self.data["name"],
            request=self._parse_request(),
            response=self._parse_response(),
            checks=self._parse_checks(self.data["checks"]),
            settings=self.data.get("settings") or {},
            raw=self.data,
        )

    def _parse_request(self) -> RequestSpec:
        request = self.data["request"]
        return RequestSpec(
            url=request["url"],
            method=request.get("method", "GET"),
        )

    def _parse_response(self) -> ResponseSpec:
        response = self.data["response"]
        return ResponseSpec(
            status=response["status"],
            elapsed_ms=response.get("elapsed_ms", 0.0),
            body=response.get("body"),
            body_text=response.get("body_text"),
        )

    def _parse_checks(self, checks: list[dict]) -> list[CheckSpec]:
        return [self._parse_check(check) for check in checks]

    def _parse_check(self, check: dict) -> CheckSpec:
        op = CheckOp(check["op"])
        if op == CheckOp.IF_QUERY_PARAM:
            return CheckSpec(
                op=op,
                param=check["param"],
                checks=self._parse_checks(check["checks"]),
            )
        return CheckSpec(op=op, value=check.get("value"))
