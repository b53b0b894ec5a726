"""
Typed data structures for replayable exchanges.

An exchange is one captured request/response pair plus the list of
helper checks to run against it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CheckOp(str, Enum):
    """Checks an exchange can list, one per helper."""
    STATUS_OK = "status_ok"
    RESPONSE_TIME_BELOW = "response_time_below"
    ALL_PROPERTIES_PRESENT = "all_properties_present"
    PROPERTY_NON_EMPTY = "property_non_empty"
    OPTIONAL_PROPERTIES_IF_REQUESTED = "optional_properties_if_requested"
    IF_QUERY_PARAM = "if_query_param"  # gate wrapping nested checks
    DATE_BEFORE = "date_before"  # two literal dates
    EACH_NODE_DATE_BEFORE = "each_node_date_before"  # two record fields, per record


@dataclass
class CheckSpec:
    """One check in an exchange."""
    op: CheckOp
    value: Any = None
    param: str | None = None  # for if_query_param
    checks: list[CheckSpec] = field(default_factory=list)  # for if_query_param

    def describe(self) -> str:
        if self.op == CheckOp.IF_QUERY_PARAM:
            return f"if '{self.param}' → {len(self.checks)} check(s)"
        if self.value is None:
            return self.op.value
        return f"{self.op.value}: {self.value!r}"


@dataclass
class RequestSpec:
    url: str
    method: str = "GET"


@dataclass
class ResponseSpec:
    status: int
    elapsed_ms: float = 0.0
    body: Any = None
    body_text: str | None = None


@dataclass
class Exchange:
    """Fully parsed and validated exchange."""
    version: int
    name: str
    request: RequestSpec
    response: ResponseSpec
    checks: list[CheckSpec] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)
