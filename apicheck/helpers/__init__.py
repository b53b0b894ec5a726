"""
Helper namespaces for API test scripts.

Subpackages:
    - assertion_helpers: Named checks on the response (the "success" group)
    - gating_helpers: Run actions only when the request meets a condition
    - utilities: Iterate response records, compare dates

Usage:
    from apicheck.helpers import assertion_helpers, gating_helpers, utilities

    assertion_helpers.assert_status_ok(ctx)
    gating_helpers.run_if_query_param_exists(
        ctx, "fields", lambda: assertion_helpers.assert_property_non_empty(ctx, "name")
    )
    utilities.for_each_response_node(
        ctx, lambda node: utilities.is_date_before(ctx, node["created_at"], node["updated_at"])
    )
"""

from . import assertion_helpers, gating_helpers, utilities

from .assertion_helpers import (
    assert_all_properties_present,
    assert_optional_properties_if_requested,
    assert_property_non_empty,
    assert_response_time_below,
    assert_status_ok,
    request_mentions,
)
from .gating_helpers import run_if_query_param_exists
from .utilities import for_each_response_node, is_date_before, parse_date

__all__ = [
    # Namespaces
    "assertion_helpers",
    "gating_helpers",
    "utilities",
    # Assertion helpers
    "assert_all_properties_present",
    "assert_optional_properties_if_requested",
    "assert_property_non_empty",
    "assert_response_time_below",
    "assert_status_ok",
    "request_mentions",
    # Gating helpers
    "run_if_query_param_exists",
    # Utilities
    "for_each_response_node",
    "is_date_before",
    "parse_date",
]
