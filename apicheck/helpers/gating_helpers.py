"""Gates that run an action only when a request predicate holds."""

from __future__ import annotations

import logging
from typing import Callable

from ..sandbox import Sandbox

logger = logging.getLogger(__name__)


def run_if_query_param_exists(ctx: Sandbox, query_param_name: str, action: Callable[[], object]) -> bool:
    """
    Run `action` once if the request carries a query parameter with this exact name.

    Exceptions raised by the action propagate.

    Returns:
        True if the action ran
    """
    if query_param_name not in ctx.request.query_parameter_names():
        logger.debug("Skipping gated action: no %r query parameter", query_param_name)
        return False
    action()
    return True
