"""
Replay captured exchanges.

This package loads a captured request/response pair and a list of
checks from YAML, then runs the listed helpers against it.

Components:
    - models: Exchange, CheckSpec and CheckOp
    - validation: Schema checks with helpful error messages
    - parser: Validated YAML to typed Exchange
    - loader: load_exchange / parse_exchange_yaml
    - runner: run_exchange

Usage:
    from apicheck.replay import load_exchange, run_exchange

    exchange, result = load_exchange("exchanges/list_items.yaml")
    if result.is_valid:
        report = run_exchange(exchange)
        print(report.summary())
"""

from .models import CheckOp, CheckSpec, Exchange, RequestSpec, ResponseSpec
from .validation import ExchangeValidator
from .parser import ExchangeParser
from .loader import load_exchange, parse_exchange_yaml
from .runner import build_sandbox, run_check, run_checks, run_exchange

__all__ = [
    # Models
    "CheckOp",
    "CheckSpec",
    "Exchange",
    "RequestSpec",
    "ResponseSpec",
    # Validation / parsing
    "ExchangeValidator",
    "ExchangeParser",
    # Loader
    "load_exchange",
    "parse_exchange_yaml",
    # Runner
    "build_sandbox",
    "run_check",
    "run_checks",
    "run_exchange",
]
