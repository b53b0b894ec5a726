"""
Exchange loader.

This module provides the public API for loading and validating
exchange files from disk or YAML strings.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..config.validation import ValidationResult
from .models import Exchange
from .parser import ExchangeParser
from .validation import ExchangeValidator

logger = logging.getLogger(__name__)


def load_exchange(path: str | Path) -> tuple[Exchange | None, ValidationResult]:
    """
    Load and validate an exchange from a YAML file.

    Args:
        path: Path to the YAML exchange file

    Returns:
        Tuple of (Exchange or None, ValidationResult)
        If validation fails, Exchange will be None.

    Example:
        exchange, result = load_exchange("exchanges/list_items.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
        report = run_exchange(exchange)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    logger.debug("Loading exchange from %s", path)
    return parse_exchange_yaml(path.read_text(), source=str(path))


def parse_exchange_yaml(
    yaml_string: str,
    source: str = "yaml",
) -> tuple[Exchange | None, ValidationResult]:
    """
    Validate an exchange from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string
        source: Name used in error paths

    Returns:
        Tuple of (Exchange or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            source,
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    result = ExchangeValidator(data).validate()
    if not result.is_valid:
        return None, result

    return ExchangeParser(data).parse(), result
