"""
Settings loader.

This module provides the public API for loading and validating
helper settings from disk or YAML strings.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .models import HelperSettings
from .validation import SettingsValidator, ValidationResult

logger = logging.getLogger(__name__)


def load_settings(path: str | Path) -> tuple[HelperSettings | None, ValidationResult]:
    """
    Load and validate helper settings from a YAML file.

    Args:
        path: Path to the YAML settings file

    Returns:
        Tuple of (HelperSettings or None, ValidationResult)
        If validation fails, HelperSettings will be None.

    Example:
        settings, result = load_settings("apicheck.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
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

    logger.debug("Loading settings from %s", path)
    return parse_settings_yaml(path.read_text(), source=str(path))


def parse_settings_yaml(
    yaml_string: str,
    source: str = "yaml",
) -> tuple[HelperSettings | None, ValidationResult]:
    """
    Validate helper settings from a YAML string.

    An empty document yields the default settings.

    Args:
        yaml_string: YAML content as a string
        source: Name used in error paths

    Returns:
        Tuple of (HelperSettings or None, ValidationResult)
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

    if data is None:
        return HelperSettings(), ValidationResult()

    result = SettingsValidator(data).validate()
    if not result.is_valid:
        return None, result

    return HelperSettings.from_dict(data), result
