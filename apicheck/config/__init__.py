"""
Helper settings.

Usage:
    from apicheck.config import load_settings

    settings, result = load_settings("apicheck.yaml")
    if not result.is_valid:
        print(result)

Example file:
    response_time_ceiling_ms: 3000
    missing_property_policy: fail     # or: stringify
    query_match: exact                # or: substring
    date_check_mode: soft             # or: hard
    records_path: $.data
"""

from .models import DEFAULT_RESPONSE_TIME_CEILING_MS, HelperSettings
from .validation import SettingsValidator, ValidationError, ValidationResult
from .loader import load_settings, parse_settings_yaml

__all__ = [
    "DEFAULT_RESPONSE_TIME_CEILING_MS",
    "HelperSettings",
    "SettingsValidator",
    "ValidationError",
    "ValidationResult",
    "load_settings",
    "parse_settings_yaml",
]
