"""Tests for settings loading and validation."""

import pytest

from apicheck import CheckMode, MissingPropertyPolicy, QueryMatch
from apicheck.config import HelperSettings, load_settings, parse_settings_yaml


def test_defaults():
    settings = HelperSettings()

    assert settings.response_time_ceiling_ms == 5000
    assert settings.missing_property_policy == MissingPropertyPolicy.STRINGIFY
    assert settings.query_match == QueryMatch.SUBSTRING
    assert settings.date_check_mode == CheckMode.HARD
    assert settings.records_path == "$"


def test_empty_document_gives_defaults():
    settings, result = parse_settings_yaml("")

    assert result.is_valid
    assert settings == HelperSettings()


def test_parse_all_settings():
    settings, result = parse_settings_yaml(
        """
response_time_ceiling_ms: 2500
missing_property_policy: fail
query_match: exact
date_check_mode: soft
records_path: $.data
"""
    )

    assert result.is_valid, str(result)
    assert settings.response_time_ceiling_ms == 2500
    assert settings.missing_property_policy == MissingPropertyPolicy.FAIL
    assert settings.query_match == QueryMatch.EXACT
    assert settings.date_check_mode == CheckMode.SOFT
    assert settings.records_path == "$.data"


def test_invalid_settings_are_reported_with_paths():
    settings, result = parse_settings_yaml(
        """
response_time_ceiling_ms: -1
query_match: fuzzy
colour: blue
"""
    )

    assert settings is None
    paths = {e.path for e in result.errors}
    assert paths == {
        "settings.response_time_ceiling_ms",
        "settings.query_match",
        "settings.colour",
    }


def test_non_mapping_settings():
    settings, result = parse_settings_yaml("- a\n- b\n")

    assert settings is None
    assert result.errors[0].message == "Must be an object"


def test_invalid_yaml():
    settings, result = parse_settings_yaml("a: [unclosed")

    assert settings is None
    assert "Invalid YAML syntax" in result.errors[0].message


def test_load_missing_file(tmp_path):
    settings, result = load_settings(tmp_path / "nope.yaml")

    assert settings is None
    assert result.errors[0].message == "File not found"


def test_load_settings_file(tmp_path):
    path = tmp_path / "apicheck.yaml"
    path.write_text("query_match: exact\n")

    settings, result = load_settings(path)
    assert result.is_valid
    assert settings.query_match == QueryMatch.EXACT


def test_merged_keeps_unset_values():
    base = HelperSettings(response_time_ceiling_ms=1000)
    merged = base.merged({"query_match": "exact"})

    assert merged.response_time_ceiling_ms == 1000
    assert merged.query_match == QueryMatch.EXACT
    assert base.query_match == QueryMatch.SUBSTRING


@pytest.mark.parametrize(
    "key",
    [
        "response_time_ceiling_ms",
        "missing_property_policy",
        "query_match",
        "date_check_mode",
        "records_path",
    ],
)
def test_null_setting_is_a_validation_error(key):
    settings, result = parse_settings_yaml(f"{key}:\n")

    assert settings is None
    [error] = result.errors
    assert error.path == f"settings.{key}"
    assert error.message == "Must not be null"


def test_merged_skips_null_overrides():
    settings = HelperSettings().merged({"query_match": None, "response_time_ceiling_ms": None})

    assert settings == HelperSettings()


@pytest.mark.parametrize(
    "text, key",
    [
        ("query_match: [a]\n", "query_match"),
        ("date_check_mode: {x: 1}\n", "date_check_mode"),
        ("missing_property_policy: 3\n", "missing_property_policy"),
    ],
)
def test_non_string_choice_is_a_validation_error(text, key):
    settings, result = parse_settings_yaml(text)

    assert settings is None
    assert [e.path for e in result.errors] == [f"settings.{key}"]
    assert result.errors[0].message == "Invalid value"


@pytest.mark.parametrize("records_path", ["'$.a#'", "'$.['"])
def test_unparseable_records_path_is_a_validation_error(records_path):
    settings, result = parse_settings_yaml(f"records_path: {records_path}\n")

    assert settings is None
    assert result.errors[0].path == "settings.records_path"
    assert "Invalid JSONPath expression" in result.errors[0].message
