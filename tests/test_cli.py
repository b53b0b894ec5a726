"""Tests for the apicheck command line."""

import json

import pytest
from typer.testing import CliRunner

from apicheck import __version__
from apicheck.cli import app

runner = CliRunner()

PASSING = """
version: 1
name: health
request:
  url: https://api.example.com/items?fields=name
response:
  status: 200
  elapsed_ms: 40
  body: [{id: 1, name: widget}]
checks:
  - op: status_ok
  - op: if_query_param
    param: fields
    checks:
      - op: property_non_empty
        value: name
"""


@pytest.fixture
def exchange_file(tmp_path):
    path = tmp_path / "exchange.yaml"
    path.write_text(PASSING)
    return path


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_run_passing_exchange(exchange_file, tmp_path):
    report_dir = tmp_path / "reports"
    result = runner.invoke(app, ["run", str(exchange_file), "--report-dir", str(report_dir)])

    assert result.exit_code == 0, result.output
    assert "PASSED" in result.output
    [saved] = list(report_dir.glob("*.json"))
    assert json.loads(saved.read_text())["summary"]["passed"] == 2


def test_run_failing_exchange(tmp_path):
    path = tmp_path / "exchange.yaml"
    path.write_text(PASSING.replace("status: 200", "status: 503"))

    result = runner.invoke(app, ["run", str(path), "--no-report"])
    assert result.exit_code == 1


def test_run_json_output(exchange_file):
    result = runner.invoke(app, ["run", str(exchange_file), "--no-report", "--output", "json"])

    assert result.exit_code == 0
    assert '"status": "passed"' in result.output


def test_run_with_settings(exchange_file, tmp_path):
    settings = tmp_path / "settings.yaml"
    settings.write_text("query_match: sideways\n")

    result = runner.invoke(app, ["run", str(exchange_file), "--settings", str(settings), "--no-report"])

    assert result.exit_code == 1
    assert "Invalid settings" in result.output


def test_validate(exchange_file):
    result = runner.invoke(app, ["validate", str(exchange_file)])

    assert result.exit_code == 0
    assert "Valid exchange" in result.output
    assert "if_query_param" in result.output


def test_validate_invalid(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("version: 1\nname: bad\n")

    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert "Validation failed" in result.output


def test_info():
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "each_node_date_before" in result.output


def test_unknown_log_level_is_a_usage_error():
    result = runner.invoke(app, ["--log-level", "loud", "info"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


def test_log_level_is_case_insensitive():
    result = runner.invoke(app, ["--log-level", "debug", "info"])

    assert result.exit_code == 0, result.output
