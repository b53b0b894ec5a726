#!/usr/bin/env python3
"""
apicheck CLI - replay captured API exchanges through the helpers

Usage:
    apicheck run <exchange.yaml> [OPTIONS]
    apicheck validate <exchange.yaml>
    apicheck --version
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import HelperSettings, load_settings
from .replay import CheckOp, CheckSpec, load_exchange, run_exchange
from .reporting import Reporter

app = typer.Typer(
    name="apicheck",
    help="🔎 apicheck - Assertion helpers for HTTP API tests",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"🔎 apicheck v{__version__}")
        raise typer.Exit()


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level_callback(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"'{value}' is not one of: {', '.join(LOG_LEVELS)}")
    return level


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", callback=log_level_callback,
        help="Log level for helper diagnostics (DEBUG, INFO, WARNING)"
    ),
):
    """
    🔎 apicheck - Assertion helpers for HTTP API tests

    Replay captured request/response exchanges through the helpers.
    """
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _check_rows(checks: list[CheckSpec], depth: int = 0):
    """Flatten nested checks into (indent, op, details) rows."""
    for check in checks:
        indent = "  " * depth
        if check.op == CheckOp.IF_QUERY_PARAM:
            yield indent, check.op.value, f"param: {check.param}"
            yield from _check_rows(check.checks, depth + 1)
        else:
            details = "" if check.value is None else repr(check.value)
            yield indent, check.op.value, details


@app.command()
def run(
    exchange_file: Path = typer.Argument(
        ...,
        help="Path to the exchange YAML file",
        exists=True,
        readable=True,
    ),
    settings_file: Optional[Path] = typer.Option(
        None, "--settings", "-s",
        help="YAML file with helper settings",
        exists=True,
        readable=True,
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show errors and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
):
    """
    Run the checks listed in an exchange file.

    Exits 0 only if every check passed.
    """
    settings = HelperSettings()
    if settings_file is not None:
        loaded, validation = load_settings(settings_file)
        if not validation.is_valid:
            console.print(f"\n[red]❌ Invalid settings:[/red]")
            console.print(str(validation), markup=False)
            raise typer.Exit(code=1)
        settings = loaded

    if not quiet:
        console.print(f"\n📄 Loading exchange: {exchange_file}")

    exchange, validation = load_exchange(exchange_file)
    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"   [green]✅ Valid exchange:[/green] {exchange.name}")

    report = run_exchange(exchange, settings)

    if output == "json":
        console.print_json(data=report.to_dict())
    elif not quiet:
        console.print("\n" + report.summary(), markup=False)
    else:
        console.print(f"{report.status.value.upper()}: {exchange.name}")

    if not no_report:
        report_path = report_dir / f"{report.session_id}.json"
        Reporter(report).save_json(report_path)
        if not quiet:
            console.print(f"\n📁 Report saved: {report_path}")

    if report.status.value == "passed":
        raise typer.Exit(code=0)
    raise typer.Exit(code=1)


@app.command()
def validate(
    exchange_file: Path = typer.Argument(
        ...,
        help="Path to the exchange YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate an exchange YAML file without running it.
    """
    console.print(f"\n📄 Validating: {exchange_file}")

    exchange, validation = load_exchange(exchange_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid exchange:[/green] {exchange.name}")
    console.print(f"   Request: {exchange.request.method} {exchange.request.url}")
    console.print(f"   Response: {exchange.response.status}")

    table = Table(title="Checks")
    table.add_column("Op", style="cyan")
    table.add_column("Details")
    for indent, op, details in _check_rows(exchange.checks):
        table.add_row(f"{indent}{op}", details)

    console.print()
    console.print(table)
    raise typer.Exit(code=0)


@app.command()
def info():
    """
    Show information about apicheck.
    """
    console.print(f"""
🔎 [bold]apicheck[/bold] v{__version__}

Assertion, gating and iteration helpers for HTTP API tests

[bold]Helpers:[/bold]
  • assertion_helpers: status, response time, property presence / non-empty
  • gating_helpers: run checks only when a query parameter is present
  • utilities: iterate response records, compare dates

[bold]Check operators:[/bold]
  {", ".join(op.value for op in CheckOp)}

[bold]Quick Start:[/bold]
  apicheck run exchanges/list_items.yaml
  apicheck validate exchanges/list_items.yaml
""")


if __name__ == "__main__":
    app()
