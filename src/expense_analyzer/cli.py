"""Command-line interface for the expense analyzer.

Parses OFX bank statements and prints their transactions or per-account
totals.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from expense_analyzer.core.config import settings
from expense_analyzer.core.logging_setup import configure_logging
from expense_analyzer.ingestion.base import ParseResult
from expense_analyzer.ingestion.ofx.errors import INVALID_FORMAT
from expense_analyzer.ingestion.ofx.header import header_mismatches, split_header
from expense_analyzer.ingestion.parsers.ofx import OfxFileParser, decode_statement_bytes
from expense_analyzer.ingestion.registry import ParserRegistry
from expense_analyzer.services.summary import summarize_by_account
# Import parsers to ensure registration
import expense_analyzer.ingestion.parsers  # noqa: F401


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """OFX statement tools."""
    configure_logging("DEBUG" if verbose else settings.EFFECTIVE_LOG_LEVEL)


def _parse_or_exit(file_path: Path) -> ParseResult:
    result = OfxFileParser().parse(file_path)
    if result.errors:
        click.echo(result.errors[0], err=True)
        sys.exit(1)
    return result


def _echo_warnings(result: ParseResult) -> None:
    for warning in result.warnings:
        click.echo(f"⚠ {warning}", err=True)
    defaulted = result.metadata.get("fallback_count", 0)
    if defaulted:
        click.echo(f"⚠ {defaulted} field(s) replaced with defaults", err=True)
    dropped = result.metadata.get("dropped_transactions", 0)
    if dropped:
        click.echo(f"⚠ {dropped} malformed transaction(s) dropped", err=True)


@main.command("parse")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def parse_command(file_path: Path, json_output: bool) -> None:
    """Parse an OFX file and print its transactions."""
    result = _parse_or_exit(file_path)

    if json_output:
        payload = {
            "file": str(file_path),
            "file_hash": result.file_hash,
            "transactions": [tx.to_dict() for tx in result.transactions],
            "warnings": result.warnings,
            "metadata": result.metadata,
        }
        click.echo(json.dumps(payload, indent=2))
        return

    _echo_warnings(result)
    for tx in result.transactions:
        click.echo(
            f"{tx.date:%Y-%m-%d}  {tx.type.label:<7} {tx.amount:>12}  "
            f"{tx.name or tx.memo}  [{tx.id}]"
        )
    click.echo(f"Transactions parsed: {result.record_count}")


@main.command("summary")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def summary_command(file_path: Path, json_output: bool) -> None:
    """Show per-account credit/debit totals for an OFX file."""
    result = _parse_or_exit(file_path)
    summaries = summarize_by_account(result.transactions)

    if json_output:
        click.echo(json.dumps([s.to_dict() for s in summaries], indent=2))
        return

    _echo_warnings(result)
    if not summaries:
        click.echo("No transactions found.")
        return
    for s in summaries:
        click.echo(f"Account {s.account.account_id} ({s.account.account_type.value}, {s.account.currency})")
        click.echo(f"  Transactions: {s.count}")
        click.echo(f"  Credits: {s.credits}")
        click.echo(f"  Debits:  {s.debits}")
        click.echo(f"  Net:     {s.net}")


@main.command("validate")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate_command(file_path: Path) -> None:
    """Check that an OFX file carries the supported header."""
    text = decode_statement_bytes(file_path.read_bytes())
    parts = split_header(text)
    if parts is None:
        click.echo(INVALID_FORMAT, err=True)
        sys.exit(1)

    problems = header_mismatches(parts[0])
    if problems:
        click.echo("Unsupported OFX header:", err=True)
        for problem in problems:
            click.echo(f"  - {problem}", err=True)
        sys.exit(1)
    click.echo("Header OK")


@main.command("list-parsers")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def list_parsers_command(json_output: bool) -> None:
    """List available parsers."""
    parsers = ParserRegistry.list_parsers()
    if json_output:
        click.echo(json.dumps(parsers, indent=2))
    else:
        for p in parsers:
            click.echo(f"- {p['name']}: {p['description']}")
            click.echo(f"  Formats: {', '.join(p['supported_formats'])}")
            click.echo("")


@main.command("parser-info")
@click.argument("parser_name")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def parser_info_command(parser_name: str, json_output: bool) -> None:
    """Get details about a specific parser."""
    try:
        info = ParserRegistry.get_parser_metadata(parser_name)
    except KeyError:
        click.echo(f"Parser '{parser_name}' not found.", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(info, indent=2))
    else:
        click.echo(f"Name: {info['name']}")
        click.echo(f"Description: {info['description']}")
        click.echo(f"Formats: {', '.join(info.get('supported_formats', []))}")
        if info.get('field_mappings'):
            click.echo("Field Mappings:")
            for tag, attr in info['field_mappings'].items():
                click.echo(f"  {tag} -> {attr}")
        click.echo(f"Version: {info['parser_version']}")


@main.command("web")
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=8000, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload")
def web_command(host: str, port: int, reload: bool) -> None:
    """Start the web interface."""
    import uvicorn
    uvicorn.run("expense_analyzer.web.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
