"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from expense_analyzer.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def statement(tmp_path, checking_ofx):
    path = tmp_path / "statement.ofx"
    path.write_text(checking_ofx)
    return path


def test_parse_prints_transactions(runner, statement):
    result = runner.invoke(main, ["parse", str(statement)])
    assert result.exit_code == 0
    assert "TXN1" in result.output
    assert "6291.22" in result.output
    assert "Transactions parsed: 2" in result.output


def test_parse_json(runner, statement):
    result = runner.invoke(main, ["parse", str(statement), "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [t["id"] for t in payload["transactions"]] == ["TXN1", "TXN2"]
    assert payload["metadata"]["accounts"][0]["account_id"] == 9351720470


def test_parse_failure_exits_with_reason(runner, tmp_path):
    path = tmp_path / "empty.ofx"
    path.write_text("   ")
    result = runner.invoke(main, ["parse", str(path)])
    assert result.exit_code == 1
    assert "Input is empty." in result.output


def test_summary(runner, statement):
    result = runner.invoke(main, ["summary", str(statement)])
    assert result.exit_code == 0
    assert "Account 9351720470 (Checking, USD)" in result.output
    assert "Net:     6191.22" in result.output


def test_summary_json(runner, statement):
    result = runner.invoke(main, ["summary", str(statement), "--json"])
    payload = json.loads(result.output)
    assert payload[0]["credits"] == "6291.22"
    assert payload[0]["debits"] == "-100.00"


def test_validate_ok(runner, statement):
    result = runner.invoke(main, ["validate", str(statement)])
    assert result.exit_code == 0
    assert "Header OK" in result.output


def test_validate_lists_mismatches(runner, tmp_path, checking_ofx):
    path = tmp_path / "bad.ofx"
    path.write_text(checking_ofx.replace("VERSION:102", "VERSION:211"))
    result = runner.invoke(main, ["validate", str(path)])
    assert result.exit_code == 1
    assert "VERSION:211 (expected 102)" in result.output


def test_validate_without_marker(runner, tmp_path):
    path = tmp_path / "plain.ofx"
    path.write_text("hello")
    result = runner.invoke(main, ["validate", str(path)])
    assert result.exit_code == 1
    assert "Invalid OFX format." in result.output


def test_list_parsers(runner):
    result = runner.invoke(main, ["list-parsers", "--json"])
    assert result.exit_code == 0
    assert any(p["name"] == "ofx" for p in json.loads(result.output))


def test_parser_info_unknown(runner):
    result = runner.invoke(main, ["parser-info", "qif"])
    assert result.exit_code == 1
    assert "Parser 'qif' not found." in result.output


def test_parse_reports_defaulted_fields(runner, tmp_path, checking_ofx):
    path = tmp_path / "statement.ofx"
    path.write_text(checking_ofx.replace("<TRNAMT>-100.00", "<TRNAMT>lots"))
    result = runner.invoke(main, ["parse", str(path)])
    assert result.exit_code == 0
    assert "1 field(s) replaced with defaults" in result.output
    assert "Transactions parsed: 2" in result.output
