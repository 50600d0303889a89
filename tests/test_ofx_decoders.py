"""Tests for OFX field decoders."""

from datetime import datetime
from decimal import Decimal

import pytest

from expense_analyzer.core.models import AccountType, TransactionType
from expense_analyzer.ingestion.ofx.decoders import (
    FieldDiagnostics,
    decode_account_id,
    decode_account_type,
    decode_amount,
    decode_date,
    decode_text,
    decode_transaction_type,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("20250601000000.000[-08:PST]", datetime(2025, 6, 1)),
        ("20250601", datetime(2025, 6, 1)),
        ("20250428153045", datetime(2025, 4, 28, 15, 30, 45)),
        ("20250428153045[+2:CEST]", datetime(2025, 4, 28, 15, 30, 45)),
        ("20250428.5", datetime(2025, 4, 28)),
    ],
)
def test_decode_date(raw, expected):
    assert decode_date(raw) == expected


@pytest.mark.parametrize("raw", ["garbage", "", None, "2025-06-01", "20251301", "2025061", "202506011230"])
def test_decode_date_falls_back_to_minimum(raw):
    assert decode_date(raw) == datetime.min


def test_decode_date_ignores_timezone_offset():
    # 23:00 at -08:00 stays 23:00; no conversion to UTC
    assert decode_date("20250601230000[-8:PST]") == datetime(2025, 6, 1, 23, 0, 0)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("6,291.22", Decimal("6291.22")),
        ("-100.00", Decimal("-100.00")),
        ("-1,234,567.89", Decimal("-1234567.89")),
        ("+5", Decimal("5")),
    ],
)
def test_decode_amount(raw, expected):
    assert decode_amount(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", None, "NaN", "Infinity", "1.2.3", "1_000", "١٢٣"])
def test_decode_amount_falls_back_to_zero(raw):
    assert decode_amount(raw) == Decimal(0)


def test_decode_account_id():
    assert decode_account_id("9351720470") == 9351720470
    assert decode_account_id("00123") == 123
    assert decode_account_id("-42") == -42


@pytest.mark.parametrize("raw", ["12a", "XXXX1234", "", None, "99999999999999999999", "1_000", "١٢٣"])
def test_decode_account_id_falls_back_to_zero(raw):
    assert decode_account_id(raw) == 0


def test_decode_account_type():
    assert decode_account_type("CHECKING") is AccountType.CHECKING
    assert decode_account_type("savings") is AccountType.SAVINGS
    assert decode_account_type("CreditLine") is AccountType.CREDITLINE
    assert decode_account_type("MONEYMRKT") is AccountType.OTHER
    assert decode_account_type(None) is AccountType.OTHER


def test_decode_transaction_type():
    assert decode_transaction_type("CREDIT") is TransactionType.CREDIT
    assert decode_transaction_type("debit") is TransactionType.DEBIT
    assert decode_transaction_type("CHECK") is TransactionType.UNKNOWN
    assert decode_transaction_type(None) is TransactionType.UNKNOWN
    assert TransactionType.UNKNOWN == 0


def test_decode_text_keeps_value_verbatim():
    assert decode_text(None) == ""
    assert decode_text("  spaced  ") == "  spaced  "


def test_diagnostics_record_fallbacks():
    diagnostics = FieldDiagnostics(context="FITID T1")
    decode_amount("oops", diagnostics)
    decode_amount("1.00", diagnostics)
    decode_date(None, diagnostics)
    decode_transaction_type("unknown", diagnostics)

    assert diagnostics.fallbacks == {"TRNAMT": 1, "DTPOSTED": 1}
    assert diagnostics.fallback_count == 2
    assert diagnostics.warnings[0] == "TRNAMT unparsable 'oops' (FITID T1); using default"
    assert diagnostics.warnings[1] == "DTPOSTED missing (FITID T1); using default"
