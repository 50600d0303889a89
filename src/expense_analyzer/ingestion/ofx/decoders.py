"""Lenient decoders for OFX field values.

None of these raise. When a value is missing or cannot be parsed, a fixed
default is returned and, if a ``FieldDiagnostics`` collector is given, the
substitution is recorded there.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from expense_analyzer.core.models import AccountType, TransactionType

MIN_DATE = datetime.min

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_AMOUNT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Exact shapes tried in order once the timezone and fraction are removed.
_DATE_FORMATS = (
    (re.compile(r"\d{14}", re.ASCII), "%Y%m%d%H%M%S"),
    (re.compile(r"\d{8}", re.ASCII), "%Y%m%d"),
)


@dataclass
class FieldDiagnostics:
    """Per-parse record of fields that fell back to a default value."""

    fallbacks: dict[str, int] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    context: Optional[str] = None

    def record(self, field_name: str, raw: Optional[str]) -> None:
        self.fallbacks[field_name] = self.fallbacks.get(field_name, 0) + 1
        where = f" ({self.context})" if self.context else ""
        if raw is None:
            self.warnings.append(f"{field_name} missing{where}; using default")
        else:
            self.warnings.append(f"{field_name} unparsable {raw!r}{where}; using default")

    @property
    def fallback_count(self) -> int:
        return sum(self.fallbacks.values())


def _note(diagnostics: Optional[FieldDiagnostics], field_name: str, raw: Optional[str]) -> None:
    if diagnostics is not None:
        diagnostics.record(field_name, raw)


def decode_account_id(raw: Optional[str], diagnostics: Optional[FieldDiagnostics] = None) -> int:
    """ACCTID as a signed 64-bit integer, 0 when unparsable."""
    text = (raw or "").strip()
    if _INTEGER_RE.fullmatch(text):
        value = int(text)
        if _INT64_MIN <= value <= _INT64_MAX:
            return value
    _note(diagnostics, "ACCTID", raw)
    return 0


def decode_account_type(raw: Optional[str], diagnostics: Optional[FieldDiagnostics] = None) -> AccountType:
    """ACCTTYPE matched case-insensitively, Other when unknown."""
    text = (raw or "").strip().upper()
    for member in AccountType:
        if member.name == text:
            return member
    _note(diagnostics, "ACCTTYPE", raw)
    return AccountType.OTHER


def decode_transaction_type(
    raw: Optional[str], diagnostics: Optional[FieldDiagnostics] = None
) -> TransactionType:
    """TRNTYPE matched case-insensitively, Unknown when it is anything else."""
    text = (raw or "").strip().upper()
    if text in TransactionType.__members__:
        return TransactionType[text]
    _note(diagnostics, "TRNTYPE", raw)
    return TransactionType.UNKNOWN


def decode_amount(raw: Optional[str], diagnostics: Optional[FieldDiagnostics] = None) -> Decimal:
    """TRNAMT with thousands separators removed, 0 when unparsable.

    The sign is kept as-is; it is not checked against TRNTYPE.
    """
    text = (raw or "").replace(",", "").strip()
    # Plain ASCII decimals only; Decimal() alone would also take "1_000" or "NaN"
    if _AMOUNT_RE.fullmatch(text):
        return Decimal(text)
    _note(diagnostics, "TRNAMT", raw)
    return Decimal(0)


def decode_date(raw: Optional[str], diagnostics: Optional[FieldDiagnostics] = None) -> datetime:
    """DTPOSTED in ``YYYYMMDD[HHMMSS][.fff][[offset:TZ]]`` form.

    The timezone annotation and fractional seconds are discarded without
    conversion. Unparsable values decode to ``datetime.min``.
    """
    text = (raw or "").split("[", 1)[0].split(".", 1)[0].strip()
    for shape, fmt in _DATE_FORMATS:
        if not shape.fullmatch(text):
            continue
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    _note(diagnostics, "DTPOSTED", raw)
    return MIN_DATE


def decode_text(raw: Optional[str]) -> str:
    """FITID, NAME and MEMO: missing becomes an empty string, nothing else changes."""
    return raw if raw is not None else ""
