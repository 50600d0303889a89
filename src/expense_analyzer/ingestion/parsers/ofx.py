"""File parser for OFX 1.x bank statement exports."""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Any

from expense_analyzer.core.config import settings
from expense_analyzer.core.models import Transaction
from expense_analyzer.ingestion.base import BaseParser, ParseResult
from expense_analyzer.ingestion.ofx import OfxParseResult, parse_ofx
from expense_analyzer.ingestion.ofx.header import OFX_MARKER
from expense_analyzer.ingestion.registry import ParserRegistry

logger = logging.getLogger(__name__)

_SNIFF_BYTES = 4096


def decode_statement_bytes(data: bytes, encoding: str | None = None) -> str:
    """Decode raw statement bytes, honoring a UTF-8 byte order mark."""
    if data.startswith(codecs.BOM_UTF8):
        return data.decode("utf-8-sig", errors="replace")
    return data.decode(encoding or settings.FILE_ENCODING, errors="replace")


def summarize_accounts(transactions: list[Transaction]) -> list[dict[str, Any]]:
    """Distinct accounts in first-seen order."""
    seen: dict[tuple, dict[str, Any]] = {}
    for tx in transactions:
        key = (tx.account.account_id, tx.account.account_type, tx.account.currency)
        if key not in seen:
            seen[key] = tx.account.to_dict()
    return list(seen.values())


@ParserRegistry.register("ofx")
class OfxFileParser(BaseParser):
    """Parser for OFX (SGML, version 102) bank transaction statements."""

    description = "OFX Bank Statement (SGML 1.0.2)"
    supported_formats = ["ofx", "qfx"]
    entity = "generic"
    entity_type = "bank_statement"
    format = "ofx"
    example_input = "statement.ofx"
    field_mappings = {
        "DTPOSTED": "date",
        "FITID": "id",
        "TRNAMT": "amount",
        "TRNTYPE": "type",
        "NAME": "name",
        "MEMO": "memo",
        "CURDEF": "account.currency",
        "ACCTID": "account.account_id",
        "ACCTTYPE": "account.account_type",
    }

    def can_parse(self, file_path: Path) -> bool:
        if file_path.suffix.lower() not in settings.ALLOWED_EXTENSIONS:
            return False
        with open(file_path, "rb") as f:
            head = decode_statement_bytes(f.read(_SNIFF_BYTES))
        return OFX_MARKER.search(head) is not None

    def parse(self, file_path: Path) -> ParseResult:
        errors: list[str] = []
        file_hash = ""
        file_size = 0
        outcome = OfxParseResult()

        try:
            data = file_path.read_bytes()
            file_hash = self.compute_file_hash(file_path)
            file_size = len(data)
            logger.info("OFX file read: %s (%d bytes)", file_path.name, file_size)
            outcome = parse_ofx(decode_statement_bytes(data))
        except OSError as exc:
            errors.append(str(exc))

        if outcome.error:
            errors.append(outcome.error)

        metadata: dict[str, Any] = {
            "accounts": summarize_accounts(outcome.transactions),
            "fallbacks": dict(outcome.fallbacks),
            "fallback_count": outcome.fallback_count,
            "dropped_transactions": outcome.dropped_transactions,
        }

        return ParseResult(
            transactions=outcome.transactions,
            source_file_path=file_path,
            file_hash=file_hash,
            file_size=file_size,
            errors=errors,
            warnings=list(outcome.warnings),
            metadata=metadata,
        )
