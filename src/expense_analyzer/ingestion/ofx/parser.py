"""Top-level OFX parse: header check, SGML repair, XML parse, extraction."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Optional

from expense_analyzer.core.models import Transaction
from expense_analyzer.ingestion.ofx.decoders import FieldDiagnostics
from expense_analyzer.ingestion.ofx.errors import (
    EmptyInputError,
    OfxError,
    OfxHeaderError,
    OfxMarkerNotFoundError,
    parsing_failed,
)
from expense_analyzer.ingestion.ofx.extractor import extract_transactions
from expense_analyzer.ingestion.ofx.header import header_mismatches, split_header
from expense_analyzer.ingestion.ofx.transcoder import sgml_to_xml

logger = logging.getLogger(__name__)


@dataclass
class OfxParseResult:
    """Outcome of one parse: transactions on success, a reason on failure."""

    transactions: list[Transaction] = field(default_factory=list)
    error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
    fallbacks: dict[str, int] = field(default_factory=dict)
    fallback_count: int = 0
    dropped_transactions: int = 0

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def record_count(self) -> int:
        return len(self.transactions)

    @classmethod
    def failure(cls, reason: str) -> "OfxParseResult":
        return cls(error=reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "error": self.error,
            "transactions": [t.to_dict() for t in self.transactions],
            "warnings": list(self.warnings),
            "fallbacks": dict(self.fallbacks),
            "fallback_count": self.fallback_count,
            "dropped_transactions": self.dropped_transactions,
        }


def _run_stages(text: str) -> OfxParseResult:
    if not text or not text.strip():
        raise EmptyInputError()

    parts = split_header(text)
    if parts is None:
        raise OfxMarkerNotFoundError()
    header_text, body = parts

    mismatches = header_mismatches(header_text)
    if mismatches:
        raise OfxHeaderError(mismatches)

    xml_text = sgml_to_xml(body)
    logger.debug("Transcoded OFX body to %d characters of XML", len(xml_text))

    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        logger.debug("XML parse failed: %s", exc)
        return OfxParseResult.failure(parsing_failed(exc))

    diagnostics = FieldDiagnostics()
    transactions, dropped = extract_transactions(root, diagnostics)

    return OfxParseResult(
        transactions=transactions,
        warnings=diagnostics.warnings,
        fallbacks=diagnostics.fallbacks,
        fallback_count=diagnostics.fallback_count,
        dropped_transactions=dropped,
    )


def parse_ofx(text: str) -> OfxParseResult:
    """Parse OFX statement text into transactions.

    Never raises: every failure is reported through ``OfxParseResult.error``
    and leaves the transaction list empty.
    """
    try:
        result = _run_stages(text)
    except OfxHeaderError as exc:
        logger.info("Unsupported OFX header: %s", "; ".join(exc.mismatches))
        return OfxParseResult.failure(exc.message)
    except OfxError as exc:
        logger.info("OFX parse failed: %s", exc.message)
        return OfxParseResult.failure(exc.message)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error while parsing OFX")
        return OfxParseResult.failure(parsing_failed(exc))

    if not result.success:
        logger.info("OFX parse failed: %s", result.error)
        return result

    if result.fallback_count:
        logger.warning(
            "Defaults substituted for %d unparsable field(s): %s",
            result.fallback_count,
            ", ".join(f"{name}={count}" for name, count in sorted(result.fallbacks.items())),
        )
    if result.dropped_transactions:
        logger.warning("Dropped %d malformed transaction(s)", result.dropped_transactions)
    logger.info("Parsed %d OFX transaction(s)", result.record_count)
    return result
