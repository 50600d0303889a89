"""Walk a parsed OFX tree and build Account/Transaction records.

Tag names are compared upper-cased since exports vary in tag casing.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from expense_analyzer.core.models import Account, Transaction
from expense_analyzer.ingestion.ofx import decoders
from expense_analyzer.ingestion.ofx.decoders import FieldDiagnostics
from expense_analyzer.ingestion.ofx.errors import StatementNotFoundError

logger = logging.getLogger(__name__)


def _tag(element: ET.Element) -> str:
    tag = element.tag if isinstance(element.tag, str) else ""
    # Drop any "{namespace}" prefix
    return tag.rsplit("}", 1)[-1].upper()


def iter_descendants(element: ET.Element, name: str) -> Iterator[ET.Element]:
    """Descendants of ``element`` (not itself) named ``name``, in document order."""
    name = name.upper()
    for child in element.iter():
        if child is not element and _tag(child) == name:
            yield child


def first_descendant(element: ET.Element, name: str) -> Optional[ET.Element]:
    return next(iter_descendants(element, name), None)


def children(element: ET.Element, name: str) -> list[ET.Element]:
    """Direct children of ``element`` named ``name``."""
    name = name.upper()
    return [child for child in element if _tag(child) == name]


def child_text(element: ET.Element, name: str) -> Optional[str]:
    """Text content of the first direct child named ``name``, None if absent."""
    found = children(element, name)
    return element_text(found[0]) if found else None


def element_text(element: ET.Element) -> str:
    return "".join(element.itertext())


def find_statement_sections(root: ET.Element) -> list[ET.Element]:
    """All STMTTRNRS elements in the document, the root included."""
    sections = [root] if _tag(root) == "STMTTRNRS" else []
    sections.extend(iter_descendants(root, "STMTTRNRS"))
    return sections


def build_account(stmtrs: ET.Element, diagnostics: Optional[FieldDiagnostics] = None) -> Account:
    """Account for one STMTRS.

    ACCTID/ACCTTYPE come from BANKACCTFROM when present, otherwise from
    anywhere under STMTRS. CURDEF is always a direct child of STMTRS.
    """
    scope = first_descendant(stmtrs, "BANKACCTFROM")
    if scope is None:
        scope = stmtrs

    acctid = first_descendant(scope, "ACCTID")
    accttype = first_descendant(scope, "ACCTTYPE")

    return Account(
        currency=decoders.decode_text(child_text(stmtrs, "CURDEF")),
        account_id=decoders.decode_account_id(
            element_text(acctid) if acctid is not None else None, diagnostics
        ),
        account_type=decoders.decode_account_type(
            element_text(accttype) if accttype is not None else None, diagnostics
        ),
    )


def build_transaction(
    stmttrn: ET.Element,
    account: Account,
    diagnostics: Optional[FieldDiagnostics] = None,
) -> Transaction:
    """Transaction for one STMTTRN; fields are read from direct children only."""
    fitid = decoders.decode_text(child_text(stmttrn, "FITID"))
    if diagnostics is not None:
        diagnostics.context = f"FITID {fitid}" if fitid else None
    try:
        return Transaction(
            date=decoders.decode_date(child_text(stmttrn, "DTPOSTED"), diagnostics),
            id=fitid,
            amount=decoders.decode_amount(child_text(stmttrn, "TRNAMT"), diagnostics),
            type=decoders.decode_transaction_type(child_text(stmttrn, "TRNTYPE"), diagnostics),
            name=decoders.decode_text(child_text(stmttrn, "NAME")),
            memo=decoders.decode_text(child_text(stmttrn, "MEMO")),
            account=account,
        )
    finally:
        if diagnostics is not None:
            diagnostics.context = None


def extract_transactions(
    root: ET.Element,
    diagnostics: Optional[FieldDiagnostics] = None,
) -> tuple[list[Transaction], int]:
    """Collect transactions from every statement section in document order.

    Returns:
        ``(transactions, dropped)`` where ``dropped`` counts STMTTRN
        elements that could not be turned into a Transaction.

    Raises:
        StatementNotFoundError: if the document has no STMTTRNRS at all.
    """
    sections = find_statement_sections(root)
    if not sections:
        raise StatementNotFoundError()

    transactions: list[Transaction] = []
    dropped = 0

    for index, section in enumerate(sections, start=1):
        stmtrs = first_descendant(section, "STMTRS")
        if stmtrs is None:
            logger.debug("Statement section %d has no STMTRS; skipped", index)
            continue

        if diagnostics is not None:
            diagnostics.context = f"statement {index}"
        account = build_account(stmtrs, diagnostics)
        if diagnostics is not None:
            diagnostics.context = None

        banktranlist = first_descendant(stmtrs, "BANKTRANLIST")
        if banktranlist is None:
            logger.debug("Statement section %d has no BANKTRANLIST; skipped", index)
            continue

        for stmttrn in children(banktranlist, "STMTTRN"):
            try:
                transactions.append(build_transaction(stmttrn, account, diagnostics))
            except Exception as exc:  # noqa: BLE001
                dropped += 1
                logger.warning("Dropped transaction in statement %d: %s", index, exc)

    return transactions, dropped
