"""Builds OFX 1.0.2 SGML documents for tests."""

from __future__ import annotations

from typing import Iterable

from expense_analyzer.core.models import Account, Transaction

OFX_HEADER = """OFXHEADER:100
DATA:OFXSGML
VERSION:102
SECURITY:NONE
ENCODING:USASCII
CHARSET:1252
COMPRESSION:NONE
OLDFILEUID:NONE
NEWFILEUID:NONE
"""


class OfxBuilder:
    """Accumulates STMTTRNRS sections and renders them with the standard header."""

    def __init__(self) -> None:
        self._sections: list[list[str]] = []
        self._current: list[str] = []

    def add_section(self) -> "OfxBuilder":
        if self._current:
            self._sections.append(self._current)
            self._current = []
        return self

    def set_account(self, account: Account) -> "OfxBuilder":
        self._current.append(f"\t\t\t\t<CURDEF>{account.currency}")
        self._current.append("\t\t\t\t<BANKACCTFROM>")
        self._current.append("\t\t\t\t\t<BANKID>USA")
        self._current.append(f"\t\t\t\t\t<ACCTID>{account.account_id}")
        self._current.append(f"\t\t\t\t\t<ACCTTYPE>{account.account_type.value}")
        self._current.append("\t\t\t\t</BANKACCTFROM>")
        return self

    def add_transactions(self, transactions: Iterable[Transaction]) -> "OfxBuilder":
        self._current.append("\t\t\t\t<BANKTRANLIST>")
        for tx in transactions:
            self._add_transaction(tx)
        self._current.append("\t\t\t\t</BANKTRANLIST>")
        return self

    def _add_transaction(self, tx: Transaction) -> None:
        lines = [
            "\t\t\t\t\t<STMTTRN>",
            f"\t\t\t\t\t\t<TRNTYPE>{tx.type.label}",
            f"\t\t\t\t\t\t<DTPOSTED>{tx.date:%Y%m%d%H%M%S}",
            f"\t\t\t\t\t\t<TRNAMT>{tx.amount}",
            f"\t\t\t\t\t\t<FITID>{tx.id}",
        ]
        if tx.name:
            lines.append(f"\t\t\t\t\t\t<NAME>{tx.name}")
        if tx.memo:
            lines.append(f"\t\t\t\t\t\t<MEMO>{tx.memo}")
        lines.append("\t\t\t\t\t</STMTTRN>")
        self._current.extend(lines)

    def build(self) -> str:
        self.add_section()
        out = [OFX_HEADER, "<OFX>", "\t<BANKMSGSRSV1>"]
        for section in self._sections:
            out.append("\t\t<STMTTRNRS>")
            out.append("\t\t\t<STMTRS>")
            out.extend(section)
            out.append("\t\t\t</STMTRS>")
            out.append("\t\t</STMTTRNRS>")
        out.append("\t</BANKMSGSRSV1>")
        out.append("</OFX>")
        return "\n".join(out) + "\n"


def with_header(body: str) -> str:
    """Prefix an SGML body with the standard header block."""
    return OFX_HEADER + "\n" + body
