"""Per-account totals over parsed transactions."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from expense_analyzer.core.models import Account, Transaction


@dataclass
class AccountSummary:
    account: Account
    credits: Decimal = Decimal("0")
    debits: Decimal = Decimal("0")
    count: int = 0

    @property
    def net(self) -> Decimal:
        return self.credits + self.debits

    def to_dict(self) -> dict:
        return {
            "account": self.account.to_dict(),
            "credits": str(self.credits),
            "debits": str(self.debits),
            "net": str(self.net),
            "count": self.count,
        }


def summarize_by_account(transactions: Iterable[Transaction]) -> list[AccountSummary]:
    """Group transactions by account and total them.

    Positive amounts count as credits and negative amounts as debits,
    regardless of TRNTYPE. Accounts keep first-seen order.
    """
    summaries: dict[tuple, AccountSummary] = {}
    for tx in transactions:
        key = (tx.account.account_id, tx.account.account_type, tx.account.currency)
        summary = summaries.get(key)
        if summary is None:
            summary = summaries[key] = AccountSummary(account=tx.account)
        if tx.amount >= 0:
            summary.credits += tx.amount
        else:
            summary.debits += tx.amount
        summary.count += 1
    return list(summaries.values())
