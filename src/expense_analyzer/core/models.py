"""Domain models for accounts and transactions read from bank statements."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any, Optional


class AccountType(str, Enum):
    """Type of bank account (OFX ACCTTYPE)."""

    CHECKING = "Checking"
    SAVINGS = "Savings"
    CREDITLINE = "Creditline"
    OTHER = "Other"


class TransactionType(IntEnum):
    """Direction of a transaction (OFX TRNTYPE)."""

    UNKNOWN = 0
    CREDIT = 1
    DEBIT = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class ExpenseCategoryType(str, Enum):
    """Top-level spending category."""

    TRANSPORTATION = "Transportation"
    FOOD = "Food"
    HEALTHCARE = "Healthcare"
    HOUSING = "Housing"
    CHILDREN = "Children"
    INCOME = "Income"
    EXPENSES = "Expenses"
    UNKNOWN = "Unknown"


class ExpenseSubcategoryType(str, Enum):
    """Fine-grained spending category."""

    PUBLIC_TRANSPORTATION = "PublicTransportation"
    FUEL = "Fuel"
    INSURANCE = "Insurance"
    MAINTENANCE = "Maintenance"
    CAR_PURCHASE = "CarPurchase"
    GROCERIES = "Groceries"
    RESTAURANTS = "Restaurants"
    TAKEOUT = "Takeout"
    COFFEE = "Coffee"
    HUMANS = "Humans"
    PETS = "Pets"
    SHOPPING = "Shopping"
    RENT = "Rent"
    BILLS = "Bills"
    CHILDCARE = "Childcare"
    EDUCATION = "Education"
    SALARY = "Salary"
    OTHER = "Other"
    REIMBURSEMENT = "Reimbursement"
    DIVIDEND = "Dividend"
    RSU = "RSU"
    CREDIT_PAY = "CreditPay"
    TRANSFER = "Transfer"
    SERVICES = "Services"
    SUBSCRIPTION = "Subscription"
    INVESTMENT = "Investment"
    ENTERTAINMENT = "Entertainment"
    APPAREL = "Apparel"
    TRAVEL = "Travel"


@dataclass(frozen=True)
class ExpenseCategory:
    """Category assigned to a transaction by a downstream categorizer.

    The OFX engine never fills this in; it only reserves the slot.
    """

    category: ExpenseCategoryType = ExpenseCategoryType.UNKNOWN
    subcategory: ExpenseSubcategoryType = ExpenseSubcategoryType.OTHER
    ignore: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "subcategory": self.subcategory.value,
            "ignore": self.ignore,
        }


@dataclass(frozen=True)
class Account:
    """Account a statement section belongs to."""

    currency: str  # CURDEF
    account_id: int = 0  # ACCTID
    account_type: AccountType = AccountType.OTHER  # ACCTTYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "currency": self.currency,
            "account_id": self.account_id,
            "account_type": self.account_type.value,
        }


@dataclass(frozen=True)
class Transaction:
    """A single posted transaction (one STMTTRN element)."""

    date: datetime  # DTPOSTED
    id: str  # FITID
    amount: Decimal  # TRNAMT
    type: TransactionType  # TRNTYPE
    name: str  # NAME
    memo: str  # MEMO
    account: Account
    category: Optional[ExpenseCategory] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "date": self.date.isoformat(),
            "id": self.id,
            "amount": str(self.amount),
            "type": self.type.label,
            "name": self.name,
            "memo": self.memo,
            "account": self.account.to_dict(),
            "category": self.category.to_dict() if self.category else None,
        }
