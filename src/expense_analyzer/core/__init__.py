"""Core module - configuration and models."""

from expense_analyzer.core.models import (
    Account,
    AccountType,
    ExpenseCategory,
    ExpenseCategoryType,
    ExpenseSubcategoryType,
    Transaction,
    TransactionType,
)

__all__ = [
    "Account",
    "AccountType",
    "ExpenseCategory",
    "ExpenseCategoryType",
    "ExpenseSubcategoryType",
    "Transaction",
    "TransactionType",
]
