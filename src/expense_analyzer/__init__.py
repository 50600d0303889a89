"""Expense analyzer: OFX bank statement ingestion."""

__version__ = "0.1.0"
