"""Domain policies package."""

from .transaction_filters import TimeFilter, TransactionFilter

__all__ = ["TimeFilter", "TransactionFilter"]
