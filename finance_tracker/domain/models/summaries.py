"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of savings and current account balances.
        liability_total: Sum of credit account balances (debt).
        net_worth: Assets minus liabilities.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class CategorySpending:
    """Expense total aggregated for one category."""

    category_id: str
    category_name: str
    amount: Decimal


__all__ = ["NetWorthSummary", "CategorySpending"]
