"""Aggregations over expense transactions."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from finance_tracker.domain.models import (
    Category,
    CategorySpending,
    Transaction,
    TransactionType,
)


def compute_category_spending(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[CategorySpending]:
    """Total expenses per category, largest first.

    Args:
        transactions: Transactions to aggregate.
        categories: Known categories used for names.
        start: Optional inclusive lower bound on transaction dates.
        end: Optional exclusive upper bound on transaction dates.

    Returns:
        list[CategorySpending]: Non-zero totals sorted by amount descending.
    """
    names = {category.id: category.name for category in categories}
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.type != TransactionType.EXPENSE:
            continue
        if start is not None and transaction.date < start:
            continue
        if end is not None and transaction.date >= end:
            continue
        totals[transaction.category_id] = (
            totals.get(transaction.category_id, Decimal("0"))
            + transaction.amount
        )
    return sorted(
        (
            CategorySpending(
                category_id=category_id,
                category_name=names.get(category_id, "Uncategorized"),
                amount=amount,
            )
            for category_id, amount in totals.items()
            if amount != 0
        ),
        key=lambda item: (-item.amount, item.category_name),
    )


__all__ = ["compute_category_spending"]
