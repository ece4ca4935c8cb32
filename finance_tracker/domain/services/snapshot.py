"""Widget snapshot assembly."""

from datetime import datetime

from finance_tracker.domain.constants import WIDGET_TRANSACTION_LIMIT
from finance_tracker.domain.models import FinanceState, WidgetSnapshot
from finance_tracker.domain.services.ledger import compute_net_worth


def build_widget_snapshot(
    state: FinanceState,
    now: datetime,
    limit: int = WIDGET_TRANSACTION_LIMIT,
) -> WidgetSnapshot:
    """Build the snapshot read by the home-screen widget.

    Args:
        state: Finance state with recalculated balances.
        now: Generation time stamped on the snapshot.
        limit: Maximum number of recent transactions.

    Returns:
        WidgetSnapshot: Net balance, recent transactions, and theme.
    """
    recent = sorted(
        state.transactions,
        key=lambda transaction: transaction.date,
        reverse=True,
    )[:limit]
    return WidgetSnapshot(
        net_balance=compute_net_worth(state.accounts).net_worth,
        transactions=tuple(recent),
        categories=tuple(state.expense_categories),
        theme_color_name=state.preferences.theme_color_name,
        generated_at=now,
    )


__all__ = ["build_widget_snapshot"]
