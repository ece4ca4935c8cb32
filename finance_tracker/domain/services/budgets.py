"""Budget periods and spend aggregation."""

from calendar import monthrange
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal
from logging import Logger

from finance_tracker.domain.models import (
    Budget,
    BudgetType,
    TimePeriod,
    Transaction,
    TransactionType,
)


def period_start(time_period: TimePeriod, now: datetime) -> datetime:
    """Return the canonical start of the period containing ``now``.

    Args:
        time_period: Budget period length.
        now: Reference moment.

    Returns:
        datetime: Monday of the ISO week, first of the month, or January 1,
        at midnight.
    """
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if time_period == TimePeriod.WEEKLY:
        return midnight - timedelta(days=midnight.weekday())
    if time_period == TimePeriod.MONTHLY:
        return midnight.replace(day=1)
    return midnight.replace(month=1, day=1)


def next_period_start(time_period: TimePeriod, start: datetime) -> datetime:
    """Return the moment one period after ``start``."""
    if time_period == TimePeriod.WEEKLY:
        return start + timedelta(weeks=1)
    if time_period == TimePeriod.MONTHLY:
        return add_months(start, 1)
    return add_months(start, 12)


def add_months(moment: datetime, months: int) -> datetime:
    """Shift a datetime by whole months, clamping to the month's last day."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def roll_budget_period(budget: Budget, now: datetime) -> Budget:
    """Advance a budget to the period containing ``now``.

    Spend resets to zero whenever the stored period start differs from the
    canonical one.

    Args:
        budget: Budget to check.
        now: Reference moment.

    Returns:
        Budget: The same budget, or a copy positioned on the new period.
    """
    current_start = period_start(budget.time_period, now)
    if budget.period_start_date == current_start:
        return budget
    return replace(
        budget,
        period_start_date=current_start,
        current_spent=Decimal("0"),
    )


def budget_matches(budget: Budget, transaction: Transaction) -> bool:
    """Return True when an expense falls under the budget's scope."""
    if transaction.type != TransactionType.EXPENSE:
        return False
    if budget.type == BudgetType.OVERALL:
        return True
    if budget.type == BudgetType.CATEGORY:
        return (
            budget.category_id is not None
            and transaction.category_id == budget.category_id
        )
    return (
        budget.account_id is not None
        and transaction.from_account_id == budget.account_id
    )


def budget_spent(
    budget: Budget,
    transactions: Sequence[Transaction],
) -> Decimal:
    """Sum matching expenses inside the budget's current period.

    Args:
        budget: Budget positioned on its current period.
        transactions: All transactions.

    Returns:
        Decimal: Total spend within ``[period_start, next_period_start)``.
    """
    if budget.period_start_date is None:
        return Decimal("0")
    start = budget.period_start_date
    end = next_period_start(budget.time_period, start)
    total = Decimal("0")
    for transaction in transactions:
        if not start <= transaction.date < end:
            continue
        if budget_matches(budget, transaction):
            total += transaction.amount
    return total


def reconcile_budgets(
    budgets: Sequence[Budget],
    transactions: Sequence[Transaction],
    now: datetime,
    *,
    logger: Logger | None = None,
) -> list[Budget]:
    """Roll periods forward, then recompute the spend of every budget.

    Args:
        budgets: Budgets in stored order.
        transactions: All transactions.
        now: Reference moment for the period check.
        logger: Optional logger for period rollovers.

    Returns:
        list[Budget]: Budgets with current period starts and spend.
    """
    reconciled = []
    for budget in budgets:
        rolled = roll_budget_period(budget, now)
        if rolled is not budget and logger is not None:
            logger.info(
                f"Budget {budget.name!r} moved to period starting "
                f"{rolled.period_start_date:%Y-%m-%d}"
            )
        reconciled.append(
            replace(rolled, current_spent=budget_spent(rolled, transactions))
        )
    return reconciled


__all__ = [
    "period_start",
    "next_period_start",
    "add_months",
    "roll_budget_period",
    "budget_matches",
    "budget_spent",
    "reconcile_budgets",
]
