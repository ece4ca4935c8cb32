"""Tests for the budget engine."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from finance_tracker.domain.models import (
    Budget,
    BudgetType,
    TimePeriod,
    Transaction,
    TransactionType,
)
from finance_tracker.domain.services.budgets import (
    add_months,
    budget_matches,
    next_period_start,
    period_start,
    reconcile_budgets,
    roll_budget_period,
)


def _expense(amount, date, category_id="x", from_account_id="current"):
    return Transaction(
        date=date,
        amount=Decimal(amount),
        description="expense",
        type=TransactionType.EXPENSE,
        category_id=category_id,
        from_account_id=from_account_id,
    )


def _budget(**kwargs):
    defaults = {
        "name": "Food",
        "amount": Decimal("100"),
        "type": BudgetType.OVERALL,
        "time_period": TimePeriod.MONTHLY,
        "start_date": datetime(2024, 1, 1),
    }
    defaults.update(kwargs)
    return Budget(**defaults)


def test_period_start_uses_monday_for_weekly():
    """Weekly periods start on Monday at midnight."""
    wednesday = datetime(2024, 3, 13, 18, 45)

    assert period_start(TimePeriod.WEEKLY, wednesday) == datetime(2024, 3, 11)
    assert period_start(TimePeriod.MONTHLY, wednesday) == datetime(2024, 3, 1)
    assert period_start(TimePeriod.YEARLY, wednesday) == datetime(2024, 1, 1)


def test_next_period_start_advances_one_period():
    """next_period_start adds a week, a month, or a year."""
    start = datetime(2024, 1, 1)

    assert next_period_start(TimePeriod.WEEKLY, start) == datetime(2024, 1, 8)
    assert next_period_start(TimePeriod.MONTHLY, start) == datetime(2024, 2, 1)
    assert next_period_start(TimePeriod.YEARLY, start) == datetime(2025, 1, 1)


def test_add_months_clamps_to_month_end():
    """Month arithmetic keeps the day inside the target month."""
    assert add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
    assert add_months(datetime(2023, 11, 30), 3) == datetime(2024, 2, 29)


def test_monthly_budget_rolls_over_on_first_of_month():
    """Crossing into a new month resets spend and moves the period start."""
    budget = _budget(
        period_start_date=datetime(2024, 1, 1),
        current_spent=Decimal("80"),
    )

    result = reconcile_budgets([budget], [], datetime(2024, 2, 1))

    assert result[0].period_start_date == datetime(2024, 2, 1)
    assert result[0].current_spent == Decimal("0")


def test_roll_budget_period_keeps_current_period():
    """A budget already on the canonical period is returned unchanged."""
    budget = _budget(period_start_date=datetime(2024, 3, 1))

    assert roll_budget_period(budget, datetime(2024, 3, 20)) is budget


def test_category_budget_sums_only_its_category_this_week():
    """Weekly category budgets sum matching expenses of the current week."""
    now = datetime(2024, 3, 13, 9, 0)
    budget = _budget(
        type=BudgetType.CATEGORY,
        time_period=TimePeriod.WEEKLY,
        category_id="x",
    )
    transactions = [
        _expense("40", datetime(2024, 3, 11, 8, 0)),
        _expense("35", datetime(2024, 3, 12, 20, 0)),
        _expense("20", datetime(2024, 3, 12, 21, 0), category_id="y"),
        _expense("60", datetime(2024, 3, 4, 12, 0)),
        _expense("15", datetime(2024, 3, 18, 0, 0)),
    ]

    result = reconcile_budgets([budget], transactions, now)

    assert result[0].current_spent == Decimal("75")
    assert result[0].period_start_date == datetime(2024, 3, 11)


def test_account_budget_matches_source_account_only():
    """Account budgets track expenses paid from their account."""
    budget = _budget(type=BudgetType.ACCOUNT, account_id="current")

    assert budget_matches(budget, _expense("5", datetime(2024, 3, 1)))
    assert not budget_matches(
        budget,
        _expense("5", datetime(2024, 3, 1), from_account_id="savings"),
    )


def test_income_never_counts_towards_budgets():
    """Only expenses are summed."""
    budget = _budget()
    income = Transaction(
        date=datetime(2024, 3, 1),
        amount=Decimal("500"),
        description="salary",
        type=TransactionType.INCOME,
        category_id="salary",
    )

    assert not budget_matches(budget, income)


def test_reconcile_logs_rollovers():
    """Period rollovers are reported through the logger."""
    logger = MagicMock()
    budget = _budget(period_start_date=datetime(2024, 1, 1))

    reconcile_budgets([budget], [], datetime(2024, 2, 5), logger=logger)

    logger.info.assert_called_once()
    assert "2024-02-01" in logger.info.call_args.args[0]


def test_budget_properties_cap_usage():
    """remaining_amount never goes negative and percent_used caps at 1."""
    budget = _budget(current_spent=Decimal("150"))

    assert budget.remaining_amount == Decimal("0")
    assert budget.percent_used == Decimal("1")
