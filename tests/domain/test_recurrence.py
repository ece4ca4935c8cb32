"""Tests for recurring transaction scheduling."""

from datetime import datetime
from decimal import Decimal

from finance_tracker.domain.models import (
    RecurrenceInterval,
    Transaction,
    TransactionType,
)
from finance_tracker.domain.services.recurrence import (
    generate_occurrences,
    next_occurrence,
)


def _recurring(interval, end=None):
    return Transaction(
        id="parent",
        date=datetime(2024, 1, 31),
        amount=Decimal("9.99"),
        description="Streaming",
        type=TransactionType.EXPENSE,
        category_id="entertainment",
        is_recurring=True,
        recurrence_interval=interval,
        recurrence_end_date=end,
    )


def test_next_occurrence_for_each_interval():
    """Intervals advance by their calendar length."""
    start = datetime(2024, 1, 31)

    assert next_occurrence(start, RecurrenceInterval.DAILY) == datetime(
        2024, 2, 1
    )
    assert next_occurrence(start, RecurrenceInterval.BIWEEKLY) == datetime(
        2024, 2, 14
    )
    assert next_occurrence(start, RecurrenceInterval.MONTHLY) == datetime(
        2024, 2, 29
    )
    assert next_occurrence(start, RecurrenceInterval.QUARTERLY) == datetime(
        2024, 4, 30
    )
    assert next_occurrence(start, RecurrenceInterval.NONE) is None


def test_generate_occurrences_stops_at_end_date():
    """Instances are generated up to the recurrence end date inclusive."""
    parent = _recurring(
        RecurrenceInterval.MONTHLY,
        end=datetime(2024, 4, 29),
    )

    instances = generate_occurrences(parent, datetime(2030, 1, 1))

    assert [item.date for item in instances] == [
        datetime(2024, 2, 29),
        datetime(2024, 3, 29),
        datetime(2024, 4, 29),
    ]
    assert all(item.parent_transaction_id == "parent" for item in instances)
    assert all(item.is_future_transaction for item in instances)
    assert len({item.id for item in instances}) == 3
    assert "parent" not in {item.id for item in instances}


def test_generate_occurrences_uses_horizon_without_end_date():
    """The horizon bounds generation when no end date is set."""
    parent = _recurring(RecurrenceInterval.WEEKLY)

    instances = generate_occurrences(parent, datetime(2024, 2, 21))

    assert len(instances) == 3


def test_non_recurring_transactions_generate_nothing():
    """Plain transactions have no instances."""
    parent = _recurring(RecurrenceInterval.NONE)

    assert generate_occurrences(parent, datetime(2025, 1, 1)) == []
