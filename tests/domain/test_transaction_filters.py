"""Tests for the transaction filter policy."""

from datetime import datetime
from decimal import Decimal

from finance_tracker.domain.models import Transaction, TransactionType
from finance_tracker.domain.policies import TimeFilter, TransactionFilter

NOW = datetime(2024, 3, 13, 15, 0)


def _transaction(date, amount="10", **kwargs):
    return Transaction(
        date=date,
        amount=Decimal(amount),
        description=kwargs.pop("description", "item"),
        type=kwargs.pop("type", TransactionType.EXPENSE),
        category_id=kwargs.pop("category_id", "food"),
        **kwargs,
    )


def test_default_filter_has_no_active_restrictions():
    """An empty filter matches everything."""
    transaction_filter = TransactionFilter()

    assert not transaction_filter.has_active_filters
    assert transaction_filter.matches(_transaction(NOW), NOW)


def test_time_windows():
    """Each time filter accepts only its window."""
    today = _transaction(datetime(2024, 3, 13, 8, 0))
    monday = _transaction(datetime(2024, 3, 11, 8, 0))
    last_month = _transaction(datetime(2024, 2, 20))
    future = _transaction(datetime(2024, 3, 20))

    def matching(time_filter):
        return [
            item
            for item in (today, monday, last_month, future)
            if TransactionFilter(time_filter=time_filter).matches(item, NOW)
        ]

    assert matching(TimeFilter.TODAY) == [today]
    assert matching(TimeFilter.THIS_WEEK) == [today, monday]
    assert matching(TimeFilter.THIS_MONTH) == [today, monday, future]
    assert matching(TimeFilter.LAST_MONTH) == [last_month]
    assert matching(TimeFilter.FUTURE) == [future]
    assert matching(TimeFilter.PAST) == [monday, last_month]


def test_custom_range_is_inclusive():
    """Custom ranges include both bounds."""
    transaction_filter = TransactionFilter(
        time_filter=TimeFilter.CUSTOM,
        custom_start=datetime(2024, 3, 1),
        custom_end=datetime(2024, 3, 10),
    )

    assert transaction_filter.matches(_transaction(datetime(2024, 3, 10)), NOW)
    assert not transaction_filter.matches(
        _transaction(datetime(2024, 3, 11)),
        NOW,
    )


def test_attribute_filters_combine():
    """Type, category, pool, amount, and recurrence restrictions all apply."""
    transaction_filter = TransactionFilter(
        transaction_types=frozenset({TransactionType.EXPENSE}),
        category_ids=frozenset({"food"}),
        pool_ids=frozenset({"bills"}),
        min_amount=Decimal("5"),
        max_amount=Decimal("50"),
        only_recurring=True,
    )
    match = _transaction(NOW, pool_id="bills", is_recurring=True)

    assert transaction_filter.has_active_filters
    assert transaction_filter.matches(match, NOW)
    assert not transaction_filter.matches(
        _transaction(NOW, pool_id="bills"),
        NOW,
    )
    assert not transaction_filter.matches(
        _transaction(NOW, amount="60", pool_id="bills", is_recurring=True),
        NOW,
    )
    assert not transaction_filter.matches(
        _transaction(
            NOW,
            type=TransactionType.INCOME,
            pool_id="bills",
            is_recurring=True,
        ),
        NOW,
    )


def test_apply_sorts_newest_first():
    """apply returns matches sorted by descending date."""
    older = _transaction(datetime(2024, 3, 1))
    newer = _transaction(datetime(2024, 3, 12))

    result = TransactionFilter().apply([older, newer], NOW)

    assert result == [newer, older]
