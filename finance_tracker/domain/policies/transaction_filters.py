"""Filtering rules for transaction lists."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum

from finance_tracker.domain.models import Transaction, TransactionType


class TimeFilter(str, Enum):
    """Date windows offered by the transaction list."""

    ALL = "All Time"
    FUTURE = "Future"
    PAST = "Past"
    TODAY = "Today"
    THIS_WEEK = "This Week"
    THIS_MONTH = "This Month"
    LAST_MONTH = "Last Month"
    CUSTOM = "Custom Range"


@dataclass(frozen=True)
class TransactionFilter:
    """Combined filter state for the transaction list.

    Empty sets and ``None`` bounds mean "no restriction".
    """

    time_filter: TimeFilter = TimeFilter.ALL
    custom_start: datetime | None = None
    custom_end: datetime | None = None
    transaction_types: frozenset[TransactionType] = field(
        default_factory=frozenset
    )
    category_ids: frozenset[str] = field(default_factory=frozenset)
    pool_ids: frozenset[str] = field(default_factory=frozenset)
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    only_recurring: bool = False

    @property
    def has_active_filters(self) -> bool:
        """Return True when any restriction is set."""
        return (
            self.time_filter != TimeFilter.ALL
            or bool(self.transaction_types)
            or bool(self.category_ids)
            or bool(self.pool_ids)
            or self.min_amount is not None
            or self.max_amount is not None
            or self.only_recurring
        )

    def matches(self, transaction: Transaction, now: datetime) -> bool:
        """Return True when the transaction passes every restriction."""
        if not self._matches_time(transaction.date, now):
            return False
        if (
            self.transaction_types
            and transaction.type not in self.transaction_types
        ):
            return False
        if (
            self.category_ids
            and transaction.category_id not in self.category_ids
        ):
            return False
        if self.pool_ids and transaction.pool_id not in self.pool_ids:
            return False
        if self.min_amount is not None and transaction.amount < self.min_amount:
            return False
        if self.max_amount is not None and transaction.amount > self.max_amount:
            return False
        if self.only_recurring and not transaction.is_recurring:
            return False
        return True

    def apply(
        self,
        transactions: list[Transaction],
        now: datetime,
    ) -> list[Transaction]:
        """Return matching transactions, newest first."""
        return sorted(
            (item for item in transactions if self.matches(item, now)),
            key=lambda item: item.date,
            reverse=True,
        )

    def _matches_time(self, moment: datetime, now: datetime) -> bool:
        today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        tomorrow = today + timedelta(days=1)
        if self.time_filter == TimeFilter.ALL:
            return True
        if self.time_filter == TimeFilter.FUTURE:
            return moment >= tomorrow
        if self.time_filter == TimeFilter.PAST:
            return moment < today
        if self.time_filter == TimeFilter.TODAY:
            return today <= moment < tomorrow
        if self.time_filter == TimeFilter.THIS_WEEK:
            week_start = today - timedelta(days=today.weekday())
            return week_start <= moment < week_start + timedelta(weeks=1)
        if self.time_filter == TimeFilter.THIS_MONTH:
            return (moment.year, moment.month) == (now.year, now.month)
        if self.time_filter == TimeFilter.LAST_MONTH:
            last_month_end = today.replace(day=1) - timedelta(days=1)
            return (moment.year, moment.month) == (
                last_month_end.year,
                last_month_end.month,
            )
        if self.custom_start is not None and moment < self.custom_start:
            return False
        if self.custom_end is not None and moment > self.custom_end:
            return False
        return True


__all__ = ["TimeFilter", "TransactionFilter"]
