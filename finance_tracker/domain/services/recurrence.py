"""Recurring transaction scheduling."""

from dataclasses import replace
from datetime import datetime, timedelta
import uuid

from finance_tracker.domain.models import RecurrenceInterval, Transaction
from finance_tracker.domain.services.budgets import add_months


def next_occurrence(
    moment: datetime,
    interval: RecurrenceInterval,
) -> datetime | None:
    """Return the date following ``moment`` for a recurrence interval.

    Args:
        moment: Date of the current occurrence.
        interval: Recurrence cadence.

    Returns:
        datetime | None: Next occurrence, or None for non-recurring items.
    """
    if interval == RecurrenceInterval.DAILY:
        return moment + timedelta(days=1)
    if interval == RecurrenceInterval.WEEKLY:
        return moment + timedelta(weeks=1)
    if interval == RecurrenceInterval.BIWEEKLY:
        return moment + timedelta(weeks=2)
    if interval == RecurrenceInterval.MONTHLY:
        return add_months(moment, 1)
    if interval == RecurrenceInterval.QUARTERLY:
        return add_months(moment, 3)
    if interval == RecurrenceInterval.YEARLY:
        return add_months(moment, 12)
    return None


def generate_occurrences(
    transaction: Transaction,
    up_to: datetime,
) -> list[Transaction]:
    """Expand a recurring transaction into future instances.

    Args:
        transaction: Recurring parent transaction.
        up_to: Horizon used when the parent has no end date.

    Returns:
        list[Transaction]: New instances linked to the parent, excluding the
        parent itself.
    """
    if (
        not transaction.is_recurring
        or transaction.recurrence_interval == RecurrenceInterval.NONE
    ):
        return []
    end = transaction.recurrence_end_date or up_to
    occurrences = []
    current = next_occurrence(transaction.date, transaction.recurrence_interval)
    while current is not None and current <= end:
        occurrences.append(
            replace(
                transaction,
                id=str(uuid.uuid4()),
                date=current,
                parent_transaction_id=transaction.id,
                is_future_transaction=True,
            )
        )
        current = next_occurrence(current, transaction.recurrence_interval)
    return occurrences


__all__ = ["next_occurrence", "generate_occurrences"]
