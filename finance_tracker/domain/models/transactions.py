"""Domain models for ledger transactions."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
import uuid

from finance_tracker.domain.models.accounts import AccountType


class TransactionType(str, Enum):
    """Kinds of ledger movement."""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class RecurrenceInterval(str, Enum):
    """Repeat cadence of a recurring transaction."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def label(self) -> str:
        """Return the human-readable cadence."""
        return _RECURRENCE_LABELS[self]


_RECURRENCE_LABELS = {
    RecurrenceInterval.NONE: "None",
    RecurrenceInterval.DAILY: "Daily",
    RecurrenceInterval.WEEKLY: "Weekly",
    RecurrenceInterval.BIWEEKLY: "Every 2 Weeks",
    RecurrenceInterval.MONTHLY: "Monthly",
    RecurrenceInterval.QUARTERLY: "Every 3 Months",
    RecurrenceInterval.YEARLY: "Yearly",
}


@dataclass(frozen=True)
class Transaction:
    """A single income, expense, or transfer.

    Attributes:
        date: When the transaction happened (or is scheduled).
        amount: Non-negative magnitude; the sign comes from ``type``.
        description: Free text shown in lists.
        type: Income, expense, or transfer.
        category_id: Category used for grouping and budgets.
        from_account: Legacy account-kind reference for the source.
        to_account: Legacy account-kind reference for the destination.
        from_account_id: Source account identity.
        to_account_id: Destination account identity.
        pool_id: Pool the transaction is assigned to, if any.
        is_split: Whether part of the expense belongs to a friend.
        friend_name: Friend sharing the expense.
        friend_amount: Friend's portion.
        user_amount: User's own portion.
        friend_payment_destination: Free-text note on where the friend paid.
        friend_payment_account_id: Own account that received the friend's
            portion.
        friend_payment_is_account: Whether the friend paid into one of the
            user's accounts.
        is_future_transaction: Generated instance scheduled in the future.
        is_recurring: Whether the transaction repeats.
        recurrence_interval: Repeat cadence.
        recurrence_end_date: Last date instances may be generated for.
        parent_transaction_id: Recurring parent of a generated instance.
    """

    date: datetime
    amount: Decimal
    description: str
    type: TransactionType
    category_id: str
    from_account: AccountType | None = None
    to_account: AccountType | None = None
    from_account_id: str | None = None
    to_account_id: str | None = None
    pool_id: str | None = None
    is_split: bool = False
    friend_name: str = ""
    friend_amount: Decimal = Decimal("0")
    user_amount: Decimal = Decimal("0")
    friend_payment_destination: str = ""
    friend_payment_account_id: str | None = None
    friend_payment_is_account: bool = False
    is_future_transaction: bool = False
    is_recurring: bool = False
    recurrence_interval: RecurrenceInterval = RecurrenceInterval.NONE
    recurrence_end_date: datetime | None = None
    parent_transaction_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def total_amount(self) -> Decimal:
        """Return the full amount including a friend's share."""
        if self.is_split:
            return self.user_amount + self.friend_amount
        return self.amount


__all__ = ["TransactionType", "RecurrenceInterval", "Transaction"]
