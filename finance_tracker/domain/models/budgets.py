"""Domain models for spending budgets."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
import uuid


class BudgetType(str, Enum):
    """Scope of the expenses a budget tracks."""

    OVERALL = "overall"
    CATEGORY = "category"
    ACCOUNT = "account"


class TimePeriod(str, Enum):
    """Length of a budget period."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def label(self) -> str:
        """Return the display name of the period."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Budget:
    """Spending target over a rolling calendar period.

    Attributes:
        name: Label shown to the user.
        amount: Target amount for one period.
        type: Overall, category, or account scope.
        time_period: Weekly, monthly, or yearly.
        start_date: Creation date of the budget.
        category_id: Tracked category for category budgets.
        account_id: Tracked source account for account budgets.
        period_start_date: Start of the current period (derived).
        current_spent: Spend inside the current period (derived).
    """

    name: str
    amount: Decimal
    type: BudgetType
    time_period: TimePeriod
    start_date: datetime
    category_id: str | None = None
    account_id: str | None = None
    period_start_date: datetime | None = None
    current_spent: Decimal = Decimal("0")
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def remaining_amount(self) -> Decimal:
        """Return what is left to spend, never below zero."""
        return max(Decimal("0"), self.amount - self.current_spent)

    @property
    def percent_used(self) -> Decimal:
        """Return the used share of the target, capped at 1."""
        if self.amount <= 0:
            return Decimal("0")
        return min(Decimal("1"), self.current_spent / self.amount)


__all__ = ["BudgetType", "TimePeriod", "Budget"]
