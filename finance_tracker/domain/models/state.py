"""In-memory finance state shared by the use cases."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from finance_tracker.domain.models.accounts import Account
from finance_tracker.domain.models.budgets import Budget
from finance_tracker.domain.models.categories import Category, CategoryType
from finance_tracker.domain.models.preferences import UserPreferences
from finance_tracker.domain.models.transactions import Transaction


@dataclass
class FinanceState:
    """Ordered entity collections owned by one session.

    Use cases receive the state explicitly and replace its lists; the entities
    themselves are immutable.
    """

    accounts: list[Account] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    income_categories: list[Category] = field(default_factory=list)
    expense_categories: list[Category] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    preferences: UserPreferences = field(default_factory=UserPreferences)

    @property
    def categories(self) -> list[Category]:
        """Return income categories followed by expense categories."""
        return self.income_categories + self.expense_categories

    def categories_of(self, category_type: CategoryType) -> list[Category]:
        """Return the category list for a category type."""
        if category_type == CategoryType.INCOME:
            return self.income_categories
        return self.expense_categories


@dataclass(frozen=True)
class WidgetSnapshot:
    """Read-only data handed to the home-screen widget.

    Attributes:
        net_balance: Assets minus credit debt.
        transactions: Most recent transactions, newest first.
        categories: Expense categories for icon lookup.
        theme_color_name: Theme color chosen by the user.
        generated_at: When the snapshot was produced.
    """

    net_balance: Decimal
    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    theme_color_name: str = "Blue"
    generated_at: datetime | None = None

    @classmethod
    def placeholder(cls) -> "WidgetSnapshot":
        """Return the snapshot shown when nothing was written yet."""
        return cls(net_balance=Decimal("0"))


__all__ = ["FinanceState", "WidgetSnapshot"]
