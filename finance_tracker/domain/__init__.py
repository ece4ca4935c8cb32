"""Domain package for business rules and core models."""

from .constants import (
    WIDGET_TRANSACTION_LIMIT,
    default_accounts,
    default_categories,
)
from .models import (
    Account,
    AccountType,
    Budget,
    BudgetType,
    Category,
    CategorySpending,
    CategoryType,
    FinanceState,
    NetWorthSummary,
    Pool,
    RecurrenceInterval,
    TimePeriod,
    Transaction,
    TransactionType,
    UserPreferences,
    WidgetSnapshot,
)
from .policies import TimeFilter, TransactionFilter
from .services import (
    build_widget_snapshot,
    compute_net_worth,
    reconcile_budgets,
    recalculate_balances,
)

__all__ = [
    "Account",
    "AccountType",
    "Budget",
    "BudgetType",
    "Category",
    "CategorySpending",
    "CategoryType",
    "FinanceState",
    "NetWorthSummary",
    "Pool",
    "RecurrenceInterval",
    "TimePeriod",
    "Transaction",
    "TransactionType",
    "UserPreferences",
    "WidgetSnapshot",
    "TimeFilter",
    "TransactionFilter",
    "WIDGET_TRANSACTION_LIMIT",
    "default_accounts",
    "default_categories",
    "build_widget_snapshot",
    "compute_net_worth",
    "reconcile_budgets",
    "recalculate_balances",
]
