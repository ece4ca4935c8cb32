"""Domain models package."""

from .accounts import Account, AccountType, Pool
from .budgets import Budget, BudgetType, TimePeriod
from .categories import Category, CategoryType
from .preferences import UserPreferences
from .state import FinanceState, WidgetSnapshot
from .summaries import CategorySpending, NetWorthSummary
from .transactions import RecurrenceInterval, Transaction, TransactionType

__all__ = [
    "Account",
    "AccountType",
    "Pool",
    "Budget",
    "BudgetType",
    "TimePeriod",
    "Category",
    "CategoryType",
    "UserPreferences",
    "FinanceState",
    "WidgetSnapshot",
    "CategorySpending",
    "NetWorthSummary",
    "RecurrenceInterval",
    "Transaction",
    "TransactionType",
]
