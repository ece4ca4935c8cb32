"""Port for persisting finance entities."""

from typing import Protocol

from finance_tracker.domain.models import (
    Account,
    Budget,
    Category,
    CategoryType,
    Transaction,
    UserPreferences,
)


class FinanceStorePort(Protocol):
    """Port exposing durable storage for every entity list.

    ``load_*`` methods return None when nothing was stored yet, so callers
    can tell "empty" from "never saved".
    """

    def load_accounts(self) -> list[Account] | None:
        """Return stored accounts."""

    def save_accounts(self, accounts: list[Account]) -> None:
        """Replace stored accounts."""

    def load_transactions(self) -> list[Transaction] | None:
        """Return stored transactions."""

    def save_transactions(self, transactions: list[Transaction]) -> None:
        """Replace stored transactions."""

    def load_categories(
        self,
        category_type: CategoryType,
    ) -> list[Category] | None:
        """Return stored categories of one type."""

    def save_categories(
        self,
        categories: list[Category],
        category_type: CategoryType,
    ) -> None:
        """Replace stored categories of one type."""

    def load_budgets(self) -> list[Budget] | None:
        """Return stored budgets."""

    def save_budgets(self, budgets: list[Budget]) -> None:
        """Replace stored budgets."""

    def load_preferences(self) -> UserPreferences | None:
        """Return stored user preferences."""

    def save_preferences(self, preferences: UserPreferences) -> None:
        """Replace stored user preferences."""


__all__ = ["FinanceStorePort"]
