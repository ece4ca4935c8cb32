"""Use case for maintaining income and expense categories."""

from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.domain.models import (
    Category,
    CategoryType,
    FinanceState,
    TransactionType,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class ManageCategoriesUseCase:
    """Add, edit, remove, and look up categories."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def add(self, state: FinanceState, category: Category) -> Category:
        """Append a category to the list of its type."""
        categories = [*state.categories_of(category.type), category]
        self._set(state, category.type, categories)
        return category

    def update(self, state: FinanceState, category: Category) -> bool:
        """Replace the category sharing the same id and type."""
        current = state.categories_of(category.type)
        if all(existing.id != category.id for existing in current):
            self._logger.warning(
                f"Cannot update unknown category {category.id}"
            )
            return False
        categories = [
            category if existing.id == category.id else existing
            for existing in current
        ]
        self._set(state, category.type, categories)
        return True

    def delete(self, state: FinanceState, category: Category) -> bool:
        """Remove a category; transactions keep their category id."""
        current = state.categories_of(category.type)
        categories = [
            existing for existing in current if existing.id != category.id
        ]
        if len(categories) == len(current):
            return False
        self._set(state, category.type, categories)
        return True

    def get(self, state: FinanceState, category_id: str) -> Category | None:
        """Return the category with an id, searching both lists."""
        for category in state.categories:
            if category.id == category_id:
                return category
        return None

    def for_transaction_type(
        self,
        state: FinanceState,
        transaction_type: TransactionType,
    ) -> list[Category]:
        """Return the categories offered for a transaction type.

        Transfers reuse the expense categories.
        """
        if transaction_type == TransactionType.INCOME:
            return list(state.income_categories)
        return list(state.expense_categories)

    def _set(
        self,
        state: FinanceState,
        category_type: CategoryType,
        categories: list[Category],
    ) -> None:
        if category_type == CategoryType.INCOME:
            state.income_categories = categories
        else:
            state.expense_categories = categories
        self._store.save_categories(categories, category_type)


__all__ = ["ManageCategoriesUseCase"]
