"""Use case assembling the finance state from storage."""

from datetime import datetime

from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.domain.constants import (
    default_accounts,
    default_categories,
)
from finance_tracker.domain.models import (
    CategoryType,
    FinanceState,
    UserPreferences,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class LoadFinanceDataUseCase:
    """Load stored entities, fill in defaults, and refresh derived data."""

    def __init__(
        self,
        store: FinanceStorePort,
        refresh: RefreshLedgerUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing stored entity lists.
            refresh: Use case re-deriving balances and budgets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._refresh = refresh
        self._logger = logger or get_app_logger()

    def execute(self, now: datetime | None = None) -> FinanceState:
        """Return a fully derived finance state.

        Missing lists are replaced by defaults: three starter accounts,
        the default categories, and default preferences. Defaults are
        persisted so later loads see the same identities.

        Args:
            now: Reference moment for budget periods.

        Returns:
            FinanceState: Loaded state with recalculated balances.
        """
        accounts = self._store.load_accounts()
        if accounts is None:
            accounts = default_accounts()
            self._logger.info("No stored accounts; created default accounts")

        income_categories = self._load_categories(CategoryType.INCOME)
        expense_categories = self._load_categories(CategoryType.EXPENSE)
        preferences = self._store.load_preferences()
        if preferences is None:
            preferences = UserPreferences()

        state = FinanceState(
            accounts=accounts,
            transactions=self._store.load_transactions() or [],
            income_categories=income_categories,
            expense_categories=expense_categories,
            budgets=self._store.load_budgets() or [],
            preferences=preferences,
        )
        self._refresh.execute(state, now)
        self._logger.info(
            f"Loaded {len(state.accounts)} accounts and "
            f"{len(state.transactions)} transactions"
        )
        return state

    def _load_categories(self, category_type: CategoryType):
        categories = self._store.load_categories(category_type)
        if categories is None:
            categories = default_categories(category_type)
            self._store.save_categories(categories, category_type)
        return categories


__all__ = ["LoadFinanceDataUseCase"]
