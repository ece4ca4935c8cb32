"""Use case for adding, editing, and removing budgets."""

from dataclasses import replace
from datetime import datetime

from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.domain.models import Budget, FinanceState
from finance_tracker.domain.services.budgets import period_start
from finance_tracker.infrastructure.logging.logger import get_app_logger


class ManageBudgetsUseCase:
    """Mutate the budget list and reconcile spending."""

    def __init__(
        self,
        store: FinanceStorePort,
        refresh: RefreshLedgerUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting budgets.
            refresh: Use case re-deriving balances and budgets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._refresh = refresh
        self._logger = logger or get_app_logger()

    def add(
        self,
        state: FinanceState,
        budget: Budget,
        now: datetime | None = None,
    ) -> Budget:
        """Append a budget positioned on the current period."""
        moment = now or datetime.now()
        positioned = replace(
            budget,
            period_start_date=period_start(budget.time_period, moment),
        )
        state.budgets = [*state.budgets, positioned]
        self._refresh.execute(state, moment)
        self._logger.info(f"Added budget {budget.name!r}")
        return positioned

    def update(
        self,
        state: FinanceState,
        budget: Budget,
        now: datetime | None = None,
    ) -> bool:
        """Replace the budget sharing the same id.

        The stored period start is kept unless the time period changed.

        Returns:
            bool: False when no budget has that id.
        """
        moment = now or datetime.now()
        budgets = list(state.budgets)
        for index, existing in enumerate(budgets):
            if existing.id != budget.id:
                continue
            if budget.time_period != existing.time_period:
                start = period_start(budget.time_period, moment)
            else:
                start = existing.period_start_date
            budgets[index] = replace(budget, period_start_date=start)
            state.budgets = budgets
            self._refresh.execute(state, moment)
            return True
        self._logger.warning(f"Cannot update unknown budget {budget.id}")
        return False

    def delete(self, state: FinanceState, budget_id: str) -> bool:
        """Remove a budget; transactions are left untouched."""
        kept = [budget for budget in state.budgets if budget.id != budget_id]
        if len(kept) == len(state.budgets):
            return False
        state.budgets = kept
        self._store.save_budgets(state.budgets)
        return True


__all__ = ["ManageBudgetsUseCase"]
