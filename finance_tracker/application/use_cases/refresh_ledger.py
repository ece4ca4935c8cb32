"""Use case re-deriving balances, budgets, and the widget snapshot.

Every mutation of the finance state funnels through this use case so that
balances, pools, budget periods, and the widget snapshot are always derived
the same way.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.application.ports.widget_snapshot import (
    WidgetSnapshotPort,
)
from finance_tracker.domain.models import FinanceState
from finance_tracker.domain.services.budgets import reconcile_budgets
from finance_tracker.domain.services.ledger import (
    compute_net_worth,
    recalculate_balances,
)
from finance_tracker.domain.services.snapshot import build_widget_snapshot
from finance_tracker.domain.services.validation import (
    find_dangling_transactions,
    validate_balance_sign,
    validate_pool_allocation,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RefreshLedgerResult:
    """Result of a ledger refresh.

    Attributes:
        net_worth: Net balance after recalculation.
        account_count: Number of accounts recalculated.
        budget_count: Number of budgets reconciled.
    """

    net_worth: Decimal
    account_count: int
    budget_count: int


class RefreshLedgerUseCase:
    """Recalculate accounts, reconcile budgets, persist, and notify."""

    def __init__(
        self,
        store: FinanceStorePort,
        snapshot_port: WidgetSnapshotPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting accounts and budgets.
            snapshot_port: Optional port receiving the widget snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._snapshot_port = snapshot_port
        self._logger = logger or get_app_logger()

    def execute(
        self,
        state: FinanceState,
        now: datetime | None = None,
    ) -> RefreshLedgerResult:
        """Re-derive every computed field of the state.

        Args:
            state: Finance state updated in place.
            now: Reference moment for budget periods; defaults to now.

        Returns:
            RefreshLedgerResult: Summary of the refresh.
        """
        moment = now or datetime.now()
        state.accounts = recalculate_balances(
            state.accounts,
            state.transactions,
            logger=self._logger,
        )
        for account in state.accounts:
            validate_pool_allocation(account, self._logger)
            validate_balance_sign(account, self._logger)
        dangling = find_dangling_transactions(
            state.transactions,
            state.accounts,
        )
        if dangling:
            self._logger.debug(
                f"{len(dangling)} transactions reference unknown account ids"
            )
        state.budgets = reconcile_budgets(
            state.budgets,
            state.transactions,
            moment,
            logger=self._logger,
        )

        self._store.save_accounts(state.accounts)
        self._store.save_budgets(state.budgets)

        snapshot = build_widget_snapshot(state, moment)
        if self._snapshot_port is not None:
            self._snapshot_port.write_snapshot(snapshot)

        net_worth = compute_net_worth(state.accounts).net_worth
        self._logger.info(
            f"Recalculated {len(state.accounts)} accounts and "
            f"{len(state.budgets)} budgets (net balance {net_worth})"
        )
        return RefreshLedgerResult(
            net_worth=net_worth,
            account_count=len(state.accounts),
            budget_count=len(state.budgets),
        )


__all__ = ["RefreshLedgerUseCase", "RefreshLedgerResult"]
