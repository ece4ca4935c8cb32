"""Use case for adding, editing, and removing transactions."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, timedelta

from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.domain.models import FinanceState, Transaction
from finance_tracker.domain.policies import TransactionFilter
from finance_tracker.domain.services.recurrence import generate_occurrences
from finance_tracker.infrastructure.logging.logger import get_app_logger

DEFAULT_RECURRENCE_HORIZON = timedelta(days=365)


class ManageTransactionsUseCase:
    """Mutate the transaction list and re-derive the ledger."""

    def __init__(
        self,
        store: FinanceStorePort,
        refresh: RefreshLedgerUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting transactions.
            refresh: Use case re-deriving balances and budgets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._refresh = refresh
        self._logger = logger or get_app_logger()

    def add(
        self,
        state: FinanceState,
        transaction: Transaction,
        now: datetime | None = None,
    ) -> Transaction:
        """Append a transaction."""
        state.transactions = [*state.transactions, transaction]
        self._commit(state, now)
        self._logger.info(
            f"Added {transaction.type.value} transaction {transaction.id}"
        )
        return transaction

    def update(
        self,
        state: FinanceState,
        transaction: Transaction,
        now: datetime | None = None,
    ) -> bool:
        """Replace the transaction sharing the same id.

        Returns:
            bool: False when no transaction has that id.
        """
        index = self._index_of(state, transaction.id)
        if index is None:
            self._logger.warning(
                f"Cannot update unknown transaction {transaction.id}"
            )
            return False
        transactions = list(state.transactions)
        transactions[index] = transaction
        state.transactions = transactions
        self._commit(state, now)
        return True

    def delete(
        self,
        state: FinanceState,
        transaction_ids: Iterable[str],
        now: datetime | None = None,
    ) -> int:
        """Remove transactions by id.

        Returns:
            int: Number of transactions removed.
        """
        doomed = set(transaction_ids)
        kept = [item for item in state.transactions if item.id not in doomed]
        removed = len(state.transactions) - len(kept)
        state.transactions = kept
        self._commit(state, now)
        return removed

    def delete_all(
        self,
        state: FinanceState,
        now: datetime | None = None,
    ) -> int:
        """Remove every transaction and reset balances."""
        removed = len(state.transactions)
        state.transactions = []
        self._commit(state, now)
        self._logger.info(f"Deleted all {removed} transactions")
        return removed

    def generate_recurring(
        self,
        state: FinanceState,
        transaction: Transaction,
        up_to: datetime | None = None,
        now: datetime | None = None,
    ) -> list[Transaction]:
        """Append future instances of a recurring transaction.

        Args:
            state: Finance state updated in place.
            transaction: Recurring parent transaction.
            up_to: Horizon when the parent has no end date; defaults to one
                year from now.
            now: Reference moment.

        Returns:
            list[Transaction]: Generated instances.
        """
        moment = now or datetime.now()
        horizon = up_to or moment + DEFAULT_RECURRENCE_HORIZON
        occurrences = generate_occurrences(transaction, horizon)
        if occurrences:
            state.transactions = [*state.transactions, *occurrences]
            self._commit(state, moment)
        self._logger.info(
            f"Generated {len(occurrences)} instances of {transaction.id}"
        )
        return occurrences

    def update_recurring(
        self,
        state: FinanceState,
        transaction: Transaction,
        now: datetime | None = None,
    ) -> bool:
        """Update a recurring parent and propagate to its instances.

        Instances keep their own id, date, and parent link.
        """
        if self._index_of(state, transaction.id) is None:
            return False
        updated = []
        for item in state.transactions:
            if item.id == transaction.id:
                updated.append(transaction)
            elif item.parent_transaction_id == transaction.id:
                updated.append(
                    replace(
                        transaction,
                        id=item.id,
                        date=item.date,
                        parent_transaction_id=transaction.id,
                        is_future_transaction=item.is_future_transaction,
                    )
                )
            else:
                updated.append(item)
        state.transactions = updated
        self._commit(state, now)
        return True

    def delete_recurring(
        self,
        state: FinanceState,
        transaction: Transaction,
        delete_all_future_instances: bool = False,
        now: datetime | None = None,
    ) -> int:
        """Remove a transaction and optionally its generated instances.

        Instances are only removed together with a recurring parent.
        """
        removes_children = (
            delete_all_future_instances
            and transaction.is_recurring
            and transaction.parent_transaction_id is None
        )
        kept = [
            item
            for item in state.transactions
            if item.id != transaction.id
            and not (
                removes_children
                and item.parent_transaction_id == transaction.id
            )
        ]
        removed = len(state.transactions) - len(kept)
        state.transactions = kept
        self._commit(state, now)
        return removed

    def future_transactions(
        self,
        state: FinanceState,
        now: datetime | None = None,
    ) -> list[Transaction]:
        """Return transactions dated after today."""
        moment = now or datetime.now()
        today = moment.date()
        return [item for item in state.transactions if item.date.date() > today]

    def recurring_transactions(self, state: FinanceState) -> list[Transaction]:
        """Return recurring transactions."""
        return [item for item in state.transactions if item.is_recurring]

    def filter(
        self,
        state: FinanceState,
        transaction_filter: TransactionFilter,
        now: datetime | None = None,
    ) -> list[Transaction]:
        """Return transactions matching a filter, newest first."""
        return transaction_filter.apply(
            state.transactions,
            now or datetime.now(),
        )

    def _commit(self, state: FinanceState, now: datetime | None) -> None:
        self._store.save_transactions(state.transactions)
        self._refresh.execute(state, now)

    @staticmethod
    def _index_of(state: FinanceState, transaction_id: str) -> int | None:
        for index, item in enumerate(state.transactions):
            if item.id == transaction_id:
                return index
        return None


__all__ = ["ManageTransactionsUseCase"]
