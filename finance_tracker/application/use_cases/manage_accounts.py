"""Use case for editing accounts and their pools."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.domain.models import (
    Account,
    FinanceState,
    Pool,
    Transaction,
    TransactionType,
)
from finance_tracker.domain.services.ledger import scale_pools
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.utils.decimal_utils import coerce_decimal


class ManageAccountsUseCase:
    """Mutate accounts and pools, keeping pools consistent with balances."""

    def __init__(
        self,
        store: FinanceStorePort,
        refresh: RefreshLedgerUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting accounts and transactions.
            refresh: Use case re-deriving balances and budgets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._refresh = refresh
        self._logger = logger or get_app_logger()

    def add_account(
        self,
        state: FinanceState,
        account: Account,
        now: datetime | None = None,
    ) -> Account:
        """Append an account."""
        state.accounts = [*state.accounts, account]
        self._refresh.execute(state, now)
        return account

    def update_accounts(
        self,
        state: FinanceState,
        updated_accounts: Sequence[Account],
        now: datetime | None = None,
    ) -> None:
        """Replace the account list.

        Pools of an account whose initial balance changed are scaled by
        ``new_initial / old_initial``; accounts starting from zero keep
        their pools.
        """
        previous = {account.id: account for account in state.accounts}
        accounts = []
        for account in updated_accounts:
            old = previous.get(account.id)
            if (
                old is not None
                and account.pools
                and old.initial_balance != 0
                and account.initial_balance != old.initial_balance
            ):
                ratio = account.initial_balance / old.initial_balance
                account = scale_pools(account, ratio)
                self._logger.info(
                    f"Scaled pools of {account.name!r} by {ratio}"
                )
            accounts.append(account)
        state.accounts = accounts
        self._refresh.execute(state, now)

    def delete_account_and_transactions(
        self,
        state: FinanceState,
        account_id: str,
        now: datetime | None = None,
    ) -> int:
        """Remove an account, its pools, and every transaction touching it.

        Returns:
            int: Number of transactions removed.
        """
        state.accounts = [
            account for account in state.accounts if account.id != account_id
        ]
        kept = [
            transaction
            for transaction in state.transactions
            if account_id
            not in (transaction.from_account_id, transaction.to_account_id)
        ]
        removed = len(state.transactions) - len(kept)
        state.transactions = kept
        self._store.save_transactions(state.transactions)
        self._refresh.execute(state, now)
        self._logger.info(
            f"Deleted account {account_id} and {removed} transactions"
        )
        return removed

    def add_pool(
        self,
        state: FinanceState,
        account_id: str,
        name: str,
        amount,
        color: str = "Blue",
    ) -> Pool:
        """Earmark part of an account's unallocated balance.

        Raises:
            ValueError: If the account is unknown, the name is empty, or the
                amount is not positive or exceeds the unallocated balance.
        """
        index = self._account_index(state, account_id)
        account = state.accounts[index]
        value = coerce_decimal(amount)
        if not name.strip():
            raise ValueError("Pool name must not be empty")
        if value <= 0:
            raise ValueError("Pool amount must be greater than zero")
        if value > account.unallocated_balance:
            raise ValueError(
                f"Pool amount {value} exceeds the unallocated balance "
                f"{account.unallocated_balance} of {account.name!r}"
            )
        pool = Pool(name=name.strip(), amount=value, color=color)
        self._replace_account(
            state,
            index,
            replace(account, pools=(*account.pools, pool)),
        )
        return pool

    def update_pool(
        self,
        state: FinanceState,
        account_id: str,
        pool: Pool,
    ) -> bool:
        """Replace the pool sharing the same id."""
        index = self._account_index(state, account_id)
        account = state.accounts[index]
        if all(existing.id != pool.id for existing in account.pools):
            return False
        pools = tuple(
            pool if existing.id == pool.id else existing
            for existing in account.pools
        )
        self._replace_account(state, index, replace(account, pools=pools))
        return True

    def delete_pool(
        self,
        state: FinanceState,
        account_id: str,
        pool_id: str,
        now: datetime | None = None,
    ) -> None:
        """Remove a pool and unassign its transactions."""
        index = self._account_index(state, account_id)
        account = state.accounts[index]
        state.accounts[index] = replace(
            account,
            pools=tuple(pool for pool in account.pools if pool.id != pool_id),
        )
        state.transactions = [
            replace(transaction, pool_id=None)
            if transaction.pool_id == pool_id
            else transaction
            for transaction in state.transactions
        ]
        self._store.save_transactions(state.transactions)
        self._refresh.execute(state, now)

    def assign_transaction_to_pool(
        self,
        state: FinanceState,
        transaction_id: str,
        pool_id: str | None,
        now: datetime | None = None,
    ) -> bool:
        """Move a transaction between pools and adjust pool amounts.

        Expenses take money out of the pool, income puts money in; the
        previous pool gets its money back. Transfers only change the link.

        Returns:
            bool: False when the transaction is unknown.
        """
        position = None
        for index, transaction in enumerate(state.transactions):
            if transaction.id == transaction_id:
                position = index
                break
        if position is None:
            self._logger.warning(
                f"Cannot assign unknown transaction {transaction_id}"
            )
            return False

        transaction = state.transactions[position]
        delta = self._pool_sign(transaction) * transaction.amount
        if transaction.pool_id is not None:
            self._adjust_pool(state, transaction.pool_id, -delta)
        if pool_id is not None:
            self._adjust_pool(state, pool_id, delta)

        transactions = list(state.transactions)
        transactions[position] = replace(transaction, pool_id=pool_id)
        state.transactions = transactions
        self._store.save_transactions(state.transactions)
        self._refresh.execute(state, now)
        return True

    def transactions_for_pool(
        self,
        state: FinanceState,
        pool_id: str,
    ) -> list[Transaction]:
        """Return transactions assigned to a pool, newest first."""
        return sorted(
            (item for item in state.transactions if item.pool_id == pool_id),
            key=lambda item: item.date,
            reverse=True,
        )

    def _replace_account(
        self,
        state: FinanceState,
        index: int,
        account: Account,
    ) -> None:
        accounts = list(state.accounts)
        accounts[index] = account
        state.accounts = accounts
        self._store.save_accounts(state.accounts)

    def _adjust_pool(
        self,
        state: FinanceState,
        pool_id: str,
        delta: Decimal,
    ) -> None:
        accounts = list(state.accounts)
        for index, account in enumerate(accounts):
            if any(pool.id == pool_id for pool in account.pools):
                accounts[index] = replace(
                    account,
                    pools=tuple(
                        replace(pool, amount=pool.amount + delta)
                        if pool.id == pool_id
                        else pool
                        for pool in account.pools
                    ),
                )
                state.accounts = accounts
                return
        self._logger.debug(f"Pool {pool_id} not found; amount unchanged")

    @staticmethod
    def _pool_sign(transaction: Transaction) -> Decimal:
        if transaction.type == TransactionType.EXPENSE:
            return Decimal("-1")
        if transaction.type == TransactionType.INCOME:
            return Decimal("1")
        return Decimal("0")

    @staticmethod
    def _account_index(state: FinanceState, account_id: str) -> int:
        for index, account in enumerate(state.accounts):
            if account.id == account_id:
                return index
        raise ValueError(f"Unknown account {account_id}")


__all__ = ["ManageAccountsUseCase"]
