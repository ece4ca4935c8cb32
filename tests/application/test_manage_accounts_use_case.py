"""Tests for the ManageAccountsUseCase."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.use_cases.manage_accounts import (
    ManageAccountsUseCase,
)
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.domain.models import (
    Account,
    AccountType,
    FinanceState,
    Pool,
    Transaction,
    TransactionType,
)

NOW = datetime(2024, 3, 15)


def _build(pools=()):
    store = MagicMock()
    logger = MagicMock()
    refresh = RefreshLedgerUseCase(store=store, logger=logger)
    use_case = ManageAccountsUseCase(
        store=store,
        refresh=refresh,
        logger=logger,
    )
    state = FinanceState(
        accounts=[
            Account(
                id="current",
                name="Current",
                type=AccountType.CURRENT,
                initial_balance=Decimal("500"),
                balance=Decimal("500"),
                pools=tuple(pools),
            ),
            Account(
                id="savings",
                name="Savings",
                type=AccountType.SAVINGS,
                initial_balance=Decimal("100"),
                balance=Decimal("100"),
            ),
        ]
    )
    return use_case, store, state


def _transaction(transaction_type, amount="50", **kwargs):
    return Transaction(
        date=datetime(2024, 3, 10),
        amount=Decimal(amount),
        description="item",
        type=transaction_type,
        category_id="other",
        **kwargs,
    )


def test_add_pool_validates_amount():
    """Pools must be positive and fit in the unallocated balance."""
    use_case, store, state = _build(
        pools=[Pool(name="Rent", amount=Decimal("300"))]
    )

    pool = use_case.add_pool(state, "current", "Bills", Decimal("200"))

    assert state.accounts[0].pools[-1] == pool
    store.save_accounts.assert_called_with(state.accounts)
    with pytest.raises(ValueError):
        use_case.add_pool(state, "current", "Fun", Decimal("1"))
    with pytest.raises(ValueError):
        use_case.add_pool(state, "savings", "Fun", Decimal("0"))
    with pytest.raises(ValueError):
        use_case.add_pool(state, "savings", "  ", Decimal("10"))
    with pytest.raises(ValueError):
        use_case.add_pool(state, "missing", "Fun", Decimal("10"))


def test_update_accounts_scales_pools_with_initial_balance():
    """Changing the initial balance scales pools by the same ratio."""
    use_case, _, state = _build(
        pools=[Pool(name="Rent", amount=Decimal("300"))]
    )

    use_case.update_accounts(
        state,
        [
            replace(state.accounts[0], initial_balance=Decimal("1000")),
            state.accounts[1],
        ],
        NOW,
    )

    assert state.accounts[0].balance == Decimal("1000")
    assert state.accounts[0].pools[0].amount == Decimal("600")


def test_delete_account_cascades_to_transactions():
    """Transactions touching the deleted account are removed."""
    use_case, store, state = _build()
    state.transactions = [
        _transaction(TransactionType.EXPENSE, from_account_id="current"),
        _transaction(TransactionType.INCOME, to_account_id="savings"),
        _transaction(
            TransactionType.TRANSFER,
            from_account_id="savings",
            to_account_id="current",
        ),
    ]

    removed = use_case.delete_account_and_transactions(state, "current", NOW)

    assert removed == 2
    assert [account.id for account in state.accounts] == ["savings"]
    assert len(state.transactions) == 1
    assert state.accounts[0].balance == Decimal("150")
    store.save_transactions.assert_called_with(state.transactions)


def test_assign_transaction_moves_money_between_pools():
    """Expenses leave their pool; the previous pool is refunded."""
    bills = Pool(name="Bills", amount=Decimal("200"), id="bills")
    fun = Pool(name="Fun", amount=Decimal("100"), id="fun")
    use_case, _, state = _build(pools=[bills, fun])
    expense = _transaction(
        TransactionType.EXPENSE,
        from_account_id="current",
    )
    state.transactions = [expense]

    use_case.assign_transaction_to_pool(state, expense.id, "bills", NOW)
    use_case.assign_transaction_to_pool(state, expense.id, "fun", NOW)

    amounts = {pool.id: pool.amount for pool in state.accounts[0].pools}
    assert amounts == {"bills": Decimal("200"), "fun": Decimal("50")}
    assert state.transactions[0].pool_id == "fun"
    assert use_case.transactions_for_pool(state, "fun") == state.transactions


def test_assign_income_adds_to_pool():
    """Income assigned to a pool increases it."""
    bills = Pool(name="Bills", amount=Decimal("100"), id="bills")
    use_case, _, state = _build(pools=[bills])
    income = _transaction(TransactionType.INCOME, to_account_id="current")
    state.transactions = [income]

    use_case.assign_transaction_to_pool(state, income.id, "bills", NOW)

    assert state.accounts[0].pools[0].amount == Decimal("150")
    assert use_case.assign_transaction_to_pool(state, "x", None, NOW) is False


def test_delete_pool_unassigns_transactions():
    """Deleting a pool clears the pool link of its transactions."""
    bills = Pool(name="Bills", amount=Decimal("100"), id="bills")
    use_case, _, state = _build(pools=[bills])
    state.transactions = [
        _transaction(
            TransactionType.EXPENSE,
            from_account_id="current",
            pool_id="bills",
        )
    ]

    use_case.delete_pool(state, "current", "bills", NOW)

    assert state.accounts[0].pools == ()
    assert state.transactions[0].pool_id is None


def test_update_pool_replaces_pool():
    """update_pool swaps the pool with the same id."""
    bills = Pool(name="Bills", amount=Decimal("100"), id="bills")
    use_case, _, state = _build(pools=[bills])

    changed = use_case.update_pool(
        state,
        "current",
        replace(bills, name="Utilities", color="Green"),
    )

    assert changed is True
    assert state.accounts[0].pools[0].name == "Utilities"
    assert use_case.update_pool(
        state,
        "current",
        Pool(name="Other", amount=Decimal("1")),
    ) is False
