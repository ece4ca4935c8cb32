"""Ledger replay: account balances and pool adjustments.

Balances are never stored independently. Every recalculation resets each
account to its initial balance and replays the transaction list in stored
order. Each transaction maps to signed deltas through this table (the
endpoint kind is the type of the resolved account):

    type      source      destination  effect
    income    -           any          dest += amount
    expense   non-credit  -            src -= amount
    expense   credit      -            src += total_amount (split) or amount
    expense   split paid into own acct friend acct += friend_amount
    transfer  any         non-credit   src -= amount, dest += amount
    transfer  any         credit       src -= amount, dest -= amount

The transfer-to-credit row and the split friend-account row are kept as the
app has always applied them and are pending product review.
"""

from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal
from logging import Logger

from finance_tracker.domain.models import (
    Account,
    AccountType,
    NetWorthSummary,
    Transaction,
    TransactionType,
)

Effect = tuple[int, Decimal]


def resolve_account(
    accounts: Sequence[Account],
    account_id: str | None,
    account_type: AccountType | None,
) -> int | None:
    """Locate an account by identity, falling back to its type.

    Legacy transactions only carry the account type, so the type lookup
    remains as a second step.

    Args:
        accounts: Accounts in display order.
        account_id: Identity referenced by the transaction.
        account_type: Account kind referenced by the transaction.

    Returns:
        int | None: Index of the matching account, if any.
    """
    if account_id is not None:
        for index, account in enumerate(accounts):
            if account.id == account_id:
                return index
    if account_type is not None:
        for index, account in enumerate(accounts):
            if account.type == account_type:
                return index
    return None


def transaction_effects(
    transaction: Transaction,
    accounts: Sequence[Account],
    *,
    logger: Logger | None = None,
) -> list[Effect]:
    """Return the signed balance deltas a transaction applies.

    Args:
        transaction: Transaction to evaluate.
        accounts: Accounts the transaction may reference.
        logger: Optional logger for skipped references.

    Returns:
        list[Effect]: (account index, delta) pairs; empty when the
        transaction references no known account.
    """
    if transaction.type == TransactionType.INCOME:
        effects = _income_effects(transaction, accounts)
    elif transaction.type == TransactionType.EXPENSE:
        effects = _expense_effects(transaction, accounts)
    else:
        effects = _transfer_effects(transaction, accounts)
    if not effects and logger is not None:
        logger.debug(
            f"Skipped transaction {transaction.id}: no matching account"
        )
    return effects


def _income_effects(
    transaction: Transaction,
    accounts: Sequence[Account],
) -> list[Effect]:
    index = resolve_account(
        accounts,
        transaction.to_account_id,
        transaction.to_account,
    )
    if index is None:
        return []
    return [(index, transaction.amount)]


def _expense_effects(
    transaction: Transaction,
    accounts: Sequence[Account],
) -> list[Effect]:
    effects: list[Effect] = []
    index = resolve_account(
        accounts,
        transaction.from_account_id,
        transaction.from_account,
    )
    if index is not None:
        if accounts[index].type == AccountType.CREDIT:
            effects.append((index, transaction.total_amount))
        else:
            effects.append((index, -transaction.amount))

    if transaction.is_split and transaction.friend_payment_is_account:
        friend_index = resolve_account(
            accounts,
            transaction.friend_payment_account_id,
            None,
        )
        if friend_index is not None:
            effects.append((friend_index, transaction.friend_amount))
    return effects


def _transfer_effects(
    transaction: Transaction,
    accounts: Sequence[Account],
) -> list[Effect]:
    from_index = resolve_account(
        accounts,
        transaction.from_account_id,
        transaction.from_account,
    )
    to_index = resolve_account(
        accounts,
        transaction.to_account_id,
        transaction.to_account,
    )
    if from_index is None or to_index is None:
        return []
    if accounts[to_index].type == AccountType.CREDIT:
        to_delta = -transaction.amount
    else:
        to_delta = transaction.amount
    return [(from_index, -transaction.amount), (to_index, to_delta)]


def recalculate_balances(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    *,
    logger: Logger | None = None,
) -> list[Account]:
    """Replay every transaction from the initial balances.

    Pools are shrunk afterwards from the net change of each account, so the
    result does not depend on transaction order.

    Args:
        accounts: Accounts with their last known balances.
        transactions: Full transaction list in stored order.
        logger: Optional logger for skipped references.

    Returns:
        list[Account]: Accounts with recomputed balances and pools.
    """
    balances = [account.initial_balance for account in accounts]
    for transaction in transactions:
        for index, delta in transaction_effects(
            transaction,
            accounts,
            logger=logger,
        ):
            balances[index] += delta

    return [
        shrink_pools(replace(account, balance=balance), account.balance)
        for account, balance in zip(accounts, balances)
    ]


def shrink_pools(account: Account, previous_balance: Decimal) -> Account:
    """Scale pools down when a falling balance no longer covers them.

    Pools never go below zero and an empty allocation is left untouched.

    Args:
        account: Account carrying its new balance.
        previous_balance: Balance before the recalculation.

    Returns:
        Account: Account with proportionally reduced pools when needed.
    """
    if not account.pools or account.balance >= previous_balance:
        return account
    allocated = account.allocated_amount
    if allocated <= 0 or allocated <= account.balance:
        return account
    ratio = max(Decimal("0"), account.balance / allocated)
    return scale_pools(account, ratio)


def scale_pools(account: Account, ratio: Decimal) -> Account:
    """Multiply every pool amount of an account by ``ratio``."""
    pools = tuple(
        replace(pool, amount=pool.amount * ratio) for pool in account.pools
    )
    return replace(account, pools=pools)


def compute_net_worth(accounts: Sequence[Account]) -> NetWorthSummary:
    """Compute assets, credit debt, and net worth.

    Args:
        accounts: Accounts with recalculated balances.

    Returns:
        NetWorthSummary: Savings and current balances minus credit balances.
    """
    asset_total = Decimal("0")
    liability_total = Decimal("0")
    for account in accounts:
        if account.type == AccountType.CREDIT:
            liability_total += account.balance
        else:
            asset_total += account.balance
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
    )


__all__ = [
    "resolve_account",
    "transaction_effects",
    "recalculate_balances",
    "shrink_pools",
    "scale_pools",
    "compute_net_worth",
]
