"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from finance_tracker.domain.models import Account, AccountType, Transaction


def validate_pool_allocation(account: Account, logger: Logger) -> None:
    """Warn when pools earmark more than the account holds.

    Args:
        account: Account with recalculated balance.
        logger: Logger used for warnings.
    """
    if account.pools and account.allocated_amount > account.balance:
        logger.warning(
            f"Pools of account {account.name!r} exceed its balance: "
            f"{account.allocated_amount} > {account.balance}"
        )


def validate_balance_sign(account: Account, logger: Logger) -> None:
    """Warn when balances violate expected sign conventions.

    Args:
        account: Account with recalculated balance.
        logger: Logger used for warnings.
    """
    if account.type != AccountType.CREDIT and account.balance < 0:
        logger.warning(
            f"Balance is negative for {account.type.value} account "
            f"{account.name!r}: {account.balance}"
        )


def find_dangling_transactions(
    transactions: Iterable[Transaction],
    accounts: Iterable[Account],
) -> list[Transaction]:
    """Return transactions whose account ids match no known account.

    Transactions without ids are ignored: they resolve by account type.
    """
    known = {account.id for account in accounts}
    dangling = []
    for transaction in transactions:
        referenced = [
            account_id
            for account_id in (
                transaction.from_account_id,
                transaction.to_account_id,
            )
            if account_id is not None
        ]
        if any(account_id not in known for account_id in referenced):
            dangling.append(transaction)
    return dangling


__all__ = [
    "validate_pool_allocation",
    "validate_balance_sign",
    "find_dangling_transactions",
]
