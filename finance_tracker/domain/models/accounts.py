"""Domain models for accounts and their pools."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
import uuid


class AccountType(str, Enum):
    """Kinds of account a user can hold."""

    SAVINGS = "savings"
    CURRENT = "current"
    CREDIT = "credit"


@dataclass(frozen=True)
class Pool:
    """Named earmark on part of an account balance.

    Attributes:
        name: Label shown to the user, e.g. "Bills".
        amount: Allocated amount.
        color: Color tag used by presentation layers.
    """

    name: str
    amount: Decimal
    color: str = "Blue"
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass(frozen=True)
class Account:
    """User account with a derived balance.

    ``balance`` is overwritten on every ledger recalculation and is never a
    source of truth on its own.
    """

    name: str
    type: AccountType
    initial_balance: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")
    pools: tuple[Pool, ...] = ()
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def allocated_amount(self) -> Decimal:
        """Return the sum of pool amounts."""
        return sum((pool.amount for pool in self.pools), Decimal("0"))

    @property
    def unallocated_balance(self) -> Decimal:
        """Return the balance not earmarked by any pool."""
        return self.balance - self.allocated_amount


__all__ = ["AccountType", "Pool", "Account"]
