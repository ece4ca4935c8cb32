"""Domain services package."""

from .budgets import (
    budget_matches,
    budget_spent,
    next_period_start,
    period_start,
    reconcile_budgets,
    roll_budget_period,
)
from .ledger import (
    compute_net_worth,
    recalculate_balances,
    resolve_account,
    scale_pools,
    shrink_pools,
    transaction_effects,
)
from .recurrence import generate_occurrences, next_occurrence
from .snapshot import build_widget_snapshot
from .spending import compute_category_spending
from .validation import (
    find_dangling_transactions,
    validate_balance_sign,
    validate_pool_allocation,
)

__all__ = [
    "budget_matches",
    "budget_spent",
    "next_period_start",
    "period_start",
    "reconcile_budgets",
    "roll_budget_period",
    "compute_net_worth",
    "recalculate_balances",
    "resolve_account",
    "scale_pools",
    "shrink_pools",
    "transaction_effects",
    "generate_occurrences",
    "next_occurrence",
    "build_widget_snapshot",
    "compute_category_spending",
    "find_dangling_transactions",
    "validate_balance_sign",
    "validate_pool_allocation",
]
