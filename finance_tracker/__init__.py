"""Personal finance tracker: ledger, budgets, and import/export."""
