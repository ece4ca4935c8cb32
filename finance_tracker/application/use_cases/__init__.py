"""Application use cases package."""

from .refresh_ledger import RefreshLedgerUseCase, RefreshLedgerResult
from .load_finance_data import LoadFinanceDataUseCase
from .manage_transactions import ManageTransactionsUseCase
from .manage_budgets import ManageBudgetsUseCase
from .manage_accounts import ManageAccountsUseCase
from .manage_categories import ManageCategoriesUseCase
from .import_data import ImportDataUseCase, ImportResult
from .export_data import ExportDataUseCase

__all__ = [
    "RefreshLedgerUseCase",
    "RefreshLedgerResult",
    "LoadFinanceDataUseCase",
    "ManageTransactionsUseCase",
    "ManageBudgetsUseCase",
    "ManageAccountsUseCase",
    "ManageCategoriesUseCase",
    "ImportDataUseCase",
    "ImportResult",
    "ExportDataUseCase",
]
