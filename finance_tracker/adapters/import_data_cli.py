"""CLI adapter to import a CSV or JSON export into the finance store.

This module wires the ImportDataUseCase to the concrete storage adapters and
provides a simple command-line entry point.
"""

import argparse

from finance_tracker.application.use_cases.import_data import (
    ImportDataUseCase,
)
from finance_tracker.application.use_cases.load_finance_data import (
    LoadFinanceDataUseCase,
)
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.infrastructure.container import (
    build_data_file_codecs,
    build_database_adapter,
    build_finance_store,
    build_widget_snapshot_store,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Import a finance export file (CSV or JSON).",
    )
    parser.add_argument("path", help="Path to the export file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the import use case and print its outcome."""
    args = _parse_args(argv)
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    store = build_finance_store(db_adapter)
    refresh = RefreshLedgerUseCase(
        store=store,
        snapshot_port=build_widget_snapshot_store(db_adapter),
        logger=logger,
    )
    state = LoadFinanceDataUseCase(
        store=store,
        refresh=refresh,
        logger=logger,
    ).execute()
    use_case = ImportDataUseCase(
        store=store,
        refresh=refresh,
        codecs=build_data_file_codecs(),
        logger=logger,
    )

    result = use_case.execute(state, args.path)

    if not result.success:
        print(f"Import failed: {result.message}")
        return 1
    print(result.message)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
