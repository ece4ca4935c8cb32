"""CLI adapter to export the finance store to a CSV or JSON file."""

import argparse

from finance_tracker.application.use_cases.export_data import (
    ExportDataUseCase,
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
    build_export_writer,
    build_finance_store,
    build_widget_snapshot_store,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export every account, transaction, category and budget.",
    )
    parser.add_argument(
        "format",
        choices=["csv", "json"],
        help="Export file format",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the export use case and print the written path."""
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
    use_case = ExportDataUseCase(
        codecs=build_data_file_codecs(),
        writer=build_export_writer(),
        logger=logger,
    )

    path = use_case.execute(state, args.format)

    if path is None:
        print("Export failed.")
        return 1
    print(f"Exported {len(state.transactions)} transactions to {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
