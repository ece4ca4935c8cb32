"""Composition root for wiring infrastructure adapters."""

from finance_tracker.application.ports.data_files import (
    DataFileCodecPort,
    ExportWriterPort,
)
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.application.ports.widget_snapshot import (
    WidgetSnapshotPort,
)
from finance_tracker.infrastructure.codecs.csv_codec import CsvDataFileCodec
from finance_tracker.infrastructure.codecs.json_codec import (
    JsonDataFileCodec,
)
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.export_writer import (
    FileSystemExportWriter,
)
from finance_tracker.infrastructure.finance_store import (
    SqlAlchemyFinanceStore,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings
from finance_tracker.infrastructure.widget_snapshot_store import (
    SqlAlchemyWidgetSnapshotStore,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_store(
    db_port: DatabaseEnginePort | None = None,
) -> FinanceStorePort:
    """Return the SQLAlchemy finance store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceStore(resolved_db, logger=get_app_logger())


def build_widget_snapshot_store(
    db_port: DatabaseEnginePort | None = None,
) -> WidgetSnapshotPort:
    """Return the store shared with the widget renderer."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyWidgetSnapshotStore(resolved_db, logger=get_app_logger())


def build_data_file_codecs() -> list[DataFileCodecPort]:
    """Return the supported import/export formats."""
    logger = get_app_logger()
    return [CsvDataFileCodec(logger=logger), JsonDataFileCodec(logger=logger)]


def build_export_writer(
    settings: FinanceSettings | None = None,
) -> ExportWriterPort:
    """Return the writer targeting the configured export directory."""
    resolved_settings = settings or FinanceSettings.from_env()
    return FileSystemExportWriter(resolved_settings.export_dir)


__all__ = [
    "build_database_adapter",
    "build_finance_store",
    "build_widget_snapshot_store",
    "build_data_file_codecs",
    "build_export_writer",
]
