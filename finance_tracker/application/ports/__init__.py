"""Application ports package."""

from .data_files import (
    DataFileCodecPort,
    DataFileError,
    ExportWriterPort,
    FinanceBundle,
)
from .database import DatabaseEnginePort
from .finance_store import FinanceStorePort
from .widget_snapshot import WidgetSnapshotPort

__all__ = [
    "DataFileCodecPort",
    "DataFileError",
    "ExportWriterPort",
    "FinanceBundle",
    "DatabaseEnginePort",
    "FinanceStorePort",
    "WidgetSnapshotPort",
]
