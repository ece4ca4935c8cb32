"""Use case writing the finance state to an export file."""

from datetime import datetime
from pathlib import Path

from finance_tracker.application.ports.data_files import (
    DataFileCodecPort,
    ExportWriterPort,
    FinanceBundle,
)
from finance_tracker.domain.models import FinanceState
from finance_tracker.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class ExportDataUseCase:
    """Encode the finance state as CSV or JSON and write it to disk."""

    def __init__(
        self,
        codecs: list[DataFileCodecPort],
        writer: ExportWriterPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            codecs: Supported file formats, selected by extension.
            writer: Port writing the encoded content.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user operations.
        """
        self._codecs = {codec.extension: codec for codec in codecs}
        self._writer = writer
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        state: FinanceState,
        fmt: str,
        now: datetime | None = None,
    ) -> Path | None:
        """Export every entity list.

        Args:
            state: Finance state to export.
            fmt: File format, ``csv`` or ``json``.
            now: Moment used for the file name timestamp.

        Returns:
            Path | None: Written file, or None when the format is unsupported
            or the file could not be written.
        """
        codec = self._codecs.get(fmt.lower())
        if codec is None:
            self._logger.warning(f"Unsupported export format {fmt!r}")
            return None

        moment = now or datetime.now()
        stamp = int(moment.timestamp())
        file_name = f"finance_export_{stamp}.{codec.extension}"
        bundle = FinanceBundle(
            accounts=list(state.accounts),
            transactions=list(state.transactions),
            categories=state.categories,
            budgets=list(state.budgets),
            preferences=state.preferences,
        )
        try:
            path = self._writer.write(file_name, codec.encode(bundle))
        except OSError as exc:
            self._logger.error(f"Could not write export {file_name}: {exc}")
            return None
        self._usage_logger.info(
            f"Exported {len(state.transactions)} transactions to {path}"
        )
        return path


__all__ = ["ExportDataUseCase"]
