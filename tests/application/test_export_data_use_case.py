"""Tests for the ExportDataUseCase."""

from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

from finance_tracker.application.use_cases.export_data import (
    ExportDataUseCase,
)
from finance_tracker.domain.models import (
    Account,
    AccountType,
    FinanceState,
)
from finance_tracker.infrastructure.codecs.json_codec import (
    JsonDataFileCodec,
)


def _state():
    return FinanceState(
        accounts=[
            Account(
                name="Savings",
                type=AccountType.SAVINGS,
                initial_balance=Decimal("10"),
            )
        ]
    )


def test_execute_writes_timestamped_file():
    """The export is named after the epoch timestamp and format."""
    writer = MagicMock()
    writer.write.return_value = Path("/exports/out.json")
    use_case = ExportDataUseCase(
        codecs=[JsonDataFileCodec(logger=MagicMock())],
        writer=writer,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )
    now = datetime(2024, 3, 1, tzinfo=timezone.utc)

    path = use_case.execute(_state(), "JSON", now)

    assert path == Path("/exports/out.json")
    file_name, content = writer.write.call_args.args
    assert file_name == f"finance_export_{int(now.timestamp())}.json"
    assert '"Savings"' in content


def test_execute_returns_none_for_unsupported_format():
    """Unknown formats are logged and produce no file."""
    writer = MagicMock()
    logger = MagicMock()
    use_case = ExportDataUseCase(
        codecs=[JsonDataFileCodec(logger=MagicMock())],
        writer=writer,
        logger=logger,
        usage_logger=MagicMock(),
    )

    assert use_case.execute(_state(), "xlsx") is None
    writer.write.assert_not_called()
    logger.warning.assert_called_once()


def test_execute_returns_none_when_write_fails():
    """Filesystem errors are logged and reported as None."""
    writer = MagicMock()
    writer.write.side_effect = OSError("disk full")
    logger = MagicMock()
    use_case = ExportDataUseCase(
        codecs=[JsonDataFileCodec(logger=MagicMock())],
        writer=writer,
        logger=logger,
        usage_logger=MagicMock(),
    )

    assert use_case.execute(_state(), "json") is None
    logger.error.assert_called_once()
