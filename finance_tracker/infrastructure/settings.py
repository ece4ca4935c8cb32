"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.utils.utils import get_project_root


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for file-based adapters.

    Attributes:
        export_dir: Directory receiving export files.
    """

    export_dir: Path

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        raw_export_dir = os.getenv("FINANCE_EXPORT_DIR", "").strip()
        if raw_export_dir:
            export_dir = Path(raw_export_dir).expanduser().resolve()
        else:
            export_dir = get_project_root() / "exports"
        if export_dir.exists() and not export_dir.is_dir():
            get_app_logger().warning(
                f"Export path {export_dir} exists and is not a directory"
            )
        return cls(export_dir=export_dir)


__all__ = ["FinanceSettings"]
