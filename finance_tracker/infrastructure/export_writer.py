"""Filesystem adapter for export files."""

from pathlib import Path

from finance_tracker.application.ports.data_files import ExportWriterPort


class FileSystemExportWriter(ExportWriterPort):
    """Write export files into a directory, creating it when missing."""

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    def write(self, file_name: str, content: str) -> Path:
        """Write the content and return the created path."""
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / file_name
        path.write_text(content, encoding="utf-8")
        return path


__all__ = ["FileSystemExportWriter"]
