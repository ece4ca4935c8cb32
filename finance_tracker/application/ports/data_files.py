"""Ports for reading and writing finance export files."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from finance_tracker.domain.models import (
    Account,
    Budget,
    Category,
    Transaction,
    UserPreferences,
)


@dataclass
class FinanceBundle:
    """Entity lists decoded from, or encoded to, an export file.

    Attributes:
        skipped_rows: Number of records dropped because they failed to parse.
    """

    accounts: list[Account] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    preferences: UserPreferences | None = None
    skipped_rows: int = 0


class DataFileCodecPort(Protocol):
    """Port exposing one export file format."""

    extension: str
    keeps_time_of_day: bool

    def decode(self, text: str) -> FinanceBundle:
        """Decode file content into entity lists."""

    def encode(self, bundle: FinanceBundle) -> str:
        """Encode entity lists into file content."""


class DataFileError(Exception):
    """Raised when an import file cannot be read or decoded."""


class ExportWriterPort(Protocol):
    """Port writing export content to durable files."""

    def write(self, file_name: str, content: str) -> Path:
        """Write the content and return the created path."""


__all__ = [
    "FinanceBundle",
    "DataFileCodecPort",
    "DataFileError",
    "ExportWriterPort",
]
