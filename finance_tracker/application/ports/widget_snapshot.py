"""Port for the widget snapshot handoff."""

from typing import Protocol

from finance_tracker.domain.models import WidgetSnapshot


class WidgetSnapshotPort(Protocol):
    """Port exposing the shared storage read by the widget renderer."""

    def write_snapshot(self, snapshot: WidgetSnapshot) -> None:
        """Replace the stored snapshot."""

    def read_snapshot(self) -> WidgetSnapshot | None:
        """Return the latest snapshot, if one was written."""


__all__ = ["WidgetSnapshotPort"]
