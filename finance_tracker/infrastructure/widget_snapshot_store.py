"""SQLAlchemy-backed handoff of the widget snapshot."""

from finance_tracker.application.ports.widget_snapshot import (
    WidgetSnapshotPort,
)
from finance_tracker.domain.models import WidgetSnapshot
from finance_tracker.infrastructure.codecs.json_codec import (
    decode_snapshot,
    encode_snapshot,
)
from finance_tracker.infrastructure.document_store import (
    SqlAlchemyDocumentStore,
)

WIDGET_KEY = "widget_data"


class SqlAlchemyWidgetSnapshotStore(
    SqlAlchemyDocumentStore,
    WidgetSnapshotPort,
):
    """Store the widget snapshot as a separate document.

    The renderer only ever reads this document, never the entity lists.
    """

    def write_snapshot(self, snapshot: WidgetSnapshot) -> None:
        self.write_document(WIDGET_KEY, encode_snapshot(snapshot, exact=True))
        self._logger.debug("Widget snapshot refreshed")

    def read_snapshot(self) -> WidgetSnapshot | None:
        document = self.read_document(WIDGET_KEY)
        if not isinstance(document, dict):
            return None
        try:
            return decode_snapshot(document)
        except (KeyError, TypeError, ValueError) as exc:
            self._logger.warning(f"Widget snapshot is unreadable: {exc!r}")
            return None


__all__ = ["SqlAlchemyWidgetSnapshotStore", "WIDGET_KEY"]
