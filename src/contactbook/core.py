"""ContactBook: the application state shared by the menu and the store.

Responsibilities:
1. Own the ordered record list (insertion order, no sorting, no dedup)
2. Apply add / edit / delete and persist after each of them
3. Answer count, index lookup and substring search
"""

from __future__ import annotations

import logging

from contactbook.records.models import Record
from contactbook.records.store import RecordStore

logger = logging.getLogger(__name__)


class ContactBook:
    """In-memory record collection bound to an optional persistence target."""

    def __init__(self, store: RecordStore, records: list[Record] | None = None) -> None:
        self.store = store
        self.records: list[Record] = records if records is not None else []

    @classmethod
    def open(cls, store: RecordStore) -> ContactBook:
        """Load an existing target, or create an empty one if it is missing."""
        if store.exists():
            return cls(store, store.load())
        store.initialize()
        return cls(store)

    # ── Persistence ──────────────────────────────────────────

    def save(self) -> bool:
        return self.store.save(self.records)

    # ── Queries ──────────────────────────────────────────────

    def count(self) -> int:
        return len(self.records)

    def get(self, index: int) -> Record | None:
        """1-based lookup against the current order."""
        if 1 <= index <= len(self.records):
            return self.records[index - 1]
        return None

    def search(self, query: str) -> list[Record]:
        return [r for r in self.records if r.matches(query)]

    # ── Mutations (each one persists) ────────────────────────

    def add(self, record: Record) -> None:
        self.records.append(record)
        logger.info("Added %s: %s", record.kind, record.display_name)
        self.save()

    def edit(self, record: Record, field_name: str, value: str) -> bool:
        accepted = record.edit_field(field_name, value)
        if accepted:
            self.save()
        return accepted

    def remove(self, record: Record) -> bool:
        """Remove this exact record object, wherever it currently sits."""
        for i, candidate in enumerate(self.records):
            if candidate is record:
                del self.records[i]
                logger.info("Removed %s: %s", record.kind, record.display_name)
                self.save()
                return True
        return False

    def remove_at(self, index: int) -> Record | None:
        record = self.get(index)
        if record is None:
            return None
        self.remove(record)
        return record
