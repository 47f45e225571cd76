"""Whole-collection persistence to a single JSON file.

The file is the source of truth between runs. It is read once at startup and
rewritten in full after every mutation; there is no incremental update.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from contactbook.records.codec import decode_records, encode_records
from contactbook.records.models import Record

logger = logging.getLogger(__name__)


class RecordStore:
    """Load/save the ordered record list. A store without a path is a no-op."""

    def __init__(self, path: Path | None, indent: int = 2) -> None:
        self.path = path
        self.indent = indent

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def exists(self) -> bool:
        return self.path is not None and self.path.exists()

    def initialize(self) -> None:
        """Create an empty store file at the target if none exists yet."""
        if self.path is None or self.path.exists():
            return
        if self.save([]):
            logger.info("Created empty store: %s", self.path)

    def load(self) -> list[Record]:
        """Read the collection. Any failure is logged and yields []."""
        if not self.exists():
            return []
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
            records = decode_records(document)
        except (OSError, ValueError, RecursionError) as e:
            logger.error("Failed to load %s: %s", self.path, e)
            return []
        logger.info("Loaded %d record(s) from %s", len(records), self.path)
        return records

    def save(self, records: list[Record]) -> bool:
        """Overwrite the target with the full collection.

        Returns False when there is no target or the write failed; the
        caller's in-memory list is never touched.
        """
        if self.path is None:
            return False
        payload = json.dumps(encode_records(records), ensure_ascii=False, indent=self.indent)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Failed to save %s: %s", self.path, e)
            if tmp.exists():
                tmp.unlink()
            return False
        logger.debug("Saved %d record(s) to %s", len(records), self.path)
        return True
