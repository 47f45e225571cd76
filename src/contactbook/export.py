"""Export a contact store as Markdown cards.

Usage:
    python -m contactbook.export FILE [DIR]

Writes one card per record to DIR/people/ and DIR/organizations/. Each card
carries the record's fields as YAML frontmatter and its display block as the
body. Re-exporting into the same DIR overwrites cards whose frontmatter name
matches instead of piling up duplicates.
"""

from __future__ import annotations

import glob
import logging
import re
import sys
from pathlib import Path

import frontmatter

from contactbook.records.models import Record

logger = logging.getLogger(__name__)

TYPE_DIRS = {"person": "people", "organization": "organizations"}


def _slugify(name: str) -> str:
    """Minimal slug: strip illegal chars, spaces to hyphens, keep non-ASCII."""
    slug = re.sub(r'[<>:"/\\|?*\n\r\t]', "", name)
    slug = slug.strip().replace(" ", "-")
    return slug or "unnamed"


def _card_name(path: Path) -> str | None:
    try:
        return frontmatter.load(str(path)).metadata.get("name")
    except Exception:
        return None


def render_card(record: Record) -> str:
    metadata: dict = {"type": record.kind, "name": record.display_name}
    for spec in record.fields:
        metadata[spec.attr] = getattr(record, spec.attr)
    metadata["created"] = record.created.isoformat(timespec="seconds")
    metadata["updated"] = record.last_edit.isoformat(timespec="seconds")

    body = f"# {record.display_name}\n\n{record.display_info()}\n"
    return frontmatter.dumps(frontmatter.Post(body, **metadata)) + "\n"


def _resolve_path(record: Record, root: Path, taken: set[Path]) -> Path:
    """Reuse a card with the same name from an earlier export, else a fresh slug."""
    type_dir = root / TYPE_DIRS[record.kind]
    type_dir.mkdir(parents=True, exist_ok=True)
    slug = _slugify(record.display_name)

    for existing in sorted(type_dir.glob(f"{glob.escape(slug)}*.md")):
        if existing not in taken and _card_name(existing) == record.display_name:
            return existing

    path = type_dir / f"{slug}.md"
    counter = 2
    while path.exists() or path in taken:
        path = type_dir / f"{slug}-{counter}.md"
        counter += 1
    return path


def export_cards(records: list[Record], root: Path) -> list[Path]:
    """Write every record as a card under ``root``; returns the paths in record order."""
    written: list[Path] = []
    taken: set[Path] = set()
    for record in records:
        path = _resolve_path(record, root, taken)
        path.write_text(render_card(record), encoding="utf-8")
        taken.add(path)
        written.append(path)
    logger.info("Exported %d card(s) to %s", len(written), root)
    return written


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if not 1 <= len(args) <= 2:
        print("Usage: python -m contactbook.export FILE [DIR]")
        sys.exit(1)

    from contactbook.config import load_config
    from contactbook.records.store import RecordStore

    config = load_config()
    source = Path(args[0])
    target = Path(args[1]) if len(args) == 2 else config.export_dir

    store = RecordStore(source)
    if not store.exists():
        print(f"No such contact store: {source}", file=sys.stderr)
        sys.exit(1)

    paths = export_cards(store.load(), target)
    print(f"Exported {len(paths)} card(s) to {target}")


if __name__ == "__main__":
    main()
