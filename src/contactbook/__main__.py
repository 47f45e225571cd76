"""Entry point: python -m contactbook [FILE]

- FILE given:   load it if it exists, otherwise create an empty store there
- no FILE:      use [storage] path from config; if unset, nothing is persisted
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from contactbook.config import load_config

USAGE = """\
Usage: python -m contactbook [FILE]
  FILE    contact store to load and save (created if missing)"""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)
    if len(args) > 1:
        print(USAGE)
        sys.exit(1)

    config = load_config()
    _setup_logging(config.log_level)

    from contactbook.core import ContactBook
    from contactbook.menu import Menu
    from contactbook.records.store import RecordStore

    path = Path(args[0]) if args else config.storage.path
    store = RecordStore(path, indent=config.storage.indent)
    book = ContactBook.open(store)

    sys.exit(Menu(book).run())


if __name__ == "__main__":
    main()
