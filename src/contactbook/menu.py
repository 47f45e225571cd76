"""Interactive line-based menu over a ContactBook.

States: main menu, list view, search view, record view. The list and search
views are re-rendered from current state every time control returns to them,
so an index typed by the user always refers to what was just printed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from contactbook.core import ContactBook
from contactbook.records.models import (
    Organization,
    Person,
    Record,
    is_valid_birth_date,
    is_valid_gender,
)

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU_PROMPT = "[menu] Enter action (add, list, search, count, exit): "
LIST_PROMPT = "[list] Enter action ([number], back): "
SEARCH_PROMPT = "[search] Enter action ([number], back, again): "
RECORD_PROMPT = "[record] Enter action (edit, delete, menu): "


class View(Enum):
    MAIN = "menu"
    LIST = "list"
    SEARCH = "search"


class Menu:
    """Reads commands from ``reader`` and writes every message to ``writer``."""

    def __init__(self, book: ContactBook, reader: Reader = input, writer: Writer = print) -> None:
        self.book = book
        self._read = reader
        self._write = writer
        self._actions: dict[str, Callable[[], None]] = {
            "add": self.add,
            "list": self.list_view,
            "search": self.search_view,
            "count": self.count,
        }

    def _ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    # ── Main loop ────────────────────────────────────────────

    def run(self) -> int:
        """Run until ``exit`` or end of input. Returns the process exit status."""
        try:
            while True:
                action = self._ask(MENU_PROMPT)
                if action == "exit":
                    break
                handler = self._actions.get(action)
                if handler is None:
                    logger.debug("Unknown menu action %r", action)
                    self._write("Unknown action!")
                else:
                    handler()
                self._write("")
        except (EOFError, KeyboardInterrupt):
            self._write("")
        self.book.save()
        return 0

    # ── add / count ──────────────────────────────────────────

    def add(self) -> None:
        kind = self._ask("Enter the type (person, organization): ")
        if kind == "person":
            record: Record = self._read_person()
        elif kind == "organization":
            record = self._read_organization()
        else:
            self._write("Unknown type!")
            return
        self.book.add(record)
        self._write("The record added.")

    def _read_person(self) -> Person:
        first_name = self._ask("Enter the name: ")
        last_name = self._ask("Enter the surname: ")

        birth_date: str | None = self._ask("Enter the birth date (yyyy-MM-dd): ")
        if not is_valid_birth_date(birth_date):
            self._write("Bad birth date!")
            birth_date = None

        gender: str | None = self._ask("Enter the gender (M, F): ")
        if not is_valid_gender(gender):
            self._write("Bad gender!")
            gender = None

        number = self._ask("Enter the number: ")
        return Person(
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            gender=gender,
            number=number,
        )

    def _read_organization(self) -> Organization:
        name = self._ask("Enter the organization name: ")
        address = self._ask("Enter the address: ")
        number = self._ask("Enter the number: ")
        return Organization(organization_name=name, address=address, number=number)

    def count(self) -> None:
        self._write(f"The Phone Book has {self.book.count()} records.")

    # ── List / search views ──────────────────────────────────

    def _render(self, records: list[Record]) -> None:
        for i, record in enumerate(records, start=1):
            self._write(f"{i}. {record.display_name}")

    def _pick(self, action: str, records: list[Record]) -> Record | None:
        """Resolve a typed index against the rendered list, reporting errors."""
        try:
            index = int(action)
        except ValueError:
            self._write("Invalid action!")
            return None
        if 1 <= index <= len(records):
            return records[index - 1]
        self._write("Invalid index!")
        return None

    def list_view(self) -> None:
        if not self.book.records:
            self._write("No records to list!")
            return
        self._render(self.book.records)

        while True:
            action = self._ask(LIST_PROMPT)
            if action == "back":
                return
            record = self._pick(action, self.book.records)
            if record is None:
                continue
            if self.record_view(record, View.LIST) is View.MAIN:
                return
            if not self.book.records:
                self._write("No records to list!")
                return
            self._write("")
            self._render(self.book.records)

    def search_view(self) -> None:
        while True:
            query = self._ask("Enter search query: ")
            results = self.book.search(query)
            if not results:
                self._write("No results found.")
                return
            self._write(f"Found {len(results)} results:")
            self._render(results)

            if not self._browse_results(query, results):
                return

    def _browse_results(self, query: str, results: list[Record]) -> bool:
        """Drive the search view. True means the user asked to search again."""
        while True:
            action = self._ask(SEARCH_PROMPT)
            if action == "back":
                return False
            if action == "again":
                return True
            record = self._pick(action, results)
            if record is None:
                continue
            if self.record_view(record, View.SEARCH) is View.MAIN:
                return False

            results = self.book.search(query)
            if not results:
                self._write("No results found.")
                return False
            self._write("")
            self._write(f"Found {len(results)} results:")
            self._render(results)

    # ── Record view ──────────────────────────────────────────

    def record_view(self, record: Record, origin: View) -> View:
        """Show one record and run a single action on it.

        Returns ``View.MAIN`` for ``menu``; anything else hands control back
        to ``origin``.
        """
        self._write(record.display_info())
        self._write("")
        action = self._ask(RECORD_PROMPT)

        if action == "menu":
            return View.MAIN
        if action == "edit":
            self.edit(record)
        elif action == "delete":
            if self.book.remove(record):
                self._write("The record removed.")
        else:
            logger.debug("Unknown record action %r", action)
            self._write("Unknown action!")
        return origin

    def edit(self, record: Record) -> None:
        fields = record.editable_fields()
        field_name = self._ask(f"Select a field ({', '.join(fields)}): ")
        if field_name not in fields:
            self._write("Unknown field!")
            return
        value = self._ask(f"Enter {field_name}: ")
        if self.book.edit(record, field_name, value):
            self._write("The record updated!")
        else:
            self._write(record.field_spec(field_name).rejection or "Unknown field!")
