"""Tests for the ContactBook application state."""

from pathlib import Path

import pytest

from contactbook.core import ContactBook
from contactbook.records.models import Organization, Person
from contactbook.records.store import RecordStore


def _person(first: str, last: str = "Doe") -> Person:
    return Person(first_name=first, last_name=last, number="555")


@pytest.fixture
def store(tmp_path: Path) -> RecordStore:
    return RecordStore(tmp_path / "book.json")


@pytest.fixture
def book(store: RecordStore) -> ContactBook:
    return ContactBook.open(store)


class TestOpen:
    def test_creates_missing_target(self, store: RecordStore):
        book = ContactBook.open(store)
        assert store.path.exists()
        assert book.count() == 0

    def test_loads_existing(self, store: RecordStore):
        store.save([_person("Ann"), Organization(organization_name="Acme", address="x", number="1")])
        book = ContactBook.open(store)
        assert book.count() == 2
        assert book.get(2).display_name == "Acme"

    def test_without_target(self):
        book = ContactBook.open(RecordStore(None))
        book.add(_person("Ann"))
        assert book.count() == 1


class TestMutationsPersist:
    def test_add(self, book: ContactBook, store: RecordStore):
        book.add(_person("Ann"))
        assert [r.display_name for r in store.load()] == ["Ann Doe"]

    def test_edit(self, book: ContactBook, store: RecordStore):
        p = _person("Ann")
        book.add(p)
        assert book.edit(p, "surname", "Park") is True
        assert store.load()[0].last_name == "Park"

    def test_rejected_edit(self, book: ContactBook):
        p = _person("Ann")
        book.add(p)
        assert book.edit(p, "gender", "X") is False
        assert book.edit(p, "nickname", "A") is False
        assert p.gender is None

    def test_remove_at_preserves_order(self, book: ContactBook, store: RecordStore):
        for name in ["A", "B", "C", "D"]:
            book.add(_person(name))
        removed = book.remove_at(2)
        assert removed.first_name == "B"
        assert [r.first_name for r in book.records] == ["A", "C", "D"]
        assert [r.first_name for r in store.load()] == ["A", "C", "D"]

    def test_remove_at_out_of_range(self, book: ContactBook):
        book.add(_person("A"))
        assert book.remove_at(0) is None
        assert book.remove_at(2) is None
        assert book.count() == 1

    def test_remove_by_identity(self, book: ContactBook):
        twin_a, twin_b = _person("Sam"), _person("Sam")
        book.add(twin_a)
        book.add(twin_b)
        assert book.remove(twin_b) is True
        assert book.records == [twin_a]
        assert book.records[0] is twin_a
        assert book.remove(twin_b) is False


class TestQueries:
    def test_get_is_one_based(self, book: ContactBook):
        book.add(_person("A"))
        assert book.get(1).first_name == "A"
        assert book.get(0) is None
        assert book.get(2) is None

    def test_search(self, book: ContactBook):
        book.add(_person("Ann", "Lee"))
        book.add(_person("Bob", "Jones"))
        book.add(Organization(organization_name="Annex Ltd", address="x", number="1"))
        assert [r.display_name for r in book.search("ann")] == ["Ann Lee", "Annex Ltd"]
        assert book.search("zzz") == []

    def test_insertion_order_no_dedup(self, book: ContactBook):
        book.add(_person("Zed"))
        book.add(_person("Amy"))
        book.add(_person("Zed"))
        assert [r.first_name for r in book.records] == ["Zed", "Amy", "Zed"]
