"""Tests for the python -m contactbook entry point."""

import io
from pathlib import Path

import pytest

from contactbook.__main__ import main
from contactbook.records.store import RecordStore


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in ["CONTACTBOOK_FILE", "CONTACTBOOK_LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)


def _feed(monkeypatch, *lines: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))


class TestMain:
    def test_session_with_new_file(self, tmp_path: Path, monkeypatch, capsys):
        target = tmp_path / "book.json"
        _feed(monkeypatch, "add", "organization", "Acme", "1 Main St", "555", "count", "exit")
        with pytest.raises(SystemExit) as exc:
            main([str(target)])
        assert exc.value.code == 0
        assert "The Phone Book has 1 records." in capsys.readouterr().out
        assert RecordStore(target).load()[0].display_name == "Acme"

    def test_existing_file_is_loaded(self, tmp_path: Path, monkeypatch, capsys):
        target = tmp_path / "book.json"
        _feed(monkeypatch, "add", "organization", "Acme", "x", "1", "exit")
        with pytest.raises(SystemExit):
            main([str(target)])
        capsys.readouterr()

        _feed(monkeypatch, "count", "exit")
        with pytest.raises(SystemExit):
            main([str(target)])
        assert "The Phone Book has 1 records." in capsys.readouterr().out

    def test_no_file_persists_nothing(self, tmp_path: Path, monkeypatch):
        _feed(monkeypatch, "add", "organization", "Acme", "x", "1", "exit")
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 0
        assert list(tmp_path.glob("*.json")) == []

    def test_too_many_args(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["a.json", "b.json"])
        assert exc.value.code == 1
        assert "Usage" in capsys.readouterr().out

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
