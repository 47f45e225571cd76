"""Configuration loading from environment variables and contactbook.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_EXPORT_DIR = Path.home() / ".contactbook" / "export"
_CONFIG_FILENAME = "contactbook.toml"


@dataclass
class StorageConfig:
    """Where and how the record collection is persisted."""

    path: Path | None = None
    indent: int = 2


@dataclass
class ContactBookConfig:
    """Top-level contact book configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    export_dir: Path = _DEFAULT_EXPORT_DIR
    log_level: str = "WARNING"


def _optional_path(value: str | None) -> Path | None:
    return Path(value).expanduser() if value else None


def load_config(config_path: Path | None = None) -> ContactBookConfig:
    """Load configuration from environment variables and optional contactbook.toml.

    Priority: environment variables > contactbook.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.contactbook/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".contactbook" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    storage_data = file_data.get("storage", {})

    config = ContactBookConfig(
        storage=StorageConfig(
            path=_optional_path(os.getenv("CONTACTBOOK_FILE", storage_data.get("path"))),
            indent=int(os.getenv("CONTACTBOOK_INDENT", storage_data.get("indent", 2))),
        ),
        export_dir=Path(
            os.getenv("CONTACTBOOK_EXPORT_DIR", file_data.get("export_dir", str(_DEFAULT_EXPORT_DIR)))
        ).expanduser(),
        log_level=os.getenv("CONTACTBOOK_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
    return config
