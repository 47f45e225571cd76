"""Contact records: a tagged variant over Person and Organization.

Each variant carries an ordered table of ``FieldSpec`` entries keyed by the
user-facing field name. Generic get/edit/search go through that table, so the
menu never needs to know which variant it is holding.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, ClassVar

logger = logging.getLogger(__name__)

NO_DATA = "[no data]"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"
GENDERS = ("M", "F")
_BIRTH_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _now() -> datetime:
    return datetime.now()


def format_timestamp(ts: datetime) -> str:
    """Minute precision, no seconds or zone: ``2024-01-31T09:05``."""
    return ts.strftime(TIMESTAMP_FORMAT)


def is_valid_birth_date(value: str | None) -> bool:
    """True for a real calendar date written exactly as yyyy-MM-dd."""
    if not value or not _BIRTH_DATE_RE.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_gender(value: str | None) -> bool:
    return value in GENDERS


@dataclass(frozen=True)
class FieldSpec:
    """One editable field of a record variant."""

    name: str
    attr: str
    label: str
    validator: Callable[[str | None], bool] | None = None
    rejection: str = ""
    optional: bool = False


@dataclass(kw_only=True)
class Record(ABC):
    """Common part of every contact: phone number and timestamps."""

    kind: ClassVar[str] = ""
    fields: ClassVar[tuple[FieldSpec, ...]] = ()

    number: str = ""
    created: datetime = field(default_factory=_now)
    last_edit: datetime | None = None

    def __post_init__(self) -> None:
        if self.last_edit is None:
            self.last_edit = self.created

    # ── Field table ──────────────────────────────────────────

    @classmethod
    def field_spec(cls, name: str) -> FieldSpec | None:
        for spec in cls.fields:
            if spec.name == name:
                return spec
        return None

    def editable_fields(self) -> list[str]:
        return [spec.name for spec in self.fields]

    def get_field_value(self, name: str) -> str | None:
        """Current value of a field, or None for an unknown name."""
        spec = self.field_spec(name)
        if spec is None:
            return None
        return getattr(self, spec.attr)

    def edit_field(self, name: str, value: str) -> bool:
        """Write a field by name. Returns False if nothing changed.

        Unknown names and values rejected by the field's validator are
        logged and leave the record untouched, last-edit time included.
        """
        spec = self.field_spec(name)
        if spec is None:
            logger.warning("Unknown field %r for %s", name, self.kind)
            return False
        if spec.validator is not None and not spec.validator(value):
            logger.warning("Rejected %s value %r", spec.name, value)
            return False
        setattr(self, spec.attr, value)
        self.touch()
        return True

    def edit_number(self, value: str) -> None:
        self.number = value
        self.touch()

    def touch(self) -> None:
        self.last_edit = _now()

    # ── Search & display ─────────────────────────────────────

    def matches(self, query: str) -> bool:
        q = query.lower()
        for name in self.editable_fields():
            value = self.get_field_value(name)
            if value and q in value.lower():
                return True
        return False

    @property
    @abstractmethod
    def display_name(self) -> str: ...

    def display_info(self) -> str:
        lines = []
        for spec in self.fields:
            value = getattr(self, spec.attr)
            if spec.optional and not value:
                value = NO_DATA
            lines.append(f"{spec.label}: {value}")
        lines.append(f"Time created: {format_timestamp(self.created)}")
        lines.append(f"Time last edit: {format_timestamp(self.last_edit)}")
        return "\n".join(lines)


@dataclass(kw_only=True)
class Person(Record):
    kind: ClassVar[str] = "person"
    fields: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("name", "first_name", "Name"),
        FieldSpec("surname", "last_name", "Surname"),
        FieldSpec(
            "birth",
            "birth_date",
            "Birth date",
            validator=is_valid_birth_date,
            rejection="Bad birth date!",
            optional=True,
        ),
        FieldSpec(
            "gender",
            "gender",
            "Gender",
            validator=is_valid_gender,
            rejection="Bad gender!",
            optional=True,
        ),
        FieldSpec("number", "number", "Number"),
    )

    first_name: str = ""
    last_name: str = ""
    birth_date: str | None = None
    gender: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        # Invalid optional values are dropped on construction, not raised.
        if self.birth_date is not None and not is_valid_birth_date(self.birth_date):
            logger.warning("Dropping bad birth date %r", self.birth_date)
            self.birth_date = None
        if self.gender is not None and not is_valid_gender(self.gender):
            logger.warning("Dropping bad gender %r", self.gender)
            self.gender = None

    def set_birth_date(self, value: str) -> bool:
        return self.edit_field("birth", value)

    def set_gender(self, value: str) -> bool:
        return self.edit_field("gender", value)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(kw_only=True)
class Organization(Record):
    kind: ClassVar[str] = "organization"
    fields: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("organization name", "organization_name", "Organization name"),
        FieldSpec("address", "address", "Address"),
        FieldSpec("number", "number", "Number"),
    )

    organization_name: str = ""
    address: str = ""

    @property
    def display_name(self) -> str:
        return self.organization_name


RECORD_TYPES: dict[str, type[Record]] = {
    Person.kind: Person,
    Organization.kind: Organization,
}
