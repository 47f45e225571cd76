"""Versioned JSON encoding of the record list.

Document shape::

    {"format": "contactbook", "version": 1, "records": [
        {"type": "person", "first_name": ..., "created": "2024-01-31T09:05:12.345678", ...},
        {"type": "organization", "organization_name": ..., ...}
    ]}

Timestamps keep full precision so a save/load round trip is exact.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from contactbook.records.models import RECORD_TYPES, Record

FORMAT_TAG = "contactbook"
FORMAT_VERSION = 1


class CodecError(ValueError):
    """The stored document cannot be turned back into records."""


def encode_record(record: Record) -> dict[str, Any]:
    data: dict[str, Any] = {"type": record.kind}
    for spec in record.fields:
        data[spec.attr] = getattr(record, spec.attr)
    data["created"] = record.created.isoformat()
    data["last_edit"] = record.last_edit.isoformat()
    return data


def encode_records(records: list[Record]) -> dict[str, Any]:
    return {
        "format": FORMAT_TAG,
        "version": FORMAT_VERSION,
        "records": [encode_record(r) for r in records],
    }


def _parse_timestamp(data: dict[str, Any], key: str) -> datetime:
    try:
        return datetime.fromisoformat(data[key])
    except KeyError:
        raise CodecError(f"record is missing '{key}'") from None
    except (TypeError, ValueError) as e:
        raise CodecError(f"bad timestamp in '{key}': {data[key]!r}") from e


def decode_record(data: dict[str, Any]) -> Record:
    if not isinstance(data, dict):
        raise CodecError(f"record must be an object, got {type(data).__name__}")
    kind = data.get("type")
    cls = RECORD_TYPES.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise CodecError(f"unknown record type: {kind!r}")

    values: dict[str, Any] = {}
    for spec in cls.fields:
        if spec.attr not in data:
            if spec.optional:
                values[spec.attr] = None
                continue
            raise CodecError(f"{kind} record is missing '{spec.attr}'")
        value = data[spec.attr]
        if not isinstance(value, str) and not (spec.optional and value is None):
            raise CodecError(f"bad value in '{spec.attr}': {value!r}")
        values[spec.attr] = value

    return cls(
        created=_parse_timestamp(data, "created"),
        last_edit=_parse_timestamp(data, "last_edit"),
        **values,
    )


def decode_records(document: Any) -> list[Record]:
    """Rebuild the ordered record list from a decoded JSON document."""
    if not isinstance(document, dict) or document.get("format") != FORMAT_TAG:
        raise CodecError("not a contactbook document")
    version = document.get("version")
    if version != FORMAT_VERSION:
        raise CodecError(f"unsupported format version: {version!r}")
    records = document.get("records")
    if not isinstance(records, list):
        raise CodecError("'records' must be a list")
    return [decode_record(item) for item in records]
