"""Contact records and their persistence.

Layout:
    records/
    ├── models.py     # Record, Person, Organization + per-variant field tables
    ├── codec.py      # Versioned JSON document <-> record list
    └── store.py      # Whole-file load/save with atomic replace

On disk a store is one UTF-8 JSON file; see ``codec`` for its shape.
"""

from contactbook.records.codec import CodecError, decode_records, encode_records
from contactbook.records.models import (
    NO_DATA,
    RECORD_TYPES,
    FieldSpec,
    Organization,
    Person,
    Record,
    format_timestamp,
    is_valid_birth_date,
    is_valid_gender,
)
from contactbook.records.store import RecordStore

__all__ = [
    "NO_DATA",
    "RECORD_TYPES",
    "CodecError",
    "FieldSpec",
    "Organization",
    "Person",
    "Record",
    "RecordStore",
    "decode_records",
    "encode_records",
    "format_timestamp",
    "is_valid_birth_date",
    "is_valid_gender",
]
