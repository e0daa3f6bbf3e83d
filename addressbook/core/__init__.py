"""Record model, orderings and errors."""

from .comparators import compare_by_id, compare_by_last_name, sort_by_id, sort_by_last_name
from .errors import (
    CodecError,
    CodecIOError,
    DecodeError,
    EncodeError,
    MalformedInputError,
    SchemaError,
)
from .models import ENTRY_LIST, Address, Entry, Gender, MaritalStatus, Person

__all__ = [
    "ENTRY_LIST",
    "Address",
    "CodecError",
    "CodecIOError",
    "DecodeError",
    "EncodeError",
    "Entry",
    "Gender",
    "MalformedInputError",
    "MaritalStatus",
    "Person",
    "SchemaError",
    "compare_by_id",
    "compare_by_last_name",
    "sort_by_id",
    "sort_by_last_name",
]
