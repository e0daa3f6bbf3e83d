"""Self-describing document codec: one BSON document per entry.

Each document starts with its own total length (unsigned 32-bit, little
endian) and documents are concatenated with no other framing. Null string
fields are stored as BSON null so they survive a round trip.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Any, Iterator, Sequence

import bson
from bson.errors import BSONError

from ..core import DecodeError, EncodeError, Entry
from .base import EntryCodec

_LENGTH = struct.Struct("<I")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class BsonCodec(EntryCodec):
    """Reads and writes entries as concatenated BSON documents."""

    name = "bson"
    extension = "bson"

    def write_entries(self, entries: Sequence[Entry], output_file: str | Path) -> None:
        path = Path(output_file)
        with self._io_errors("write", path):
            with open(path, "wb") as fo:
                for entry in entries:
                    fo.write(self.encode_entry(entry))
        self.logger.info(
            "Successfully wrote %d entries to BSON binary file: %s", len(entries), path
        )

    def read_entries(self, input_file: str | Path) -> list[Entry]:
        path = Path(input_file)
        with self._io_errors("read", path):
            with open(path, "rb") as fo:
                buffer = fo.read()
        entries = [self.decode_document(document) for document in self.iter_documents(buffer)]
        self.logger.info(
            "Successfully read %d entries from BSON binary file: %s", len(entries), path
        )
        return entries

    def iter_documents(self, buffer: bytes) -> Iterator[bytes]:
        """Yield each complete length-prefixed document in ``buffer``.

        Scanning stops quietly at the first length prefix that is zero or
        runs past the end of the buffer; the remainder is treated as
        unreadable trailing data.
        """

        offset = 0
        while len(buffer) - offset >= _LENGTH.size:
            (size,) = _LENGTH.unpack_from(buffer, offset)
            if size <= 0 or offset + size > len(buffer):
                self.logger.warning(
                    "Invalid BSON document size %d at offset %d", size, offset
                )
                break
            yield buffer[offset : offset + size]
            offset += size

    def encode_entry(self, entry: Entry) -> bytes:
        document = entry.to_document()
        _require_int32(document, "entryId", entry.entry_id)
        _require_int32(document["person"], "age", entry.entry_id)
        return bson.encode(document)

    def decode_document(self, data: bytes) -> Entry:
        try:
            document = bson.decode(data)
        except BSONError as exc:
            raise DecodeError("Error decoding BSON entry") from exc

        person = document.get("person")
        if not isinstance(person, dict) or not isinstance(document.get("address"), dict):
            raise DecodeError("BSON entry is missing its person or address document")
        _check_int(document, "entryId")
        _check_int(person, "age")
        for key in ("gender", "maritalStatus"):
            if person.get(key) == "":
                person[key] = None
        return self._to_entry(document)


def _require_int32(document: dict[str, Any], key: str, entry_id: int) -> None:
    value = document.get(key)
    if value is None:
        raise EncodeError(f"Entry {entry_id}: {key} is required in a BSON document")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise EncodeError(f"Entry {entry_id}: {key}={value} does not fit in int32")


def _check_int(document: dict[str, Any], key: str) -> None:
    value = document.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise DecodeError(f"BSON entry field {key!r} must be an int32, got {value!r}")
