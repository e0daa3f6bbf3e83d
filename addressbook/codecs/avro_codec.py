"""Schema binary codec: entries concatenated as schemaless Avro records.

The file carries no header and no per-record framing. Writer and reader
agree on the entry schema; the reader decodes records back to back until
the input is exhausted.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Any, Optional, Sequence

from fastavro import schemaless_reader, schemaless_writer
from fastavro.validation import validate

from ..core import DecodeError, EncodeError, Entry
from .base import EntryCodec
from .schema import EntrySchema, load_entry_schema


class AvroCodec(EntryCodec):
    """Reads and writes entries as schema-driven Avro binary."""

    name = "avro"
    extension = "avro"

    def __init__(
        self,
        schema: EntrySchema | None = None,
        data_dir: str | Path | None = None,
    ) -> None:
        super().__init__(data_dir)
        self.schema = schema if schema is not None else load_entry_schema()

    def to_record(self, entry: Entry) -> dict[str, Any]:
        return entry.to_document()

    def from_record(self, record: dict[str, Any]) -> Entry:
        return self._to_entry(record)

    def write_entries(self, entries: Sequence[Entry], output_file: str | Path) -> None:
        path = Path(output_file)
        with self._io_errors("write", path):
            with open(path, "wb") as fo:
                for entry in entries:
                    self._write_record(fo, self.to_record(entry))
        self.logger.info(
            "Successfully wrote %d entries to %s file: %s", len(entries), self.name, path
        )

    def read_entries(self, input_file: str | Path) -> list[Entry]:
        path = Path(input_file)
        entries: list[Entry] = []
        with self._io_errors("read", path):
            with open(path, "rb") as fo:
                end = os.fstat(fo.fileno()).st_size
                while True:
                    record = self._next_record(fo, end)
                    if record is None:
                        break
                    entries.append(self.from_record(record))
        self.logger.info(
            "Successfully read %d entries from %s file: %s", len(entries), self.name, path
        )
        return entries

    def _write_record(self, fo: IO[bytes], record: dict[str, Any]) -> None:
        # Python ints are unbounded; the schema's "int" fields are 32-bit.
        if not validate(record, self.schema.parsed, raise_errors=False):
            raise EncodeError(
                f"Entry {record.get('entryId')} does not match the entry schema"
            )
        try:
            schemaless_writer(fo, self.schema.parsed, record)
        except (TypeError, ValueError) as exc:
            raise EncodeError(
                f"Entry {record.get('entryId')} does not match the entry schema"
            ) from exc

    def _next_record(self, fo: IO[bytes], end: int) -> Optional[dict[str, Any]]:
        """Decode the record at the cursor, or return ``None`` once input is exhausted."""

        offset = fo.tell()
        if offset >= end:
            return None
        try:
            return schemaless_reader(fo, self.schema.parsed, None)
        except (EOFError, ValueError, IndexError) as exc:
            raise DecodeError(
                f"Truncated or corrupt {self.name} record at offset {offset}"
            ) from exc
