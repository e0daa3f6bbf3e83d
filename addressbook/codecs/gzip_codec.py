"""Compressed text codec: a gzip-compressed JSON array of entries.

The whole file is decompressed into memory and parsed in one go, so this
codec is bounded by available memory.
"""

from __future__ import annotations

import gzip
import zlib
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from ..core import ENTRY_LIST, DecodeError, Entry
from .base import EntryCodec


class GzipCodec(EntryCodec):
    name = "gz"
    extension = "gz"

    def write_entries(self, entries: Sequence[Entry], output_file: str | Path) -> None:
        path = Path(output_file)
        payload = ENTRY_LIST.dump_json(list(entries), by_alias=True)
        with self._io_errors("write", path):
            with gzip.open(path, "wb") as fo:
                fo.write(payload)
        self.logger.info(
            "Successfully wrote %d entries to gzip file: %s", len(entries), path
        )

    def read_entries(self, input_file: str | Path) -> list[Entry]:
        path = Path(input_file)
        with self._io_errors("read", path):
            try:
                with gzip.open(path, "rb") as fi:
                    payload = fi.read()
            except (EOFError, zlib.error) as exc:
                raise DecodeError(f"Truncated or corrupt gzip file: {path}") from exc

        entries: list[Entry] = []
        if payload.strip():
            try:
                entries = ENTRY_LIST.validate_json(payload)
            except ValidationError as exc:
                raise DecodeError(f"Cannot map gzip JSON to entries: {path}") from exc
        self.logger.info(
            "Successfully read %d entries from gzip file: %s", len(entries), path
        )
        return entries
