"""Contract shared by every entry codec."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from pydantic import ValidationError

from .. import config
from ..core import ENTRY_LIST, CodecIOError, DecodeError, Entry, MalformedInputError

OUTPUT_PREFIX = "output-data"
INPUT_PREFIX = "input-data"


class EntryCodec(ABC):
    """Writes a list of entries to a file and reads it back.

    Implementations hold no per-call state; concurrent calls against
    different paths are independent.
    """

    name: str = ""
    extension: str = ""

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
        self.logger = logging.getLogger(f"addressbook.codecs.{self.name}")

    @property
    def default_output_file(self) -> Path:
        return self.data_dir / f"{OUTPUT_PREFIX}.{self.extension}"

    @property
    def default_input_file(self) -> Path:
        return self.data_dir / f"{INPUT_PREFIX}.{self.extension}"

    @abstractmethod
    def write_entries(self, entries: Sequence[Entry], output_file: str | Path) -> None:
        """Serialize ``entries`` to ``output_file``, replacing it."""

    @abstractmethod
    def read_entries(self, input_file: str | Path) -> list[Entry]:
        """Deserialize every entry stored in ``input_file``."""

    def write_string(self, json_text: str | bytes) -> Path:
        """Parse a JSON array of entries and write it to the default output file.

        Malformed JSON is reported before any file is touched.
        """

        self.logger.debug("Writing JSON string to %s format", self.name)
        try:
            entries = ENTRY_LIST.validate_json(json_text)
        except ValidationError as exc:
            self.logger.error("Failed to parse JSON entries for %s format", self.name)
            raise MalformedInputError(
                f"Failed to write JSON string to {self.name} format"
            ) from exc

        if not entries:
            self.logger.warning("No entries found in JSON string")

        output_file = self.default_output_file
        self.write_entries(entries, output_file)
        return output_file

    @contextmanager
    def _io_errors(self, action: str, path: Path) -> Iterator[None]:
        """Convert OS level failures into ``CodecIOError``."""

        try:
            yield
        except OSError as exc:
            self.logger.error(
                "Failed to %s %s file: %s", action, self.name, path, exc_info=True
            )
            raise CodecIOError(f"Failed to {action} {self.name} file: {path}") from exc

    def _to_entry(self, document: dict) -> Entry:
        try:
            return Entry.from_document(document)
        except ValidationError as exc:
            raise DecodeError(f"Cannot map {self.name} record to an entry: {exc}") from exc
