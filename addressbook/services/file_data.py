"""Plain JSON import/export of entry lists."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Sequence

from ..core import ENTRY_LIST, Entry

logger = logging.getLogger("addressbook.services.file_data")


class FileDataUtil:
    """Reads and writes a pretty-printed JSON array of entries."""

    def __init__(self, file_name: str | Path) -> None:
        self.file_name = Path(file_name)

    def write_data(self, entries: Sequence[Entry]) -> None:
        payload = ENTRY_LIST.dump_json(list(entries), by_alias=True, indent=2)
        self.file_name.write_bytes(payload)
        logger.info("Successfully wrote %d entries to %s", len(entries), self.file_name)
        logger.debug("JSON content: \n%s", payload[:100].decode("utf-8", "replace"))

    def read_data(self) -> list[Entry]:
        entries = ENTRY_LIST.validate_json(self.file_name.read_bytes())
        logger.info("Successfully read %d entries from %s", len(entries), self.file_name)
        return entries

    @staticmethod
    def delete(delete_name: str | Path) -> bool:
        try:
            Path(delete_name).unlink()
        except FileNotFoundError:
            return False
        return True

    @staticmethod
    def copy(from_name: str | Path, to_name: str | Path) -> bool:
        try:
            shutil.copyfile(from_name, to_name)
        except OSError as exc:
            logger.error("Failed to copy file from %s to %s: %s", from_name, to_name, exc)
            return False
        logger.info("Successfully copied file from %s to %s", from_name, to_name)
        return True
