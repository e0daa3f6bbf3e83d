"""Generate random address book entries for codec round-trip tests.

Usage:
    python -m addressbook.services.generate_data [count] [output.json]
"""

from __future__ import annotations

import random
import string
import sys
from typing import List

from ..core import Address, Entry, Gender, MaritalStatus, Person
from ..logging_setup import configure_logging
from .file_data import FileDataUtil

DEFAULT_COUNT = 10_000
DEFAULT_OUTPUT = "test-data.json"
GENDERS = [Gender.MALE, Gender.FEMALE]


class EntryGenerator:
    """Builds entries with sequential ids starting at 1."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._index = 1

    def _alpha(self, length: int) -> str:
        return "".join(self._random.choices(string.ascii_letters, k=length))

    def _numeric(self, length: int) -> str:
        return "".join(self._random.choices(string.digits, k=length))

    def _name(self, length: int) -> str:
        return self._alpha(length).strip().lower().capitalize()

    def create_entry(self) -> Entry:
        entry = Entry(
            entry_id=self._index,
            person=Person(
                first_name=self._name(5),
                last_name=self._name(7),
                age=self._random.randint(10, 89),
                gender=self._random.choice(GENDERS),
                marital_status=MaritalStatus.MARRIED,
            ),
            address=Address(
                street=f"{self._random.randint(100, 9998)} {self._name(7)} street",
                city=self._name(7),
                state=self._alpha(2).upper(),
                zip=self._numeric(5),
                email=f"{self._alpha(7).lower()}@{self._alpha(7).lower()}.com",
                phone=self._numeric(10),
            ),
            notes=f"{self._name(5)} {self._name(6)}",
        )
        self._index += 1
        return entry

    def create_entries(self, count: int) -> List[Entry]:
        return [self.create_entry() for _ in range(count)]


if __name__ == "__main__":
    logger = configure_logging()
    count = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_COUNT
    output_path = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_OUTPUT

    logger.info("##### Begin GenerateData #####")
    # Set random seed for reproducibility
    entries = EntryGenerator(seed=42).create_entries(count)
    FileDataUtil(output_path).write_data(entries)
