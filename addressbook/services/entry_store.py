"""MongoDB entry collection stub used by the REST layer."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List, Optional

from ..core import Entry, sort_by_id

logger = logging.getLogger("addressbook.services.entry_store")


class EntryStore:
    """In-memory stub mimicking the MongoDB entries collection."""

    def __init__(self, uri: str, database: str, collection: str) -> None:
        self.uri = uri
        self.database = database
        self.collection = collection
        self._entries: Dict[int, Entry] = {}

    async def connect(self) -> None:
        """Open the stub entries collection."""

        logger.info(
            "[stub] Entries collection %s.%s ready (%d entries, uri=%s)",
            self.database,
            self.collection,
            len(self._entries),
            self.uri,
        )
        await asyncio.sleep(0)

    async def find_all(self) -> List[Entry]:
        return sort_by_id(self._entries.values())

    async def find_by_id(self, entry_id: int) -> Optional[Entry]:
        return self._entries.get(entry_id)

    async def insert(self, entry: Entry) -> None:
        self._entries[entry.entry_id] = entry
        logger.info("[stub] Stored entry %d", entry.entry_id)

    async def delete(self, entry_id: int) -> bool:
        removed = self._entries.pop(entry_id, None) is not None
        logger.info("[stub] Delete entry %d removed=%s", entry_id, removed)
        return removed

    async def replace_all(self, entries: Iterable[Entry]) -> int:
        self._entries = {entry.entry_id: entry for entry in entries}
        logger.info("[stub] Replaced collection with %d entries", len(self._entries))
        return len(self._entries)


class NextEntryId:
    """Hands out ids above the highest id currently stored."""

    def __init__(self, max_id: int = 0) -> None:
        self._max_id = max_id
        self._lock = asyncio.Lock()

    @classmethod
    async def load(cls, store: EntryStore) -> "NextEntryId":
        entries = await store.find_all()
        max_id = entries[-1].entry_id if entries else 0
        return cls(max_id)

    async def next(self) -> int:
        async with self._lock:
            self._max_id += 1
            return self._max_id

    def observe(self, entry_id: int) -> None:
        if entry_id > self._max_id:
            self._max_id = entry_id
