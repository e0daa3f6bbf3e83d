"""Orderings used to sort entries before export."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Optional

from .models import Entry


def compare_by_id(a: Optional[Entry], b: Optional[Entry]) -> int:
    """Ascending by ``entry_id``; ``None`` entries sort last."""

    if a is b:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    return (a.entry_id > b.entry_id) - (a.entry_id < b.entry_id)


def compare_by_last_name(a: Optional[Entry], b: Optional[Entry]) -> int:
    """Ascending by ``person.last_name``; ``None`` entries sort last.

    Entries missing a person or last name compare equal to anything so a
    sort never aborts half way.
    """

    if a is b:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    left = a.person.last_name if a.person is not None else None
    right = b.person.last_name if b.person is not None else None
    if left is None or right is None:
        return 0
    return (left > right) - (left < right)


def sort_by_id(entries: Iterable[Optional[Entry]]) -> list[Optional[Entry]]:
    return sorted(entries, key=cmp_to_key(compare_by_id))


def sort_by_last_name(entries: Iterable[Optional[Entry]]) -> list[Optional[Entry]]:
    return sorted(entries, key=cmp_to_key(compare_by_last_name))
