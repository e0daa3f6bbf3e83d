"""Collaborators around the codecs: the entry store and JSON files."""

from .entry_store import EntryStore, NextEntryId
from .file_data import FileDataUtil

__all__ = ["EntryStore", "FileDataUtil", "NextEntryId"]
