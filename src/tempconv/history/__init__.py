"""Bounded conversion history and its storage backends."""

from tempconv.history.backends import JsonFileStore, KeyringStore, KeyValueStore, MemoryStore
from tempconv.history.store import HISTORY_KEY, MAX_HISTORY, HistoryStore

__all__ = [
    "HISTORY_KEY",
    "MAX_HISTORY",
    "HistoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "KeyringStore",
    "MemoryStore",
]
