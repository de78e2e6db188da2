"""Bounded, persisted conversion history.

:class:`HistoryStore` owns the newest-first log of
:class:`~tempconv.models.history.HistoryRecord` entries.  Every mutation is
mirrored to a key-value backend on a best-effort basis: storage failures
are logged and the in-memory log keeps working.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import ValidationError

from tempconv.errors import PersistenceError
from tempconv.models.history import HISTORY_LOG_ADAPTER, HistoryRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tempconv.history.backends import KeyValueStore

logger = logging.getLogger(__name__)

HISTORY_KEY = "conversionHistory"
MAX_HISTORY = 10

CLEAR_PROMPT = "Are you sure you want to clear all conversion history?"


class HistoryStore:
    """Newest-first log of at most :data:`MAX_HISTORY` conversions.

    Parameters
    ----------
    backend:
        Key-value store the log is mirrored to.
    key:
        Storage key for the serialized log.
    clock:
        Returns the current local time; injectable for tests.
    """

    def __init__(
        self,
        backend: KeyValueStore,
        *,
        key: str = HISTORY_KEY,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._backend = backend
        self._key = key
        self._clock = clock
        self._log: list[HistoryRecord] = []
        self._listeners: list[Callable[[list[HistoryRecord]], None]] = []

    # -- read access ---------------------------------------------------------

    @property
    def entries(self) -> list[HistoryRecord]:
        """Return a copy of the log, newest first."""
        return list(self._log)

    def __len__(self) -> int:
        return len(self._log)

    # -- subscriptions -------------------------------------------------------

    def subscribe(self, listener: Callable[[list[HistoryRecord]], None]) -> None:
        """Register *listener* to receive the full log after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[list[HistoryRecord]], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        snapshot = self.entries
        for listener in list(self._listeners):
            listener(snapshot)

    # -- persistence ---------------------------------------------------------

    def load(self) -> list[HistoryRecord]:
        """Replace the in-memory log with the persisted one.

        Missing, unreadable or malformed data yields an empty log.
        """
        self._log = self._read()
        logger.debug("Loaded %d history entries", len(self._log))
        self._notify()
        return self.entries

    def _read(self) -> list[HistoryRecord]:
        try:
            raw = self._backend.get(self._key)
        except PersistenceError as exc:
            logger.error("Error loading history from storage: %s", exc)
            return []
        if raw is None:
            return []

        try:
            # A stored "null" is treated like an absent log.
            if raw.strip() == "null":
                return []
            records = HISTORY_LOG_ADAPTER.validate_json(raw)
        except (ValidationError, ValueError) as exc:
            logger.error("Error loading history from storage: %s", exc)
            return []

        if len(records) > MAX_HISTORY:
            logger.debug("Truncating %d stored entries to %d", len(records), MAX_HISTORY)
            records = records[:MAX_HISTORY]
        return records

    def save(self, log: Iterable[HistoryRecord] | None = None) -> bool:
        """Persist *log* (default: the current log).

        Returns ``False`` if the backend rejected the write.
        """
        records = list(self._log if log is None else log)
        payload = HISTORY_LOG_ADAPTER.dump_json(records, by_alias=True).decode()
        try:
            self._backend.set(self._key, payload)
        except PersistenceError as exc:
            logger.error("Error saving history to storage: %s", exc)
            logger.warning("History will not be persisted across sessions")
            return False
        return True

    # -- mutators ------------------------------------------------------------

    def record(self, from_label: str, to_label: str) -> HistoryRecord:
        """Prepend a conversion, evicting the oldest beyond the limit."""
        entry = HistoryRecord.stamped(from_label, to_label, self._clock())
        self._log.insert(0, entry)
        del self._log[MAX_HISTORY:]
        self.save()
        self._notify()
        logger.info("Recorded conversion %s -> %s", from_label, to_label)
        return entry

    def clear(self, *, confirm: Callable[[str], bool]) -> bool:
        """Empty the log if *confirm* approves.

        Returns ``True`` when the log was cleared.  An already-empty log is
        left alone without asking.
        """
        if not self._log:
            return False
        if not confirm(CLEAR_PROMPT):
            logger.debug("History clear declined")
            return False

        self._log = []
        self.save()
        self._notify()
        logger.info("History cleared")
        return True
