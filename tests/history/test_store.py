"""Tests for HistoryStore: bounded log, persistence and notifications."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from tempconv.errors import PersistenceReadError
from tempconv.history.backends import MemoryStore
from tempconv.history.store import CLEAR_PROMPT, HISTORY_KEY, MAX_HISTORY, HistoryStore
from tempconv.models.history import HistoryRecord

START = datetime(2026, 3, 1, 9, 30, 0)


class _Clock:
    """Returns a time one minute later on every call."""

    def __init__(self) -> None:
        self._now = START

    def __call__(self) -> datetime:
        current = self._now
        self._now += timedelta(minutes=1)
        return current


def _store(backend: MemoryStore | None = None) -> tuple[HistoryStore, MemoryStore]:
    backend = backend or MemoryStore()
    return HistoryStore(backend, clock=_Clock()), backend


def _stored(backend: MemoryStore) -> list[dict[str, str]]:
    raw = backend.get(HISTORY_KEY)
    assert raw is not None
    result: list[dict[str, str]] = json.loads(raw)
    return result


def _raw_entry(n: int) -> dict[str, str]:
    return {"from": f"{n}°C", "to": "x", "timestamp": "t", "date": "d"}


class TestRecord:
    def test_prepends_newest_first(self) -> None:
        store, _ = _store()
        store.record("0°C", "32°F")
        store.record("100°C", "212°F")
        assert [e.from_label for e in store.entries] == ["100°C", "0°C"]

    def test_returns_stamped_record(self) -> None:
        store, _ = _store()
        entry = store.record("0°C", "32°F")
        assert entry.timestamp == START.strftime("%X")
        assert entry.date == START.strftime("%x")
        assert store.entries == [entry]

    def test_persists_with_storage_keys(self) -> None:
        store, backend = _store()
        store.record("0°C", "32°F")
        assert _stored(backend) == [
            {
                "from": "0°C",
                "to": "32°F",
                "timestamp": START.strftime("%X"),
                "date": START.strftime("%x"),
            }
        ]

    def test_eleventh_record_evicts_oldest(self) -> None:
        store, backend = _store()
        for n in range(11):
            store.record(f"{n}°C", "x")

        assert len(store) == MAX_HISTORY == 10
        assert [e.from_label for e in store.entries] == [f"{n}°C" for n in range(10, 0, -1)]
        assert len(_stored(backend)) == 10

    def test_entries_is_a_copy(self) -> None:
        store, _ = _store()
        store.record("0°C", "32°F")
        store.entries.clear()
        assert len(store) == 1


class TestPersistenceFailures:
    def test_write_failure_keeps_in_memory_log(self, caplog: pytest.LogCaptureFixture) -> None:
        store, backend = _store(MemoryStore(max_bytes=5))
        with caplog.at_level(logging.WARNING, logger="tempconv.history.store"):
            entry = store.record("0°C", "32°F")

        assert store.entries == [entry]
        assert backend.get(HISTORY_KEY) is None
        assert "Error saving history" in caplog.text
        assert "will not be persisted" in caplog.text

    def test_save_reports_outcome(self) -> None:
        store, _ = _store()
        assert store.save() is True
        failing, _ = _store(MemoryStore(max_bytes=1))
        assert failing.save() is False

    def test_save_explicit_log(self) -> None:
        store, backend = _store()
        rec = HistoryRecord(from_label="a", to_label="b", timestamp="t", date="d")
        store.save([rec])
        assert _stored(backend) == [{"from": "a", "to": "b", "timestamp": "t", "date": "d"}]
        assert len(store) == 0


class TestLoad:
    def test_absent_key_is_empty(self) -> None:
        store, _ = _store()
        assert store.load() == []

    def test_loads_persisted_log(self) -> None:
        backend = MemoryStore()
        backend.set(HISTORY_KEY, json.dumps([_raw_entry(2), _raw_entry(1)]))
        store, _ = _store(backend)
        loaded = store.load()
        assert [e.from_label for e in loaded] == ["2°C", "1°C"]
        assert store.entries == loaded

    def test_round_trip_between_instances(self) -> None:
        first, backend = _store()
        first.record("0°C", "32°F")
        second = HistoryStore(backend)
        assert second.load() == first.entries

    @pytest.mark.parametrize("raw", ["null", "", "{not json", '{"a": 1}', '[{"from": 1}]'])
    def test_bad_data_is_empty(self, raw: str, caplog: pytest.LogCaptureFixture) -> None:
        backend = MemoryStore()
        backend.set(HISTORY_KEY, raw)
        store, _ = _store(backend)
        with caplog.at_level(logging.ERROR, logger="tempconv.history.store"):
            assert store.load() == []
        if raw != "null":
            assert "Error loading history" in caplog.text

    def test_unreadable_backend_is_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        backend = MagicMock()
        backend.get.side_effect = PersistenceReadError("disk gone")
        store = HistoryStore(backend)
        with caplog.at_level(logging.ERROR, logger="tempconv.history.store"):
            assert store.load() == []
        assert "disk gone" in caplog.text

    def test_oversized_log_is_truncated(self) -> None:
        backend = MemoryStore()
        backend.set(HISTORY_KEY, json.dumps([_raw_entry(n) for n in range(15)]))
        store, _ = _store(backend)
        loaded = store.load()
        assert len(loaded) == 10
        assert loaded[0].from_label == "0°C"

    def test_load_replaces_in_memory_log(self) -> None:
        store, backend = _store()
        store.record("0°C", "32°F")
        backend.set(HISTORY_KEY, "[]")
        assert store.load() == []
        assert len(store) == 0


class TestClear:
    def test_empty_log_does_not_prompt(self) -> None:
        store, _ = _store()
        confirm = MagicMock(return_value=True)
        assert store.clear(confirm=confirm) is False
        confirm.assert_not_called()

    def test_declined_leaves_log_unchanged(self) -> None:
        store, backend = _store()
        store.record("0°C", "32°F")
        before = backend.get(HISTORY_KEY)
        confirm = MagicMock(return_value=False)

        assert store.clear(confirm=confirm) is False
        confirm.assert_called_once_with(CLEAR_PROMPT)
        assert len(store) == 1
        assert backend.get(HISTORY_KEY) == before

    def test_confirmed_empties_and_persists(self) -> None:
        store, backend = _store()
        store.record("0°C", "32°F")
        assert store.clear(confirm=lambda _prompt: True) is True
        assert store.entries == []
        assert backend.get(HISTORY_KEY) == "[]"


class TestSubscriptions:
    def test_listener_receives_log_on_changes(self) -> None:
        store, _ = _store()
        seen: list[list[HistoryRecord]] = []
        store.subscribe(seen.append)

        store.record("0°C", "32°F")
        store.clear(confirm=lambda _prompt: True)
        store.load()

        assert [len(s) for s in seen] == [1, 0, 0]

    def test_unsubscribe(self) -> None:
        store, _ = _store()
        listener = MagicMock()
        store.subscribe(listener)
        store.unsubscribe(listener)
        store.record("0°C", "32°F")
        listener.assert_not_called()

    def test_unsubscribe_unknown_listener_is_noop(self) -> None:
        store, _ = _store()
        store.unsubscribe(MagicMock())
