"""Key-value storage backends for the conversion history.

Every backend exposes the same two-method surface: ``get(key)`` returning
the stored text or ``None``, and ``set(key, value)``.  Failures are
reported as :class:`~tempconv.errors.PersistenceError` subclasses so the
history store can treat them uniformly.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

import keyring
from keyring.errors import KeyringError

from tempconv.errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)

SERVICE_NAME = "tempconv"


class KeyValueStore(Protocol):
    """Minimal string key-value storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...  # noqa: A003


class MemoryStore:
    """Process-local store, optionally capped at *max_bytes* of UTF-8 text."""

    def __init__(self, max_bytes: int | None = None) -> None:
        self._data: dict[str, str] = {}
        self._max_bytes = max_bytes

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:  # noqa: A003
        if self._max_bytes is not None:
            others = sum(len(v.encode()) for k, v in self._data.items() if k != key)
            needed = others + len(value.encode())
            if needed > self._max_bytes:
                raise PersistenceWriteError(
                    f"Storage quota exceeded ({needed} > {self._max_bytes} bytes)"
                )
        self._data[key] = value


class JsonFileStore:
    """Store all keys in a single JSON object file.

    Writes go to a temporary file in the same directory and are renamed
    into place, so a crash never leaves a half-written file behind.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceReadError(f"Cannot read {self._path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise PersistenceReadError(f"{self._path} does not contain a JSON object")
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:  # noqa: A003
        try:
            data = self._read_all()
        except PersistenceReadError:
            logger.warning("Overwriting unreadable store %s", self._path)
            data = {}
        data[key] = value

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceWriteError(f"Cannot write {self._path}: {exc}") from exc
        logger.debug("Wrote %d bytes for key %r to %s", len(value), key, self._path)


class KeyringStore:
    """Read / write values via the OS keyring."""

    def __init__(self, service: str = SERVICE_NAME) -> None:
        self._service = service

    def get(self, key: str) -> str | None:
        try:
            return keyring.get_password(self._service, key)
        except KeyringError as exc:
            raise PersistenceReadError(f"Keyring read failed: {exc}") from exc

    def set(self, key: str, value: str) -> None:  # noqa: A003
        try:
            keyring.set_password(self._service, key, value)
        except KeyringError as exc:
            raise PersistenceWriteError(f"Keyring write failed: {exc}") from exc
