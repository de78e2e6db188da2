"""Builders shared by CLI commands: settings, history store, session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from tempconv.history.backends import JsonFileStore, KeyringStore, MemoryStore
from tempconv.history.store import HistoryStore
from tempconv.models.config import AppSettings
from tempconv.session import ConversionSession

if TYPE_CHECKING:
    from collections.abc import Callable

    from tempconv.cli.main import AppContext
    from tempconv.history.backends import KeyValueStore

logger = logging.getLogger(__name__)


def get_backend(settings: AppSettings) -> KeyValueStore:
    """Build the key-value backend selected by ``TEMPCONV_HISTORY_BACKEND``."""
    if settings.history_backend == "keyring":
        return KeyringStore()
    if settings.history_backend == "memory":
        return MemoryStore()
    return JsonFileStore(settings.history_path)


def get_history_store(settings: AppSettings | None = None) -> HistoryStore:
    """Build a :class:`HistoryStore` from settings and load persisted entries."""
    settings = settings or AppSettings()
    store = HistoryStore(get_backend(settings))
    store.load()
    logger.debug("History backend: %s", settings.history_backend)
    return store


def make_confirm(app_ctx: AppContext, *, assume_yes: bool) -> Callable[[str], bool] | None:
    """Return a confirmation callable appropriate for the current output mode.

    * ``--yes`` → always approve.
    * Rich output on a TTY → interactive ``click.confirm``.
    * Anything else (JSON, piped) → ``None``; the caller gets the
      confirmation error instead of a prompt that nobody can answer.
    """
    if assume_yes:
        return _approve
    if app_ctx.formatter.interactive:
        return _click_confirm
    return None


def get_session(app_ctx: AppContext, *, assume_yes: bool = False) -> ConversionSession:
    return ConversionSession(
        get_history_store(),
        confirm=make_confirm(app_ctx, assume_yes=assume_yes),
    )


def _approve(_prompt: str) -> bool:
    return True


def _click_confirm(prompt: str) -> bool:
    return click.confirm(prompt, default=False)
