"""Conversion session: ties user actions to the converter and history.

A user action (typed value, quick-value button, direction change) calls
:meth:`ConversionSession.submit`.  The session runs the converter, asks
for confirmation when the value is unusually large, and records every
successful conversion in the history store.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tempconv.converter.engine import convert
from tempconv.errors import ConfirmationRequiredError

if TYPE_CHECKING:
    from collections.abc import Callable

    from tempconv.history.store import HistoryStore
    from tempconv.models.conversion import ConversionDirection, ConversionResult

logger = logging.getLogger(__name__)


class ConversionSession:
    """Coordinates one user's conversions and history.

    Parameters
    ----------
    history:
        The history store that successful conversions are appended to.
    confirm:
        Synchronous yes/no prompt.  When ``None``, confirmation requests
        propagate as :class:`ConfirmationRequiredError` so the caller can
        ask asynchronously and resubmit with ``confirmed=True``.
    """

    def __init__(
        self,
        history: HistoryStore,
        *,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self._history = history
        self._confirm = confirm

    @property
    def history(self) -> HistoryStore:
        return self._history

    def submit(
        self,
        raw_input: str,
        direction: ConversionDirection,
        *,
        confirmed: bool = False,
    ) -> ConversionResult | None:
        """Convert *raw_input* and record it.

        Returns ``None`` if the user declined a confirmation prompt.
        Validation failures propagate as
        :class:`~tempconv.errors.ConversionError`.
        """
        try:
            result = convert(raw_input, direction, confirmed=confirmed)
        except ConfirmationRequiredError as exc:
            if self._confirm is None:
                raise
            if not self._confirm(exc.prompt):
                logger.debug("Conversion of %s declined by user", exc.value)
                return None
            result = convert(raw_input, direction, confirmed=True)

        self._history.record(result.source_label, result.label)
        return result

    def clear_history(self) -> bool:
        """Clear history after confirming; without a prompt, nothing is cleared."""
        confirm = self._confirm or _decline
        return self._history.clear(confirm=confirm)


def _decline(_prompt: str) -> bool:
    return False
