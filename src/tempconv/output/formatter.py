from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from tempconv.output.json_output import format_json_error, format_json_response
from tempconv.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase


class OutputFormatter:
    """Picks how tempconv talks to the user: Rich tables or JSON envelopes.

    Rich output is used when *stream* (default ``sys.stdout``) is a
    terminal and JSON otherwise, unless *force_format* says differently.
    ``"quiet"`` keeps stdout empty by sending Rich output to stderr.

    Only Rich output on an interactive stdin can prompt (see
    :attr:`interactive`); JSON callers get a ``requires_confirmation``
    error instead, so scripts never block on a question.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        if self._format == "quiet":
            self._console = Console(stderr=True)
        else:
            self._console = Console(file=self._stream)

        self._rich = RichOutput(self._console)

    @property
    def format(self) -> str:  # noqa: A003
        """Return the active output format (``"rich"``, ``"json"``, or ``"quiet"``)."""
        return self._format

    @property
    def rich(self) -> RichOutput:
        return self._rich

    @property
    def interactive(self) -> bool:
        """``True`` when prompts can be shown (Rich output on a terminal)."""
        return self._format == "rich" and sys.stdin.isatty()

    def output(self, data: Any, *, command: str) -> None:
        """Emit *data* using the current format.

        JSON prints an envelope to the stream; rich/quiet fall back to
        :meth:`RichOutput.info` (callers normally use :attr:`rich`
        directly for typed output).
        """
        if self._format == "json":
            print(format_json_response(data=data, command=command), file=self._stream)  # noqa: T201
        else:
            self._rich.info(str(data))

    def output_error(self, *, code: str, message: str, command: str) -> None:
        """Emit an error using the current format."""
        if self._format == "json":
            print(  # noqa: T201
                format_json_error(code=code, message=message, command=command),
                file=self._stream,
            )
        else:
            self._rich.error(message)
