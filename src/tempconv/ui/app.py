"""Interactive terminal converter built on Textual.

Layout mirrors a small web widget: an input with a unit badge, a
direction toggle, quick-value buttons, the result line with a
thermometer bar, and the recent-history list with a clear button.
Unusually large values and clearing history both go through a modal
yes/no prompt.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.markup import escape
from textual.screen import ModalScreen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    ProgressBar,
    RadioButton,
    RadioSet,
    Static,
)

from tempconv.converter.engine import parse_temperature
from tempconv.converter.scale import ScaleBand, ScaleReading, initial_reading, scale_reading
from tempconv.errors import ConfirmationRequiredError, ConversionError, EmptyInputError
from tempconv.history.store import CLEAR_PROMPT
from tempconv.models.conversion import ConversionDirection
from tempconv.output.rich_output import EMPTY_HISTORY
from tempconv.session import ConversionSession

if TYPE_CHECKING:
    from tempconv.history.store import HistoryStore
    from tempconv.models.conversion import ConversionResult
    from tempconv.models.history import HistoryRecord

logger = logging.getLogger(__name__)

QUICK_VALUES: tuple[str, ...] = ("-40", "0", "37", "100")

_DIRECTION_BUTTONS: dict[str, ConversionDirection] = {
    "to-fahrenheit": ConversionDirection.TO_FAHRENHEIT,
    "to-celsius": ConversionDirection.TO_CELSIUS,
}

LIGHT_THEME = "textual-light"
DARK_THEME = "textual-dark"


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no modal; dismisses with ``True`` on yes."""

    BINDINGS: ClassVar[list[Binding]] = [  # type: ignore[assignment]
        Binding("y", "answer(True)", "Yes"),
        Binding("n", "answer(False)", "No"),
        Binding("escape", "answer(False)", "Cancel"),
    ]

    CSS = """
    ConfirmScreen {
        align: center middle;
    }
    #confirm-container {
        width: 56;
        height: auto;
        background: $surface;
        border: thick $warning;
        padding: 1 2;
    }
    #confirm-prompt {
        padding-bottom: 1;
    }
    #confirm-buttons {
        height: auto;
        align-horizontal: right;
    }
    """

    def __init__(self, prompt: str) -> None:
        super().__init__()
        self.prompt = prompt

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-container"):
            yield Static(self.prompt, id="confirm-prompt")
            with Horizontal(id="confirm-buttons"):
                yield Button("Yes", id="confirm-yes", variant="warning")
                yield Button("No", id="confirm-no")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm-yes")

    def action_answer(self, answer: bool) -> None:
        self.dismiss(answer)


class ConverterApp(App[None]):
    """Full-screen Celsius/Fahrenheit converter with persisted history."""

    TITLE = "tempconv"

    CSS = """
    #converter {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }
    #input-row, #quick-row {
        height: auto;
    }
    #temperature-input {
        width: 1fr;
    }
    #temperature-input.error {
        border: tall $error;
    }
    #input-unit {
        width: 6;
        padding: 1 1;
        text-style: bold;
    }
    .quick-btn {
        min-width: 8;
        margin-right: 1;
    }
    #result {
        height: auto;
        padding: 1 0 0 0;
        text-style: bold;
        color: $primary;
    }
    #result.error {
        color: $error;
    }
    #scale {
        padding-bottom: 1;
    }
    #scale.cold Bar > .bar--bar { color: #45B7D1; }
    #scale.mild Bar > .bar--bar { color: #FFEAA7; }
    #scale.hot Bar > .bar--bar { color: #FF6B6B; }
    #history-panel {
        height: 1fr;
        border: solid $accent;
        padding: 0 1;
    }
    #history-list {
        height: 1fr;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [  # type: ignore[assignment]
        Binding("q", "quit", "Quit"),
        Binding("d", "toggle_theme", "Dark/Light"),
        Binding("ctrl+l", "clear_history", "Clear history"),
    ]

    def __init__(
        self,
        history: HistoryStore,
        *,
        direction: ConversionDirection = ConversionDirection.TO_FAHRENHEIT,
    ) -> None:
        super().__init__()
        self._history = history
        # No synchronous prompt: confirmations are asked via ConfirmScreen.
        self._session = ConversionSession(history)
        self.direction = direction

        self.last_result: ConversionResult | None = None
        self.result_text: str = ""
        self.result_is_error: bool = False
        self.scale: ScaleReading = initial_reading()
        self.history_lines: list[str] = []

    # -- Compose layout -------------------------------------------------------

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="converter"):
            with Horizontal(id="input-row"):
                yield Input(placeholder="Enter a temperature", id="temperature-input")
                yield Label(self.direction.source_unit.symbol, id="input-unit")
            with RadioSet(id="direction"):
                yield RadioButton(
                    "Celsius → Fahrenheit",
                    id="to-fahrenheit",
                    value=self.direction is ConversionDirection.TO_FAHRENHEIT,
                )
                yield RadioButton(
                    "Fahrenheit → Celsius",
                    id="to-celsius",
                    value=self.direction is ConversionDirection.TO_CELSIUS,
                )
            with Horizontal(id="quick-row"):
                for index, value in enumerate(QUICK_VALUES):
                    yield Button(value, id=f"quick-{index}", name=value, classes="quick-btn")
                yield Button("Convert", id="convert-btn", variant="primary")
            yield Static(id="result")
            yield ProgressBar(total=100, show_eta=False, id="scale")
        with Vertical(id="history-panel"):
            yield Static(id="history-list")
            yield Button("Clear history", id="clear-history", variant="error")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#history-panel", Vertical).border_title = "History"
        self._history.subscribe(self._render_history)
        self._render_history(self._history.entries)
        self._render_scale(self.scale)
        self.query_one("#temperature-input", Input).focus()

    def on_unmount(self) -> None:
        self._history.unsubscribe(self._render_history)

    # -- Event handlers -------------------------------------------------------

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_convert()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Flag obviously invalid input while typing."""
        self._set_input_error(False)
        try:
            parse_temperature(event.value)
        except EmptyInputError:
            return
        except ConversionError as exc:
            self._set_input_error(True)
            self._show_message(exc.message, error=True)

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        button_id = event.pressed.id or ""
        if button_id in _DIRECTION_BUTTONS:
            self.direction = _DIRECTION_BUTTONS[button_id]
            self.query_one("#input-unit", Label).update(self.direction.source_unit.symbol)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if button.id == "convert-btn":
            self.action_convert()
        elif button.id == "clear-history":
            self.action_clear_history()
        elif button.has_class("quick-btn") and button.name is not None:
            self.query_one("#temperature-input", Input).value = button.name
            self.action_convert()

    # -- Actions --------------------------------------------------------------

    def set_direction(self, direction: ConversionDirection) -> None:
        """Select *direction* as if its radio button had been pressed."""
        for button_id, candidate in _DIRECTION_BUTTONS.items():
            if candidate is direction:
                self.query_one(f"#{button_id}", RadioButton).value = True
        self.direction = direction
        self.query_one("#input-unit", Label).update(direction.source_unit.symbol)

    def action_convert(self) -> None:
        raw = self.query_one("#temperature-input", Input).value
        self._set_input_error(False)
        try:
            result = self._session.submit(raw, self.direction)
        except ConfirmationRequiredError as exc:
            direction = self.direction

            def _resume(accepted: bool | None) -> None:
                if accepted:
                    self._complete(self._session.submit(raw, direction, confirmed=True))

            self.push_screen(ConfirmScreen(exc.prompt), _resume)
            return
        except ConversionError as exc:
            self._set_input_error(True)
            self._show_message(exc.message, error=True)
            return
        self._complete(result)

    def action_clear_history(self) -> None:
        if not len(self._history):
            return

        def _resume(accepted: bool | None) -> None:
            if accepted:
                self._history.clear(confirm=lambda _prompt: True)

        self.push_screen(ConfirmScreen(CLEAR_PROMPT), _resume)

    def action_toggle_theme(self) -> None:
        self.theme = LIGHT_THEME if self.theme == DARK_THEME else DARK_THEME

    # -- Rendering ------------------------------------------------------------

    def _complete(self, result: ConversionResult | None) -> None:
        if result is None:
            return
        self.last_result = result
        self._show_message(result.label, error=False)
        self._render_scale(scale_reading(result.value, result.unit))

    def _show_message(self, text: str, *, error: bool) -> None:
        self.result_text = text
        self.result_is_error = error
        widget = self.query_one("#result", Static)
        widget.update(text)
        widget.set_class(error, "error")

    def _set_input_error(self, error: bool) -> None:
        self.query_one("#temperature-input", Input).set_class(error, "error")
        if not error:
            self.query_one("#result", Static).remove_class("error")

    def _render_scale(self, reading: ScaleReading) -> None:
        self.scale = reading
        bar = self.query_one("#scale", ProgressBar)
        bar.update(progress=reading.percent)
        for band in ScaleBand:
            bar.set_class(band is reading.band, band.value)

    def _render_history(self, records: list[HistoryRecord]) -> None:
        self.history_lines = [
            f"{escape(rec.from_label)} → {escape(rec.to_label)}  "
            f"[dim]{escape(rec.timestamp)} • {escape(rec.date)}[/dim]"
            for rec in records
        ]
        body = "\n".join(self.history_lines) if records else f"[i]{EMPTY_HISTORY}[/i]"
        self.query_one("#history-list", Static).update(body)
        self.query_one("#clear-history", Button).disabled = not records
