from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from tempconv.converter.scale import ScaleBand

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.converter.scale import ScaleReading
    from tempconv.models.conversion import ConversionResult
    from tempconv.models.history import HistoryRecord

BAND_STYLES: dict[ScaleBand, str] = {
    ScaleBand.COLD: "cyan",
    ScaleBand.MILD: "yellow",
    ScaleBand.HOT: "red",
}

EMPTY_HISTORY = "No conversion history yet"


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversion result
    # ------------------------------------------------------------------

    def conversion(self, result: ConversionResult, reading: ScaleReading) -> None:
        """Print the converted value followed by its scale bar."""
        style = BAND_STYLES[reading.band]
        self._con.print(
            Panel(
                f"[bold {style}]{result.label}[/bold {style}]",
                title=f"{result.source_label} →",
                expand=False,
            )
        )
        self.scale(reading)

    def scale(self, reading: ScaleReading) -> None:
        """Print a horizontal thermometer bar."""
        style = BAND_STYLES[reading.band]
        bar = ProgressBar(
            total=100.0,
            completed=reading.percent,
            width=40,
            complete_style=style,
            finished_style=style,
        )
        grid = Table.grid(padding=(0, 1))
        grid.add_row(bar, f"{reading.percent:.0f}% ({reading.band.value})")
        self._con.print(grid)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def history(self, records: list[HistoryRecord]) -> None:
        """Print the history table, newest first, or a placeholder."""
        if not records:
            self._con.print(f"[dim italic]{EMPTY_HISTORY}[/dim italic]")
            return

        table = Table(title="Conversion History")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Conversion", style="bold")
        table.add_column("When")

        for index, rec in enumerate(records, start=1):
            table.add_row(
                str(index),
                escape(f"{rec.from_label} → {rec.to_label}"),
                escape(f"{rec.timestamp} • {rec.date}"),
            )

        self._con.print(table)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")

    def warning(self, message: str) -> None:
        self._con.print(f"[yellow]{message}[/yellow]")

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message)
