"""CLI command that launches the interactive converter widget."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempconv.cli._client import get_history_store
from tempconv.cli._options import global_options
from tempconv.models.config import AppSettings

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext


@click.command("ui")
@global_options
def ui_cmd(app_ctx: AppContext) -> None:
    """Open the full-screen converter."""
    from tempconv.ui.app import ConverterApp

    settings = AppSettings()
    app = ConverterApp(get_history_store(settings), direction=settings.default_direction)
    app.run()
