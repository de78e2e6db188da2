"""CLI commands for conversion history."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempconv.cli._client import get_session
from tempconv.cli._options import global_options

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext

history_group = click.Group("history", help="Conversion history")


@history_group.command("list")
@global_options
def list_cmd(app_ctx: AppContext) -> None:
    """Show recent conversions, newest first."""
    formatter = app_ctx.formatter
    records = get_session(app_ctx).history.entries

    if formatter.format == "json":
        formatter.output(records, command="history.list")
    else:
        formatter.rich.history(records)


@history_group.command("clear")
@click.option("--yes", "-y", "assume_yes", is_flag=True, default=False, help="Do not ask")
@global_options
def clear_cmd(app_ctx: AppContext, assume_yes: bool) -> None:
    """Delete all recorded conversions.

    Asks for confirmation unless --yes is given.  Without a terminal to ask
    on, nothing is deleted.
    """
    formatter = app_ctx.formatter
    session = get_session(app_ctx, assume_yes=assume_yes)
    had_entries = len(session.history) > 0
    cleared = session.clear_history()

    if formatter.format == "json":
        formatter.output({"cleared": cleared}, command="history.clear")
    elif cleared:
        formatter.rich.info("History cleared.")
    elif had_entries:
        formatter.rich.info("History left unchanged.")
    else:
        formatter.rich.info("History is already empty.")
