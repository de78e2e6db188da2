"""Shared CLI decorator that propagates global options to leaf commands."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

import click

from tempconv.errors import ConversionError

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext


def global_options(f: Any) -> Any:
    """Add global CLI options to a leaf command.

    Allows ``--format``, ``--quiet`` and ``--verbose`` to be specified
    **after** the subcommand name (e.g. ``tempconv history list --format
    json``).  Command-level values override the root-group values stored in
    :class:`AppContext`.
    """

    @click.option(
        "--verbose",
        "local_verbose",
        is_flag=True,
        default=False,
        help="Enable verbose logging",
    )
    @click.option(
        "--quiet",
        "local_quiet",
        is_flag=True,
        default=False,
        help="Suppress normal output",
    )
    @click.option(
        "--format",
        "local_output_format",
        type=click.Choice(["rich", "json", "quiet"]),
        default=None,
        help="Output format (default: auto-detect)",
    )
    @click.pass_obj
    def wrapper(app_ctx: AppContext, /, **kwargs: Any) -> Any:
        local_output_format: str | None = kwargs.pop("local_output_format", None)
        local_quiet: bool = kwargs.pop("local_quiet", False)
        local_verbose: bool = kwargs.pop("local_verbose", False)

        # Command-level wins
        if local_output_format is not None:
            app_ctx.output_format = local_output_format
            app_ctx._formatter = None  # reset cached formatter
        if local_quiet:
            app_ctx.quiet = True
            app_ctx._formatter = None
        if local_verbose and not app_ctx.verbose:
            app_ctx.verbose = True
            configure_logging(verbose=True)

        try:
            return f(app_ctx, **kwargs)
        except ConversionError as exc:
            from tempconv.cli.main import _get_command_name, _handle_known_error

            _handle_known_error(exc, app_ctx.formatter, _get_command_name())
            raise click.exceptions.Exit(1) from exc

    functools.update_wrapper(wrapper, f)
    return wrapper


def configure_logging(*, verbose: bool) -> None:
    """Route log records through Rich on stderr.

    ``--verbose`` lowers the threshold to DEBUG; otherwise only warnings
    and errors (e.g. history persistence failures) are shown.
    """
    import logging

    from rich.console import Console
    from rich.logging import RichHandler

    root = logging.getLogger("tempconv")
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=verbose, markup=False)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
