"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses

import click

from tempconv import __version__
from tempconv.cli._options import configure_logging
from tempconv.errors import ConfirmationRequiredError, ConversionError
from tempconv.models.config import AppSettings
from tempconv.output.formatter import OutputFormatter

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(__version__, prog_name="tempconv")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    envvar="TEMPCONV_OUTPUT_FORMAT",
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert temperatures between Celsius and Fahrenheit."""
    configure_logging(verbose=verbose)
    if output_format is None:
        # Picks up TEMPCONV_OUTPUT_FORMAT from a .env file as well.
        output_format = AppSettings().output_format
    ctx.ensure_object(dict)
    ctx.obj = AppContext(
        output_format=output_format,
        quiet=quiet,
        verbose=verbose,
    )


# ---------------------------------------------------------------------------
# Register subcommand groups (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from tempconv.cli.convert import convert_cmd
    from tempconv.cli.history import history_group
    from tempconv.cli.ui import ui_cmd

    cli.add_command(convert_cmd)
    cli.add_command(history_group)
    cli.add_command(ui_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    try:
        rc = cli(args=argv, standalone_mode=False)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx = _extract_app_ctx()
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()
        cmd_name = _get_command_name()

        if _handle_known_error(exc, formatter, cmd_name):
            raise SystemExit(1) from exc

        formatter.output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=cmd_name,
        )
        raise SystemExit(1) from exc

    # Without standalone mode, click returns ctx.exit() codes instead of raising.
    if isinstance(rc, int) and rc:
        raise SystemExit(rc)


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _extract_app_ctx() -> AppContext | None:
    """Try to extract AppContext from the current Click context."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, AppContext):
            return ctx.obj
        ctx = ctx.parent
    return None


def _get_command_name() -> str:
    """Reconstruct a dotted command name from the Click context chain."""
    ctx = click.get_current_context(silent=True)
    parts: list[str] = []
    while ctx is not None:
        if ctx.info_name and ctx.parent is not None:
            parts.append(ctx.info_name)
        ctx = ctx.parent
    return ".".join(reversed(parts)) or "unknown"


def _handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Handle well-known errors with friendly output.

    Returns ``True`` if the error was handled and the caller should exit.
    """
    if isinstance(exc, ConfirmationRequiredError):
        _handle_confirmation_required(exc, formatter, cmd_name)
        return True
    if isinstance(exc, ConversionError):
        formatter.output_error(code=exc.code, message=exc.message, command=cmd_name)
        return True
    return False


def _handle_confirmation_required(
    exc: ConfirmationRequiredError,
    formatter: OutputFormatter,
    cmd_name: str,
) -> None:
    """Explain how to convert an unusually large value non-interactively."""
    hint = "Re-run with --yes to convert it anyway."
    message = f"Temperature {exc.value:g} is unusually high."

    if formatter.format == "json":
        formatter.output_error(
            code=exc.code,
            message=f"{message} {hint}",
            command=cmd_name,
        )
        return

    formatter.rich.warning(message)
    formatter.rich.info(f"[dim]{hint}[/dim]")
