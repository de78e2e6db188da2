"""CLI command for converting a single temperature."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempconv.cli._client import get_session
from tempconv.cli._options import global_options
from tempconv.converter.scale import scale_reading
from tempconv.models.config import AppSettings
from tempconv.models.conversion import ConversionDirection

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext


@click.command(
    "convert",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("value")
@click.option(
    "--to-fahrenheit",
    "-f",
    "direction",
    flag_value=ConversionDirection.TO_FAHRENHEIT.value,
    help="Treat VALUE as Celsius and convert to Fahrenheit",
)
@click.option(
    "--to-celsius",
    "-c",
    "direction",
    flag_value=ConversionDirection.TO_CELSIUS.value,
    help="Treat VALUE as Fahrenheit and convert to Celsius",
)
@click.option(
    "--yes",
    "-y",
    "assume_yes",
    is_flag=True,
    default=False,
    help="Convert unusually large values without asking",
)
@global_options
def convert_cmd(
    app_ctx: AppContext,
    value: str,
    direction: str | None,
    assume_yes: bool,
) -> None:
    """Convert VALUE between Celsius and Fahrenheit and record it in history.

    Negative values may be given directly (``tempconv convert -40 -c``).
    The default direction comes from TEMPCONV_DEFAULT_DIRECTION.
    """
    formatter = app_ctx.formatter
    resolved = (
        ConversionDirection(direction) if direction else AppSettings().default_direction
    )

    session = get_session(app_ctx, assume_yes=assume_yes)
    result = session.submit(value, resolved)

    if result is None:
        if formatter.format == "json":
            formatter.output({"converted": False, "cancelled": True}, command="convert")
        else:
            formatter.rich.info("Conversion cancelled.")
        return

    reading = scale_reading(result.value, result.unit)
    if formatter.format == "json":
        formatter.output(
            {
                "converted": True,
                "result": result,
                "label": result.label,
                "source_label": result.source_label,
                "scale": {"percent": round(reading.percent, 1), "band": reading.band.value},
            },
            command="convert",
        )
    else:
        formatter.rich.conversion(result, reading)
