"""Pure conversion logic: validation, formulas, rounding and scale position."""

from tempconv.converter.engine import (
    CONFIRM_THRESHOLD,
    EXTREME_LIMIT,
    convert,
    convert_request,
    convert_value,
    parse_temperature,
    round_temperature,
)
from tempconv.converter.scale import ScaleBand, ScaleReading, initial_reading, scale_reading

__all__ = [
    "CONFIRM_THRESHOLD",
    "EXTREME_LIMIT",
    "ScaleBand",
    "ScaleReading",
    "convert",
    "convert_request",
    "convert_value",
    "initial_reading",
    "parse_temperature",
    "round_temperature",
    "scale_reading",
]
