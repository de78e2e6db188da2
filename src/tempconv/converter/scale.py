"""Thermometer-style scale position for a converted temperature."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tempconv.models.conversion import TemperatureUnit

# (min, max) of the displayed thermometer per unit
SCALE_RANGES: dict[TemperatureUnit, tuple[float, float]] = {
    TemperatureUnit.C: (-50.0, 100.0),
    TemperatureUnit.F: (-58.0, 212.0),
}

COLD_BELOW = 33.0
MILD_BELOW = 66.0

# Reading shown before the first conversion.
INITIAL_VALUE = 32.0
INITIAL_UNIT = TemperatureUnit.F


class ScaleBand(StrEnum):
    COLD = "cold"
    MILD = "mild"
    HOT = "hot"


@dataclass(frozen=True, slots=True)
class ScaleReading:
    """Position (0-100 %) of a temperature on its unit's scale."""

    percent: float
    band: ScaleBand


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def band_for(percent: float) -> ScaleBand:
    if percent < COLD_BELOW:
        return ScaleBand.COLD
    if percent < MILD_BELOW:
        return ScaleBand.MILD
    return ScaleBand.HOT


def scale_reading(value: float, unit: TemperatureUnit) -> ScaleReading:
    """Map *value* onto the fixed range for *unit*.

    Values outside the range pin to 0 % or 100 %.
    """
    low, high = SCALE_RANGES[unit]
    normalized = _clamp(value, low, high)
    percent = _clamp((normalized - low) / (high - low) * 100.0, 0.0, 100.0)
    return ScaleReading(percent=percent, band=band_for(percent))


def initial_reading() -> ScaleReading:
    return scale_reading(INITIAL_VALUE, INITIAL_UNIT)
