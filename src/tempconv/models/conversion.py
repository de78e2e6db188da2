"""Pydantic v2 models for conversion requests and results."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from tempconv._internal.units import format_number


class TemperatureUnit(StrEnum):
    """Supported temperature scales."""

    C = "C"
    F = "F"

    @property
    def symbol(self) -> str:
        return f"°{self.value}"


class ConversionDirection(StrEnum):
    """Which unit a conversion produces."""

    TO_FAHRENHEIT = "to_fahrenheit"
    TO_CELSIUS = "to_celsius"

    @property
    def source_unit(self) -> TemperatureUnit:
        if self is ConversionDirection.TO_FAHRENHEIT:
            return TemperatureUnit.C
        return TemperatureUnit.F

    @property
    def target_unit(self) -> TemperatureUnit:
        if self is ConversionDirection.TO_FAHRENHEIT:
            return TemperatureUnit.F
        return TemperatureUnit.C

    @property
    def reversed(self) -> ConversionDirection:
        if self is ConversionDirection.TO_FAHRENHEIT:
            return ConversionDirection.TO_CELSIUS
        return ConversionDirection.TO_FAHRENHEIT


class ConversionRequest(BaseModel):
    """A single user-initiated conversion, as typed."""

    raw_input: str
    direction: ConversionDirection


class ConversionResult(BaseModel):
    """The outcome of a successful conversion."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: TemperatureUnit
    source_value: float
    source_unit: TemperatureUnit

    @property
    def label(self) -> str:
        """Converted value with its unit, e.g. ``"212°F"``."""
        return f"{format_number(self.value)}{self.unit.symbol}"

    @property
    def source_label(self) -> str:
        """Input value with its unit, e.g. ``"100°C"``."""
        return f"{format_number(self.source_value)}{self.source_unit.symbol}"
