"""Unit conversion helpers shared across the codebase."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

# Results smaller than this (but non-zero) keep extra precision.
SMALL_MAGNITUDE = 0.1
SMALL_PRECISION = 6
DEFAULT_PRECISION = 1


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius (unrounded)."""
    return (f - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit (unrounded)."""
    return c * 9.0 / 5.0 + 32.0


def _round_half_up(value: float, places: int) -> float:
    # Decimal(float) is exact, so only exact binary ties round away from zero.
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_temperature(value: float) -> float:
    """Round *value* for display.

    Non-zero magnitudes below :data:`SMALL_MAGNITUDE` keep six decimal
    places so tiny results don't collapse to ``0.0``; everything else is
    rounded to one decimal place.  Exact ties round away from zero
    (``34.25`` becomes ``34.3``), unlike :func:`round`.

    >>> round_temperature(212.04)
    212.0
    >>> round_temperature(-0.0123456789)
    -0.012346
    """
    if value != 0 and abs(value) < SMALL_MAGNITUDE:
        rounded = _round_half_up(value, SMALL_PRECISION)
    else:
        rounded = _round_half_up(value, DEFAULT_PRECISION)
    # -0.0 would otherwise render as "-0"
    return rounded + 0.0


# Below this magnitude labels switch to exponent notation ("1e-7").
EXPONENT_BELOW = 1e-6


def format_number(value: float) -> str:
    """Return the shortest rendering of *value*, the way a browser prints it.

    Integral values drop the fractional part; magnitudes from
    :data:`EXPONENT_BELOW` upwards are written out in plain decimals and
    anything smaller uses exponent notation:

    >>> format_number(32.0)
    '32'
    >>> format_number(1e-06)
    '0.000001'
    >>> format_number(1.5e-07)
    '1.5e-7'
    >>> format_number(98.6)
    '98.6'
    """
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    if abs(value) < EXPONENT_BELOW:
        mantissa, _, exponent = repr(float(value)).partition("e")
        return f"{mantissa}e{int(exponent)}"
    return format(Decimal(repr(float(value))), "f")
