"""Temperature conversion with input validation.

:func:`convert` is pure: it parses, validates and converts a raw text
input, raising a :class:`~tempconv.errors.ConversionError` subclass for
the first validation rule that fails.  Recording history and rendering
are the caller's job.
"""

from __future__ import annotations

import math
import re

from tempconv._internal.units import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    round_temperature,
)
from tempconv.errors import (
    ConfirmationRequiredError,
    EmptyInputError,
    NonFiniteValueError,
    NotANumberError,
    ValueTooExtremeError,
)
from tempconv.models.conversion import (
    ConversionDirection,
    ConversionRequest,
    ConversionResult,
)

# Inputs beyond this magnitude are rejected outright.
EXTREME_LIMIT = 10_000
# Inputs beyond this magnitude need explicit confirmation.
CONFIRM_THRESHOLD = 1_000

_RADIX_LITERAL = re.compile(r"0[xob][0-9a-f]+", re.IGNORECASE)
_NAN_SPELLINGS = frozenset({"nan", "+nan", "-nan"})


def _parse_number(text: str) -> float:
    """Parse *text* as a number, raising :class:`ValueError` on failure.

    Accepts decimal/exponent notation, ``inf``/``Infinity`` and
    unsigned ``0x``/``0o``/``0b`` integer literals.  Digit separators
    (``1_000``) and NaN are rejected.
    """
    if "_" in text or text.lower() in _NAN_SPELLINGS:
        raise ValueError(f"not a number: {text!r}")
    if _RADIX_LITERAL.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            # Too wide for a float; rejected later as non-finite.
            return math.inf
    return float(text)


def parse_temperature(raw_input: str) -> float:
    """Validate *raw_input* and return it as a finite, in-range float."""
    text = raw_input.strip()
    if not text:
        raise EmptyInputError()

    try:
        value = _parse_number(text)
    except ValueError:
        raise NotANumberError() from None

    if not math.isfinite(value):
        raise NonFiniteValueError()
    if abs(value) > EXTREME_LIMIT:
        raise ValueTooExtremeError()
    return value


def convert_value(value: float, direction: ConversionDirection) -> float:
    """Apply the conversion formula for *direction* and round the result."""
    if direction is ConversionDirection.TO_FAHRENHEIT:
        converted = celsius_to_fahrenheit(value)
    else:
        converted = fahrenheit_to_celsius(value)
    return round_temperature(converted)


def convert(
    raw_input: str,
    direction: ConversionDirection,
    *,
    confirmed: bool = False,
) -> ConversionResult:
    """Convert *raw_input* in the given *direction*.

    Raises :class:`ConfirmationRequiredError` for magnitudes above
    :data:`CONFIRM_THRESHOLD` unless *confirmed* is set; no conversion is
    performed in that case.
    """
    value = parse_temperature(raw_input)
    if abs(value) > CONFIRM_THRESHOLD and not confirmed:
        raise ConfirmationRequiredError(value)

    return ConversionResult(
        value=convert_value(value, direction),
        unit=direction.target_unit,
        source_value=value,
        source_unit=direction.source_unit,
    )


def convert_request(request: ConversionRequest, *, confirmed: bool = False) -> ConversionResult:
    """Convenience wrapper around :func:`convert` for a request model."""
    return convert(request.raw_input, request.direction, confirmed=confirmed)
