from __future__ import annotations

import math

import pytest

from tempconv._internal.units import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    format_number,
    round_temperature,
)


class TestFormulas:
    def test_freezing_point(self) -> None:
        assert celsius_to_fahrenheit(0) == 32.0
        assert fahrenheit_to_celsius(32) == 0.0

    def test_boiling_point(self) -> None:
        assert celsius_to_fahrenheit(100) == 212.0
        assert fahrenheit_to_celsius(212) == 100.0

    def test_minus_forty_is_the_same_on_both_scales(self) -> None:
        assert celsius_to_fahrenheit(-40) == -40.0
        assert fahrenheit_to_celsius(-40) == -40.0

    def test_results_are_unrounded(self) -> None:
        assert fahrenheit_to_celsius(100) == pytest.approx(37.7777777)


class TestRoundTemperature:
    def test_rounds_to_one_decimal(self) -> None:
        assert round_temperature(37.77777) == 37.8
        assert round_temperature(-12.34) == -12.3

    def test_small_values_keep_six_decimals(self) -> None:
        assert round_temperature(0.0123456789) == 0.012346
        assert round_temperature(-0.00004000001) == -0.00004

    def test_threshold_uses_one_decimal(self) -> None:
        assert round_temperature(0.1) == 0.1
        assert round_temperature(0.14) == 0.1

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(34.25, 34.3), (-34.25, -34.3), (0.25, 0.3), (-0.25, -0.3)],
    )
    def test_exact_ties_round_away_from_zero(self, value: float, expected: float) -> None:
        assert round_temperature(value) == expected

    def test_near_ties_follow_the_binary_value(self) -> None:
        # 0.15 and 1.45 are stored just below the tie.
        assert round_temperature(0.15) == 0.1
        assert round_temperature(1.45) == 1.4

    def test_zero_stays_zero(self) -> None:
        assert round_temperature(0.0) == 0.0

    def test_negative_zero_is_normalized(self) -> None:
        result = round_temperature(-0.00000001)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (32.0, "32"),
            (-40.0, "-40"),
            (98.6, "98.6"),
            (1000.5, "1000.5"),
            (0.012346, "0.012346"),
            (1e-06, "0.000001"),
            (-4e-05, "-0.00004"),
            (1e-07, "1e-7"),
            (1.5e-07, "1.5e-7"),
            (-2.5e-10, "-2.5e-10"),
            (0.0, "0"),
            (-0.0, "0"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_number(value) == expected
