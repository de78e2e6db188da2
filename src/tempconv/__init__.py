"""Celsius/Fahrenheit conversion with a persisted, bounded history."""

__version__ = "0.3.0"
